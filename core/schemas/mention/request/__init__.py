"""Mention request schemas."""

from core.schemas.mention.request.clean_content_request import CleanContentRequest
from core.schemas.mention.request.parse_content_request import ParseContentRequest
from core.schemas.mention.request.user_search_request import (
    ComposerContext,
    UserSearchRequest,
)

__all__ = [
    "CleanContentRequest",
    "ComposerContext",
    "ParseContentRequest",
    "UserSearchRequest",
]
