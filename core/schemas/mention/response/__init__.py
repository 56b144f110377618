"""Mention response schemas."""

from core.schemas.mention.response.content_response import ContentResponse
from core.schemas.mention.response.dispatch_queued_response import (
    DispatchQueuedResponse,
)
from core.schemas.mention.response.group_list_response import GroupListResponse
from core.schemas.mention.response.user_list_response import UserListResponse

__all__ = [
    "ContentResponse",
    "DispatchQueuedResponse",
    "GroupListResponse",
    "UserListResponse",
]
