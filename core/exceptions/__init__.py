"""Exception handling utilities for the mentions service."""

from core.exceptions.downstream_exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
)
from core.exceptions.handlers import custom_exception_handler
from core.exceptions.mention_exceptions import MentionDispatchError

__all__ = [
    "DownstreamServiceError",
    "DownstreamServiceUnavailableError",
    "MentionDispatchError",
    "custom_exception_handler",
]
