"""Mention schemas."""

from core.schemas.mention.content_span import ContentSpan
from core.schemas.mention.dispatch_summary import DispatchSummary, TargetDelivery
from core.schemas.mention.forum_user import ForumUser
from core.schemas.mention.mention_candidate import MentionCandidate
from core.schemas.mention.notification_target import (
    MENTION_NOTIFICATION_IMPORTANCE,
    MENTION_NOTIFICATION_TYPE,
    USER_TARGET_LABEL,
    NotificationRecord,
    NotificationTarget,
)
from core.schemas.mention.post_data import PostData
from core.schemas.mention.request import (
    CleanContentRequest,
    ComposerContext,
    ParseContentRequest,
    UserSearchRequest,
)
from core.schemas.mention.resolved_identity import (
    ResolvedGroup,
    ResolvedIdentity,
    ResolvedUser,
)
from core.schemas.mention.response import (
    ContentResponse,
    DispatchQueuedResponse,
    GroupListResponse,
    UserListResponse,
)

__all__ = [
    "MENTION_NOTIFICATION_IMPORTANCE",
    "MENTION_NOTIFICATION_TYPE",
    "USER_TARGET_LABEL",
    "CleanContentRequest",
    "ComposerContext",
    "ContentResponse",
    "ContentSpan",
    "DispatchQueuedResponse",
    "DispatchSummary",
    "ForumUser",
    "GroupListResponse",
    "MentionCandidate",
    "NotificationRecord",
    "NotificationTarget",
    "ParseContentRequest",
    "PostData",
    "ResolvedGroup",
    "ResolvedIdentity",
    "ResolvedUser",
    "TargetDelivery",
    "UserListResponse",
    "UserSearchRequest",
]
