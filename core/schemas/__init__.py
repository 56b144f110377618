"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.mention import (
    ContentSpan,
    DispatchSummary,
    ForumUser,
    MentionCandidate,
    NotificationRecord,
    NotificationTarget,
    PostData,
    ResolvedIdentity,
)

__all__ = [
    "ContentSpan",
    "DependencyHealth",
    "DispatchSummary",
    "ForumUser",
    "LivenessResponse",
    "MentionCandidate",
    "NotificationRecord",
    "NotificationTarget",
    "PostData",
    "ReadinessResponse",
    "ResolvedIdentity",
]
