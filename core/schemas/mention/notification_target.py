"""Notification target and record schemas."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel

MENTION_NOTIFICATION_TYPE = "mention"
MENTION_NOTIFICATION_IMPORTANCE = 6

# Notification class label for direct user mentions; groups use their name
USER_TARGET_LABEL = "user"


class NotificationTarget(BaseSchemaModel):
    """Recipients of one notification class produced by a post.

    A post yields one target for directly mentioned users and one target per
    mentioned group.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    post_id: int
    topic_id: int
    author_uid: int
    recipient_uids: list[int] = Field(default_factory=list)
    recipient_label: str
    body_text: str
    topic_title: str = ""
    content: str = ""

    @property
    def nid(self) -> str:
        """Composite notification ID; repeated creation collapses onto it."""
        return (
            f"tid:{self.topic_id}:pid:{self.post_id}:"
            f"uid:{self.author_uid}:{self.recipient_label}"
        )


class NotificationRecord(BaseSchemaModel):
    """Payload handed to the forum notification API."""

    model_config = ConfigDict(str_strip_whitespace=False)

    type: str = MENTION_NOTIFICATION_TYPE
    body_short: str
    body_long: str
    nid: str
    pid: int
    tid: int
    from_uid: int = Field(..., alias="from")
    path: str
    topic_title: str
    importance: int = MENTION_NOTIFICATION_IMPORTANCE

    @classmethod
    def for_target(cls, target: NotificationTarget) -> "NotificationRecord":
        """Build the notification record for a recipient target."""
        return cls(
            body_short=target.body_text,
            body_long=target.content,
            nid=target.nid,
            pid=target.post_id,
            tid=target.topic_id,
            from_uid=target.author_uid,
            path=f"/post/{target.post_id}",
            topic_title=target.topic_title,
        )
