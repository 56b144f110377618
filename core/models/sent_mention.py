"""SentMention model."""

from typing import ClassVar

from django.db import models

from core.constants import SENT_MENTIONS_KEY_PREFIX


def sent_mentions_key(post_id: int) -> str:
    """Name of the sent-mentions set of a post."""
    return f"{SENT_MENTIONS_KEY_PREFIX}{post_id}"


class SentMention(models.Model):
    """Member of a post's sent-mentions set.

    Each post owns one ordered set keyed ``mentions:sent:<pid>``; members are
    the uids already notified for that post, scored by the millisecond
    timestamp of the delivery. Rows are only ever added.
    """

    set_key = models.CharField(max_length=64, db_index=True)
    user_id = models.BigIntegerField()
    score = models.BigIntegerField()

    class Meta:
        """Django model metadata."""

        db_table = "sent_mentions"
        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.UniqueConstraint(
                fields=["set_key", "user_id"], name="unique_sent_mention_member"
            )
        ]
        ordering: ClassVar[list[str]] = ["set_key", "score"]

    def __str__(self) -> str:
        """Return string representation of the set member."""
        return f"{self.set_key} <- {self.user_id}"

    def __repr__(self) -> str:
        """Return detailed representation of the set member."""
        return (
            f"<SentMention(set_key={self.set_key}, user_id={self.user_id}, "
            f"score={self.score})>"
        )
