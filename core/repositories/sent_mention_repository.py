"""Repository for the per-post sent-mentions sets."""

from collections.abc import Sequence

from core.models import SentMention
from core.models.sent_mention import sent_mentions_key


class SentMentionRepository:
    """Repository for encapsulating sent-mentions queries.

    Membership additions are idempotent: adding a uid already in a post's
    set leaves the stored row untouched.
    """

    @staticmethod
    async def are_members(post_id: int, uids: Sequence[int]) -> list[bool]:
        """Check which uids were already notified for a post.

        Args:
            post_id: Post whose set is queried
            uids: Candidate recipient uids

        Returns:
            One flag per uid, in the order of ``uids``
        """
        if not uids:
            return []
        members = {
            user_id
            async for user_id in SentMention.objects.filter(
                set_key=sent_mentions_key(post_id), user_id__in=list(uids)
            ).values_list("user_id", flat=True)
        }
        return [uid in members for uid in uids]

    @staticmethod
    async def add(post_id: int, uids: Sequence[int], scores: Sequence[int]) -> None:
        """Add uids to a post's set.

        Args:
            post_id: Post whose set grows
            uids: Delivered uids
            scores: Millisecond timestamps, one per uid
        """
        if len(uids) != len(scores):
            raise ValueError("uids and scores must have the same length")
        if not uids:
            return
        key = sent_mentions_key(post_id)
        await SentMention.objects.abulk_create(
            [
                SentMention(set_key=key, user_id=uid, score=score)
                for uid, score in zip(uids, scores, strict=True)
            ],
            ignore_conflicts=True,
        )
