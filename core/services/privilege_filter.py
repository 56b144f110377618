"""Keep forum staff out of mention notifications unless replied to."""

import asyncio
from collections.abc import Sequence

import structlog

from core.services.downstream.privilege_client import privilege_client
from core.services.downstream.topic_client import topic_client

logger = structlog.get_logger(__name__)


class PrivilegeFilter:
    """Drops administrators and category moderators from recipient lists.

    The author of the post being replied to is always kept.
    """

    def __init__(self, privileges=privilege_client, topics=topic_client):
        """Initialize the filter with its forum clients."""
        self.privileges = privileges
        self.topics = topics

    async def reply_target_uid(self, to_pid: int | None) -> int | None:
        """Author uid of the post being replied to."""
        if not to_pid:
            return None
        uid = await self.topics.get_post_field(int(to_pid), "uid")
        return int(uid) if uid else None

    async def _is_staff(self, uid: int, cid: int | None) -> bool:
        is_admin, is_mod = await asyncio.gather(
            self.privileges.is_administrator(uid),
            self.privileges.is_moderator(uid, cid),
        )
        return is_admin or is_mod

    async def filter(
        self, uids: Sequence[int], cid: int | None, to_pid: int | None
    ) -> list[int]:
        """Filter staff out of ``uids``.

        Args:
            uids: Candidate recipients
            cid: Category of the post (moderators are checked against it)
            to_pid: Post being replied to, if any

        Returns:
            Remaining uids in their original order
        """
        if not uids:
            return []
        reply_uid = await self.reply_target_uid(to_pid)

        async def keep(uid: int) -> bool:
            if uid == reply_uid:
                return True
            return not await self._is_staff(uid, cid)

        flags = await asyncio.gather(*(keep(uid) for uid in uids))
        kept = [uid for uid, flag in zip(uids, flags) if flag]
        if len(kept) != len(uids):
            logger.info(
                "Privileged recipients filtered",
                dropped=len(uids) - len(kept),
                reply_uid=reply_uid,
            )
        return kept


privilege_filter = PrivilegeFilter()
