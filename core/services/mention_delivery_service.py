"""Deliver one mention notification target through the forum."""

import time

import structlog

from core.config.mentions_settings import MentionsSettings
from core.constants import MENTION_BATCH_INTERVAL_SECONDS, MENTION_BATCH_SIZE
from core.repositories import SentMentionRepository
from core.schemas.mention import NotificationRecord, NotificationTarget
from core.services.downstream.notification_client import notification_client
from core.services.downstream.privilege_client import privilege_client
from core.services.downstream.topic_client import topic_client
from core.signals import mentions_notified
from core.utils import process_in_batches

logger = structlog.get_logger(__name__)


class MentionDeliveryService:
    """Creates, filters, pushes and records one notification target.

    Recipients are checked in throttled batches: read privilege, topic
    ignores (unless overridden) and the post's sent-mentions set. Survivors
    of every batch are pushed together once all batches are done.
    """

    def __init__(
        self,
        notifications=notification_client,
        privileges=privilege_client,
        topics=topic_client,
        repository=SentMentionRepository,
        batch_size: int = MENTION_BATCH_SIZE,
        interval: float = MENTION_BATCH_INTERVAL_SECONDS,
    ):
        """Initialize the delivery service with its collaborators."""
        self.notifications = notifications
        self.privileges = privileges
        self.topics = topics
        self.repository = repository
        self.batch_size = batch_size
        self.interval = interval

    async def _deliverable(
        self, target: NotificationTarget, uids: list[int], config: MentionsSettings
    ) -> list[int]:
        uids = await self.privileges.filter_readable_uids(target.topic_id, uids)
        if uids and not config.override_ignores:
            uids = await self.topics.filter_uids_ignoring_topic(target.topic_id, uids)
        if not uids:
            return []
        sent = await self.repository.are_members(target.post_id, uids)
        return [uid for uid, already_sent in zip(uids, sent) if not already_sent]

    async def deliver(
        self, target: NotificationTarget, config: MentionsSettings
    ) -> list[int]:
        """Notify the recipients of a target.

        Args:
            target: Recipient class to notify
            config: Mentions settings snapshot

        Returns:
            Uids actually notified; empty when nothing was pushed
        """
        if not target.recipient_uids:
            return []

        record = NotificationRecord.for_target(target)
        notification = await self.notifications.create_notification(record)
        if not notification:
            logger.warning("Forum did not create mention notification", nid=target.nid)
            return []

        delivered: list[int] = []

        async def check_batch(uids: list[int]) -> None:
            delivered.extend(await self._deliverable(target, uids, config))

        await process_in_batches(
            target.recipient_uids,
            check_batch,
            batch_size=self.batch_size,
            interval=self.interval,
        )

        if not delivered:
            logger.info(
                "No deliverable mention recipients",
                nid=target.nid,
                candidates=len(target.recipient_uids),
            )
            return []

        await mentions_notified.asend(
            sender=self.__class__, notification=notification, uids=delivered
        )
        await self.notifications.push_notification(notification, delivered)

        now = int(time.time() * 1000)
        await self.repository.add(target.post_id, delivered, [now] * len(delivered))

        logger.info(
            "Mention notification delivered",
            nid=target.nid,
            recipient_count=len(delivered),
        )
        return delivered


mention_delivery_service = MentionDeliveryService()
