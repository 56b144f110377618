"""Service dispatching mention notifications for a new post."""

import asyncio

import structlog

from core.config.mentions_settings import MentionsSettings
from core.exceptions import MentionDispatchError
from core.mentions import clean, extract_candidates, unique_slugs
from core.schemas.mention import (
    ContentSpan,
    DispatchSummary,
    NotificationTarget,
    PostData,
    TargetDelivery,
)
from core.services.downstream.identity_client import identity_client
from core.services.downstream.topic_client import topic_client
from core.services.identity_resolver import identity_resolver
from core.services.mention_delivery_service import mention_delivery_service
from core.services.privilege_filter import privilege_filter
from core.services.recipient_aggregator import recipient_aggregator

logger = structlog.get_logger(__name__)


class MentionNotificationService:
    """Service for handling the post-created mention fan-out."""

    def __init__(
        self,
        resolver=identity_resolver,
        aggregator=recipient_aggregator,
        privileges=privilege_filter,
        delivery=mention_delivery_service,
        identities=identity_client,
        topics=topic_client,
    ):
        """Initialize the service with its collaborators."""
        self.resolver = resolver
        self.aggregator = aggregator
        self.privileges = privileges
        self.delivery = delivery
        self.identities = identities
        self.topics = topics

    def mentioned_slugs(self, content: str, config: MentionsSettings) -> list[str]:
        """Distinct mentionable slugs in raw post content.

        Code and blockquotes are removed first; the no-mention groups are
        never returned.
        """
        cleaned = clean(content, True, True, True)
        candidates = extract_candidates(
            [ContentSpan(text=cleaned)], exclude=config.no_mention_groups
        )
        return unique_slugs(candidates)

    async def _followers(self, post: PostData, config: MentionsSettings) -> list[int]:
        if not config.disable_followed_topics:
            return []
        return await self.topics.get_topic_followers(post.tid)

    async def build_targets(
        self, post: PostData, config: MentionsSettings
    ) -> list[NotificationTarget]:
        """Resolve the post's mentions into notification targets.

        Returns:
            The direct-mention target followed by one target per group,
            or an empty list when nothing in the post is mentionable.
        """
        slugs = self.mentioned_slugs(post.content, config)
        if not slugs:
            return []

        user_slugs, group_slugs = await self.resolver.partition(slugs)
        if not user_slugs and not group_slugs:
            logger.debug("No mention resolved", post_id=post.pid, slugs=slugs)
            return []

        topic, author, uids, groups, followers = await asyncio.gather(
            self.topics.get_topic_fields(post.tid, ["title", "cid"]),
            self.identities.get_user_fields(post.uid, ["username"]),
            self.resolver.user_ids(user_slugs),
            self.resolver.groups_with_members(group_slugs),
            self._followers(post, config),
        )

        direct = self.aggregator.direct_recipients(uids, post.uid, followers)
        if config.privileged_direct_replies and direct:
            to_pid = await self.topics.get_post_field(post.pid, "toPid")
            cid = post.cid if post.cid is not None else topic.get("cid")
            direct = await self.privileges.filter(direct, cid, to_pid)

        expanded = self.aggregator.group_recipients(
            groups, direct, post.uid, followers
        )
        return self.aggregator.build_targets(
            post,
            direct,
            expanded,
            author.get("username") or "",
            topic.get("title"),
        )

    async def notify(self, post: PostData, config: MentionsSettings) -> DispatchSummary:
        """Notify every user mentioned by a new post.

        Targets are delivered concurrently. A failing target does not stop
        the others; once all are done the failures are raised together.

        Args:
            post: The created post
            config: Mentions settings snapshot

        Returns:
            DispatchSummary listing the users notified per target

        Raises:
            MentionDispatchError: If any target failed
        """
        logger.info("Dispatching mention notifications", post_id=post.pid, tid=post.tid)

        targets = await self.build_targets(post, config)
        summary = DispatchSummary(post_id=post.pid)
        if not targets:
            return summary

        results = await asyncio.gather(
            *(self.delivery.deliver(target, config) for target in targets),
            return_exceptions=True,
        )

        failed = []
        for target, result in zip(targets, results):
            if isinstance(result, BaseException):
                logger.error(
                    "Mention target delivery failed",
                    post_id=post.pid,
                    target=target.recipient_label,
                    error=str(result),
                    exc_info=result,
                )
                failed.append(target.recipient_label)
                continue
            summary.deliveries.append(
                TargetDelivery(
                    recipient_label=target.recipient_label, delivered_uids=result
                )
            )

        if failed:
            raise MentionDispatchError(post.pid, failed)

        logger.info(
            "Mention notifications dispatched",
            post_id=post.pid,
            delivered=summary.delivered_count,
        )
        return summary


mention_notification_service = MentionNotificationService()
