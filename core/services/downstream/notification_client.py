"""Client for the forum notification API."""

from typing import Any

import structlog

from core.schemas.mention import NotificationRecord
from core.services.downstream.base_downstream_client import BaseDownstreamClient

logger = structlog.get_logger(__name__)


class NotificationClient(BaseDownstreamClient):
    """Creates and pushes notifications through the forum host."""

    def __init__(self, **kwargs):
        """Initialize notification client with service configuration."""
        super().__init__(service_name="forum-notifications", **kwargs)

    async def create_notification(
        self, record: NotificationRecord
    ) -> dict[str, Any] | None:
        """Create (or fetch, when the nid exists) a notification.

        Returns:
            The stored notification, or None if the forum declined it.
        """
        data = await self._arequest_json(
            "POST",
            "notifications",
            json_data=record.model_dump(by_alias=True),
        )
        notification = (data or {}).get("notification")
        logger.info(
            "Forum notification created",
            nid=record.nid,
            created=notification is not None,
        )
        return notification

    async def push_notification(
        self, notification: dict[str, Any], uids: list[int]
    ) -> None:
        """Deliver a notification to users."""
        await self._arequest_json(
            "POST",
            "notifications/push",
            json_data={"notification": notification, "uids": uids},
        )
        logger.info(
            "Forum notification pushed",
            nid=notification.get("nid"),
            recipient_count=len(uids),
        )


notification_client = NotificationClient()
