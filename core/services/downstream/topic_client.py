"""Client for forum topics and posts."""

from typing import Any

import structlog

from core.services.downstream.base_downstream_client import (
    BaseDownstreamClient,
    as_uids,
)

logger = structlog.get_logger(__name__)


class TopicClient(BaseDownstreamClient):
    """Reads topic and post data from the forum host."""

    def __init__(self, **kwargs):
        """Initialize topic client with service configuration."""
        super().__init__(service_name="forum-topics", **kwargs)

    async def get_topic_fields(self, tid: int, fields: list[str]) -> dict[str, Any]:
        """Fetch selected fields of a topic; empty dict when unknown."""
        data = await self._arequest_json(
            "GET", f"topics/{tid}", params={"fields": ",".join(fields)}
        )
        return data or {}

    async def get_topic_followers(self, tid: int) -> list[int]:
        """Uids of users following a topic."""
        data = await self._arequest_json("GET", f"topics/{tid}/followers")
        return as_uids((data or {}).get("uids"))

    async def get_topic_uids(self, tid: int) -> list[int]:
        """Uids of users who posted in a topic."""
        data = await self._arequest_json("GET", f"topics/{tid}/uids")
        return as_uids((data or {}).get("uids"))

    async def get_post_field(self, pid: int, field: str) -> Any:
        """Fetch one field of a post, None when the post is unknown."""
        data = await self._arequest_json(
            "GET", f"posts/{pid}", params={"fields": field}
        )
        return (data or {}).get(field)

    async def filter_uids_ignoring_topic(self, tid: int, uids: list[int]) -> list[int]:
        """Drop uids of users who ignore the topic."""
        if not uids:
            return []
        data = await self._arequest_json(
            "POST", f"topics/{tid}/ignoring/filter", json_data={"uids": uids}
        )
        return as_uids((data or {}).get("uids"))


topic_client = TopicClient()
