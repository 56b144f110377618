"""Client for forum privileges."""

import structlog

from core.services.downstream.base_downstream_client import (
    BaseDownstreamClient,
    as_uids,
)

logger = structlog.get_logger(__name__)


class PrivilegeClient(BaseDownstreamClient):
    """Answers read and moderation privilege questions."""

    def __init__(self, **kwargs):
        """Initialize privilege client with service configuration."""
        super().__init__(service_name="forum-privileges", **kwargs)

    async def filter_readable_uids(self, tid: int, uids: list[int]) -> list[int]:
        """Keep the uids allowed to read a topic."""
        if not uids:
            return []
        data = await self._arequest_json(
            "POST", f"privileges/topics/{tid}/read/filter", json_data={"uids": uids}
        )
        return as_uids((data or {}).get("uids"))

    async def is_administrator(self, uid: int) -> bool:
        """Whether a user is a forum administrator."""
        data = await self._arequest_json("GET", f"privileges/users/{uid}/admin")
        return bool(data and data.get("isAdministrator"))

    async def is_moderator(self, uid: int, cid: int | None) -> bool:
        """Whether a user moderates a category (global moderators included)."""
        data = await self._arequest_json(
            "GET",
            f"privileges/users/{uid}/moderator",
            params={"cid": cid} if cid is not None else None,
        )
        return bool(data and data.get("isModerator"))


privilege_client = PrivilegeClient()
