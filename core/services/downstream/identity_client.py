"""Client for forum users and groups."""

from typing import Any
from urllib.parse import quote

import structlog

from core.services.downstream.base_downstream_client import (
    BaseDownstreamClient,
    as_uids,
)

logger = structlog.get_logger(__name__)


class IdentityClient(BaseDownstreamClient):
    """Looks up users and groups on the forum host."""

    def __init__(self, **kwargs):
        """Initialize identity client with service configuration."""
        super().__init__(service_name="forum-identity", **kwargs)

    async def user_exists_by_slug(self, slug: str) -> bool:
        """Whether a user with this userslug exists."""
        data = await self._arequest_json("GET", f"users/slug/{quote(slug)}/exists")
        return bool(data and data.get("exists"))

    async def get_user_id_by_slug(self, slug: str) -> int | None:
        """Resolve a userslug to a uid, None when unknown."""
        data = await self._arequest_json("GET", f"users/slug/{quote(slug)}")
        if not data or not data.get("uid"):
            return None
        return int(data["uid"])

    async def get_user_fields(self, uid: int, fields: list[str]) -> dict[str, Any]:
        """Fetch selected fields of a user; empty dict when unknown."""
        data = await self._arequest_json(
            "GET", f"users/{uid}", params={"fields": ",".join(fields)}
        )
        return data or {}

    async def get_users(self, uids: list[int]) -> list[dict[str, Any]]:
        """Fetch public user records for several uids."""
        if not uids:
            return []
        data = await self._arequest_json("POST", "users/lookup", json_data={"uids": uids})
        return (data or {}).get("users", [])

    async def get_user_settings(self, uids: list[int]) -> list[dict[str, Any]]:
        """Fetch user settings (``showfullname``...) in the order of ``uids``."""
        if not uids:
            return []
        data = await self._arequest_json(
            "POST", "users/settings", json_data={"uids": uids}
        )
        return (data or {}).get("settings", [])

    async def search_users(
        self, query: str, search_by: str = "username"
    ) -> list[dict[str, Any]]:
        """Search users by username or fullname."""
        data = await self._arequest_json(
            "GET", "users/search", params={"query": query, "searchBy": search_by}
        )
        return (data or {}).get("users", [])

    async def group_exists_by_slug(self, slug: str) -> bool:
        """Whether a group with this slug exists."""
        data = await self._arequest_json("GET", f"groups/slug/{quote(slug)}/exists")
        return bool(data and data.get("exists"))

    async def get_group_name_by_slug(self, slug: str) -> str | None:
        """Canonical group name for a slug, None when unknown."""
        data = await self._arequest_json("GET", f"groups/slug/{quote(slug)}")
        return (data or {}).get("name") or None

    async def get_group_members(self, name: str) -> list[int]:
        """Every member uid of a group."""
        data = await self._arequest_json(
            "GET", f"groups/{quote(name, safe='')}/members"
        )
        return as_uids((data or {}).get("uids"))

    async def get_visible_groups(self) -> list[str]:
        """Names of publicly visible groups, newest first."""
        data = await self._arequest_json("GET", "groups/visible")
        return (data or {}).get("groups", [])


identity_client = IdentityClient()
