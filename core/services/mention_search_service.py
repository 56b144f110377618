"""Autocomplete helpers for the post composer."""

import asyncio
from typing import Any

import structlog
from django.utils.html import escape

from core.config.mentions_settings import MentionsSettings
from core.schemas.mention import ForumUser, UserSearchRequest
from core.services.downstream.identity_client import identity_client
from core.services.downstream.topic_client import topic_client
from core.services.privilege_filter import privilege_filter

logger = structlog.get_logger(__name__)


class MentionSearchService:
    """Lists groups and users that can be mentioned."""

    def __init__(
        self, identities=identity_client, topics=topic_client, privileges=privilege_filter
    ):
        """Initialize the service with its collaborators."""
        self.identities = identities
        self.topics = topics
        self.privileges = privileges

    async def list_groups(self, config: MentionsSettings) -> list[str]:
        """Visible group names offered by autocomplete, HTML-escaped."""
        if not config.autofill_groups:
            return []
        excluded = set(config.no_mention_groups)
        groups = await self.identities.get_visible_groups()
        return [escape(name) for name in groups if name and name not in excluded]

    async def _show_fullname_flags(self, users: list[dict[str, Any]]) -> list[bool]:
        user_settings = await self.identities.get_user_settings(
            [int(user["uid"]) for user in users]
        )
        return [bool(entry.get("showfullname")) for entry in user_settings]

    async def strip_disallowed_fullnames(
        self, users: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Blank the fullname of users who keep it private."""
        if not users:
            return []
        flags = await self._show_fullname_flags(users)
        return [
            user if show else {**user, "fullname": None}
            for user, show in zip(users, flags)
        ]

    async def filter_disallowed_fullnames(
        self, users: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Drop users who keep their fullname private."""
        if not users:
            return []
        flags = await self._show_fullname_flags(users)
        return [user for user, show in zip(users, flags) if show]

    async def get_topic_users(
        self, tid: int, config: MentionsSettings
    ) -> list[ForumUser]:
        """Users who posted in a topic."""
        uids = await self.topics.get_topic_uids(tid)
        users = await self.identities.get_users(uids)
        if not config.hide_fullname:
            users = await self.strip_disallowed_fullnames(users)
        return [ForumUser.model_validate(user) for user in users]

    async def search_users(
        self, request: UserSearchRequest, config: MentionsSettings
    ) -> list[ForumUser]:
        """Search users by username and, when fullnames are public, fullname.

        A user found by both searches is listed once, from the fullname
        search. Fullname matches of users hiding their fullname are dropped
        so the search cannot reveal them.
        """
        users = await self.identities.search_users(request.query)

        if not config.hide_fullname:
            users, fullname_users = await asyncio.gather(
                self.strip_disallowed_fullnames(users),
                self._search_fullnames(request.query),
            )
            fullname_uids = {user["uid"] for user in fullname_users}
            users = [
                user for user in users if user["uid"] not in fullname_uids
            ] + fullname_users

        if config.privileged_direct_replies and request.composer:
            topic = await self.topics.get_topic_fields(request.composer.tid, ["cid"])
            allowed = await self.privileges.filter(
                [int(user["uid"]) for user in users],
                topic.get("cid"),
                request.composer.to_pid,
            )
            users = [user for user in users if int(user["uid"]) in allowed]

        logger.debug("User search", query=request.query, results=len(users))
        return [ForumUser.model_validate(user) for user in users]

    async def _search_fullnames(self, query: str) -> list[dict[str, Any]]:
        users = await self.identities.search_users(query, search_by="fullname")
        return await self.filter_disallowed_fullnames(users)


mention_search_service = MentionSearchService()
