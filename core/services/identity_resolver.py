"""Resolve mention slugs against forum users and groups."""

import asyncio
from collections.abc import Sequence

import structlog

from core.schemas.mention import ResolvedGroup, ResolvedIdentity, ResolvedUser
from core.services.downstream.identity_client import identity_client

logger = structlog.get_logger(__name__)


class IdentityResolver:
    """Maps slugs to zero-or-one user and zero-or-one group.

    User and group lookups are independent; a slug naming both a user and an
    unrelated group keeps both results.
    """

    def __init__(self, client=identity_client):
        """Initialize the resolver with the identity client to query."""
        self.client = client

    async def resolve_user(self, slug: str) -> ResolvedUser | None:
        """Resolve a slug to a user, None when nobody has it."""
        uid = await self.client.get_user_id_by_slug(slug)
        if not uid:
            return None
        fields = await self.client.get_user_fields(
            uid, ["uid", "username", "fullname"]
        )
        if not fields.get("uid"):
            return None
        return ResolvedUser(
            uid=int(fields["uid"]),
            username=fields.get("username") or slug,
            fullname=fields.get("fullname") or None,
        )

    async def resolve_group(
        self, slug: str, with_members: bool = False
    ) -> ResolvedGroup | None:
        """Resolve a slug to a group, optionally loading its members."""
        name = await self.client.get_group_name_by_slug(slug)
        if not name:
            return None
        members: list[int] = []
        if with_members:
            members = await self.client.get_group_members(name)
        return ResolvedGroup(slug=slug, name=name, member_uids=tuple(members))

    async def resolve(self, slug: str, with_members: bool = False) -> ResolvedIdentity:
        """Resolve one slug; both lookups run concurrently."""
        user, group = await asyncio.gather(
            self.resolve_user(slug), self.resolve_group(slug, with_members)
        )
        identity = ResolvedIdentity(slug=slug, user=user, group=group)
        logger.debug("Mention slug resolved", slug=slug, kind=identity.kind.value)
        return identity

    async def resolve_many(self, slugs: Sequence[str]) -> dict[str, ResolvedIdentity]:
        """Resolve several slugs concurrently, keyed by slug."""
        identities = await asyncio.gather(*(self.resolve(slug) for slug in slugs))
        return {identity.slug: identity for identity in identities}

    async def partition(self, slugs: Sequence[str]) -> tuple[list[str], list[str]]:
        """Split slugs into existing user slugs and existing group slugs.

        A slug may land in both lists; slugs matching neither are dropped.
        """
        user_flags, group_flags = await asyncio.gather(
            asyncio.gather(*(self.client.user_exists_by_slug(s) for s in slugs)),
            asyncio.gather(*(self.client.group_exists_by_slug(s) for s in slugs)),
        )
        user_slugs = [slug for slug, found in zip(slugs, user_flags) if found]
        group_slugs = [slug for slug, found in zip(slugs, group_flags) if found]
        return user_slugs, group_slugs

    async def user_ids(self, slugs: Sequence[str]) -> list[int]:
        """Uids of the users behind ``slugs``, in slug order."""
        uids = await asyncio.gather(
            *(self.client.get_user_id_by_slug(slug) for slug in slugs)
        )
        return [uid for uid in uids if uid]

    async def groups_with_members(self, slugs: Sequence[str]) -> list[ResolvedGroup]:
        """Resolve group slugs with their members.

        Returns:
            Groups sorted by name, which fixes the order in which shared
            members are claimed across groups.
        """
        groups = await asyncio.gather(
            *(self.resolve_group(slug, with_members=True) for slug in slugs)
        )
        return sorted((group for group in groups if group), key=lambda g: g.name)


identity_resolver = IdentityResolver()
