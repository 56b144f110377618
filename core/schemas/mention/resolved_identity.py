"""Resolved identity schemas for mention slugs."""

from pydantic import BaseModel, ConfigDict, Field

from core.enums.mention import IdentityKind


class ResolvedUser(BaseModel):
    """A forum user a mention slug resolved to."""

    model_config = ConfigDict(frozen=True)

    kind: IdentityKind = IdentityKind.USER
    uid: int
    username: str
    fullname: str | None = None


class ResolvedGroup(BaseModel):
    """A forum group a mention slug resolved to."""

    model_config = ConfigDict(frozen=True)

    kind: IdentityKind = IdentityKind.GROUP
    slug: str
    name: str
    member_uids: tuple[int, ...] = Field(default_factory=tuple)


class ResolvedIdentity(BaseModel):
    """Outcome of resolving one slug.

    A slug may match a user and an unrelated group at the same time; both
    are kept. Links prefer the user.
    """

    model_config = ConfigDict(frozen=True)

    slug: str
    user: ResolvedUser | None = None
    group: ResolvedGroup | None = None

    @property
    def kind(self) -> IdentityKind:
        """Kind used for the link target."""
        if self.user is not None:
            return IdentityKind.USER
        if self.group is not None:
            return IdentityKind.GROUP
        return IdentityKind.NONE

    @property
    def link_target(self) -> ResolvedUser | ResolvedGroup | None:
        """The variant a rewritten mention links to."""
        return self.user or self.group
