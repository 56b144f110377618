"""Mention candidate schema."""

from pydantic import BaseModel, ConfigDict


class MentionCandidate(BaseModel):
    """An ``@identifier`` token found in unprotected content.

    ``raw`` keeps the leading ``@`` and is what gets replaced in the content;
    ``slug`` is the normalized identifier used for lookups.
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    slug: str
