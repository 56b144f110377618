"""Immutable snapshot of the mentions administrator settings.

The forum admin page persists the settings bag with ``on``/``off`` strings and
the group exclusion list as a JSON string. ``MentionsSettings`` normalizes
those values once; services receive the snapshot explicitly instead of
reading a shared mutable bag.
"""

import json
from typing import Any

import structlog
from django.conf import settings
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from core.config.downstream_urls import FORUM_BASE_URL
from core.enums.mention import DisplayMode
from core.schemas.base_schema_model import BaseSchemaModel

logger = structlog.get_logger(__name__)

# Pseudo-groups that can never be mentioned, regardless of configuration
ALWAYS_EXCLUDED_GROUPS = ("registered-users", "guests")


def _parse_switch(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"on", "true", "1", "yes"}


class MentionsSettings(BaseSchemaModel):
    """Settings bag for the mentions feature."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    disable_followed_topics: bool = Field(
        False, description="Do not notify users who already follow the topic"
    )
    autofill_groups: bool = Field(
        False, description="Offer group names in the composer autocomplete"
    )
    disable_group_mentions: tuple[str, ...] = Field(
        (), description="Additional group names that cannot be mentioned"
    )
    override_ignores: bool = Field(
        False, description="Notify users even if they ignore the topic"
    )
    display: DisplayMode = Field(
        DisplayMode.DEFAULT, description="Visible text of rewritten user mentions"
    )
    privileged_direct_replies: bool = Field(
        False, description="Only notify staff when they are replied to directly"
    )
    hide_fullname: bool = Field(
        False, description="Forum-wide switch hiding every user's full name"
    )
    forum_url: str = Field(FORUM_BASE_URL, description="Public forum base URL")

    @field_validator(
        "disable_followed_topics",
        "autofill_groups",
        "override_ignores",
        "privileged_direct_replies",
        "hide_fullname",
        mode="before",
    )
    @classmethod
    def _coerce_switch(cls, value: Any) -> bool:
        return _parse_switch(value)

    @field_validator("display", mode="before")
    @classmethod
    def _coerce_display(cls, value: Any) -> DisplayMode:
        try:
            return DisplayMode(value or "")
        except ValueError:
            logger.error("Unknown mentions display mode, using default", display=value)
            return DisplayMode.DEFAULT

    @field_validator("disable_group_mentions", mode="before")
    @classmethod
    def _coerce_group_list(cls, value: Any) -> tuple[str, ...]:
        """Parse the JSON exclusion list, falling back to an empty list."""
        if isinstance(value, (list, tuple)):
            return tuple(str(name) for name in value)
        try:
            parsed = json.loads(value or "[]")
        except (TypeError, ValueError) as e:
            logger.error(
                "Malformed disableGroupMentions setting, ignoring it",
                value=value,
                error=str(e),
            )
            return ()
        if not isinstance(parsed, list):
            logger.error(
                "disableGroupMentions setting is not a JSON array, ignoring it",
                value=value,
            )
            return ()
        return tuple(str(name) for name in parsed)

    @property
    def no_mention_groups(self) -> tuple[str, ...]:
        """Group names excluded from mention notifications and autocomplete."""
        return ALWAYS_EXCLUDED_GROUPS + self.disable_group_mentions


def load_mentions_settings(overrides: dict[str, Any] | None = None) -> MentionsSettings:
    """Build a settings snapshot from ``settings.MENTIONS``.

    Args:
        overrides: Optional keys (camelCase or snake_case) replacing the
            configured values.

    Returns:
        Frozen MentionsSettings instance.
    """
    raw = dict(getattr(settings, "MENTIONS", {}))
    if overrides:
        raw.update(
            {
                to_camel(key) if "_" in key else key: value
                for key, value in overrides.items()
            }
        )
    return MentionsSettings.model_validate(raw)
