"""Mention-related enumerations."""

from enum import Enum


class DisplayMode(str, Enum):
    """Visible text used when a user mention is rewritten into a link."""

    DEFAULT = ""
    USERNAME = "username"
    FULLNAME = "fullname"


class IdentityKind(str, Enum):
    """What a mention slug resolved to."""

    USER = "user"
    GROUP = "group"
    NONE = "none"
