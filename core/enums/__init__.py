"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.mention import DisplayMode, IdentityKind

__all__ = ["DisplayMode", "HealthStatus", "IdentityKind"]
