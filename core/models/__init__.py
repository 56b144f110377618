"""Database models for core application."""

from core.models.sent_mention import SentMention

__all__ = ["SentMention"]
