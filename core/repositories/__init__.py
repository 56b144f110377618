"""Repositories for database access."""

from core.repositories.sent_mention_repository import SentMentionRepository

__all__ = ["SentMentionRepository"]
