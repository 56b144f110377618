"""Shared helpers for the core app."""

from core.utils.batching import process_in_batches

__all__ = ["process_in_batches"]
