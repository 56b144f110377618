"""Django signals fired by the mention pipeline."""

from django.dispatch import Signal

# Sent before pushing a mention notification.
# Keyword arguments: ``notification`` (dict), ``uids`` (list[int]).
mentions_notified = Signal()

__all__ = ["mentions_notified"]
