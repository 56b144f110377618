"""Constants used throughout the mentions service."""

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"

# Fan-out throttling: recipients are checked in batches of this size with a
# pause between batches to spare the privilege and ignore backends
MENTION_BATCH_SIZE = 500
MENTION_BATCH_INTERVAL_SECONDS = 1.0

# Durable record of users already notified for a post
SENT_MENTIONS_KEY_PREFIX = "mentions:sent:"

# Queue used for background dispatch jobs
MENTIONS_QUEUE_NAME = "default"

__all__ = [
    "MENTIONS_QUEUE_NAME",
    "MENTION_BATCH_INTERVAL_SECONDS",
    "MENTION_BATCH_SIZE",
    "REQUEST_ID_HEADER",
    "SENT_MENTIONS_KEY_PREFIX",
]
