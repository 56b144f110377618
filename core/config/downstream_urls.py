"""Downstream service URL configuration.

This module contains base URLs for the forum host whose users, groups,
topics and notifications the mentions service works against.
"""

import os

# Public forum URL - used to build profile and group links in post content
FORUM_BASE_URL = os.getenv("FORUM_BASE_URL", "http://localhost:4567").rstrip("/")

# Forum host API consumed by the downstream clients
FORUM_API_BASE_URL = os.getenv(
    "FORUM_API_BASE_URL", "http://localhost:4567/api/v3/plugins/mentions"
).rstrip("/")

# Bearer token for the forum host API (empty disables the header)
FORUM_API_TOKEN = os.getenv("FORUM_API_TOKEN", "")
