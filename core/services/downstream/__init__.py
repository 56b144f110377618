"""Clients for the forum host API."""

from core.services.downstream.identity_client import IdentityClient, identity_client
from core.services.downstream.notification_client import (
    NotificationClient,
    notification_client,
)
from core.services.downstream.privilege_client import (
    PrivilegeClient,
    privilege_client,
)
from core.services.downstream.topic_client import TopicClient, topic_client

__all__ = [
    "IdentityClient",
    "NotificationClient",
    "PrivilegeClient",
    "TopicClient",
    "identity_client",
    "notification_client",
    "privilege_client",
    "topic_client",
]
