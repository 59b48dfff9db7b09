"""Realtime notification helpers for the infrastructure layer."""

from .presence import PresenceRegistry, all_subscribed_identities, presence_registry
from .publisher import (
    NotificationPublisher,
    notification_publisher,
    serialize_notification,
)

__all__ = [
    "PresenceRegistry",
    "presence_registry",
    "all_subscribed_identities",
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
