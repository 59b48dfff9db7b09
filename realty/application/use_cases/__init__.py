"""Aggregate application use cases."""

from .brokers import register_broker
from .notifications import fetch_inbox, mark_notification_read, submit_notification
from .users import signup_user

__all__ = [
    "fetch_inbox",
    "mark_notification_read",
    "register_broker",
    "signup_user",
    "submit_notification",
]
