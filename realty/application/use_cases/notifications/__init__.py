"""Public helpers for admin notifications."""

from .inbox import fetch_inbox, mark_notification_read, mark_notifications_read
from .recipients import resolve_recipient_emails
from .submit_notification import submit_notification

__all__ = [
    "fetch_inbox",
    "mark_notification_read",
    "mark_notifications_read",
    "resolve_recipient_emails",
    "submit_notification",
]
