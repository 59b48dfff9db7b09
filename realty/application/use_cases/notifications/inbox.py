"""Use cases for reading and acknowledging a broker's notifications."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from realty.domain.entities import Notification
from realty.domain.errors import NotFoundError
from realty.infrastructure.repositories import BrokerRepository, NotificationRepository


def fetch_inbox(
    session: Session, broker_email: str, *, unread_only: bool = False
) -> list[Notification]:
    """Return every notification ``broker_email`` could have been pushed, newest first."""

    broker = BrokerRepository(session).get_by_email(broker_email)
    if broker is None:
        raise NotFoundError("Broker not found")

    return list(
        NotificationRepository(session).list_inbox(
            broker.email,
            include_subscribed_broadcasts=broker.is_subscribed,
            unread_only=unread_only,
        )
    )


def mark_notification_read(session: Session, notification_id: int) -> Notification:
    """Flip the read flag of ``notification_id``; repeating the call is harmless."""

    notification = NotificationRepository(session).mark_as_read(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification


def mark_notifications_read(
    session: Session, broker_email: str, notification_ids: Iterable[int]
) -> int:
    """Mark a batch of ``broker_email``'s notifications as read.

    Identifiers that are unknown or outside the broker's inbox are ignored.
    """

    broker = BrokerRepository(session).get_by_email(broker_email)
    if broker is None:
        raise NotFoundError("Broker not found")

    unique_ids = {int(notification_id) for notification_id in notification_ids}
    return NotificationRepository(session).mark_many_as_read(
        sorted(unique_ids),
        broker_email=broker.email,
        include_subscribed_broadcasts=broker.is_subscribed,
    )


__all__ = ["fetch_inbox", "mark_notification_read", "mark_notifications_read"]
