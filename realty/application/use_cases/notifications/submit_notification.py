"""Use case for creating and pushing an admin notification."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from realty.domain.entities import (
    NOTIFICATION_CATEGORIES,
    NOTIFICATION_CHANNELS,
    Notification,
    Recipient,
    RecipientKind,
)
from realty.domain.errors import DeliveryFailure, NotFoundError, ValidationError
from realty.infrastructure.notifications import NotificationPublisher, notification_publisher
from realty.infrastructure.repositories import BrokerRepository, NotificationRepository
from realty.utils import now_in_app_timezone, parse_datetime

from .recipients import resolve_recipient_emails

logger = logging.getLogger(__name__)


def submit_notification(
    session: Session,
    *,
    recipient: Recipient | None,
    category: str | None,
    channel: str | None,
    message: str | None,
    delivery_time: datetime | str | None,
    publisher: NotificationPublisher | None = None,
) -> Notification:
    """Persist a notification and push it to every addressed broker that is online.

    The record is committed before any recipient is resolved, so a broker that
    is offline (or a socket that fails mid-send) still finds it in the inbox.
    """

    missing = [
        name
        for name, value in (
            ("recipient", recipient),
            ("category", category),
            ("channel", channel),
            ("message", message),
            ("deliveryTime", delivery_time),
        )
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    if category not in NOTIFICATION_CATEGORIES:
        raise ValidationError(
            f"Invalid category '{category}'. Expected one of: "
            + ", ".join(sorted(NOTIFICATION_CATEGORIES))
        )
    if channel not in NOTIFICATION_CHANNELS:
        raise ValidationError(
            f"Invalid channel '{channel}'. Expected one of: "
            + ", ".join(sorted(NOTIFICATION_CHANNELS))
        )

    parsed_delivery_time = parse_datetime(delivery_time)
    if parsed_delivery_time is None:
        raise ValidationError("deliveryTime must be a valid date-time")

    if recipient.kind is RecipientKind.BROKER and not BrokerRepository(session).exists(
        recipient.broker_email
    ):
        raise NotFoundError("Broker not found")

    repository = NotificationRepository(session)
    try:
        saved = repository.create(
            Notification(
                id=None,
                recipient=recipient,
                category=category,
                channel=channel,
                message=message.strip(),
                delivery_time=parsed_delivery_time,
                read=False,
                created_at=now_in_app_timezone(),
            )
        )
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info(
        "Notification %s stored for %s", saved.id, saved.recipient.label
    )

    try:
        broker_emails = resolve_recipient_emails(session, saved.recipient)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("%s", DeliveryFailure(saved.recipient.label, exc))
        return saved

    delivered = (publisher or notification_publisher).dispatch(saved, broker_emails)
    logger.info(
        "Notification %s pushed live to %d of %d brokers",
        saved.id,
        len(delivered),
        len(broker_emails),
    )
    return saved


__all__ = ["submit_notification"]
