"""Utility helpers to push notifications to connected brokers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from anyio import from_thread

from realty.domain.entities import Notification
from realty.domain.errors import DeliveryFailure
from realty.utils import isoformat_or_none

from .presence import PresenceRegistry, presence_registry

logger = logging.getLogger(__name__)


class NotificationPublisher:
    """Serialize notifications and schedule their delivery over live sockets.

    Delivery is fire-and-forget: offline brokers are skipped, failed sends are
    logged and dropped, and nothing is retried.
    """

    def __init__(self, registry: PresenceRegistry) -> None:
        self._registry = registry
        self._pending: set[asyncio.Task[None]] = set()

    def dispatch(
        self, notification: Notification, broker_emails: Iterable[str]
    ) -> list[str]:
        """Schedule ``notification`` for every broker in ``broker_emails`` that is online.

        Returns the emails whose live handle was found in the registry.
        """

        message = {"type": "notification", "data": serialize_notification(notification)}
        targets: list[tuple[str, Any]] = []
        for broker_email in sorted({email for email in broker_emails if email}):
            handle = self._registry.lookup(broker_email)
            if handle is not None:
                targets.append((broker_email, handle))
        if targets:
            self._schedule_deliveries(targets, message)
        return [broker_email for broker_email, _ in targets]

    def _schedule_deliveries(
        self, targets: list[tuple[str, Any]], message: dict[str, Any]
    ) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # Sync routes run in an AnyIO worker thread; hop to the loop only
            # to create the send tasks, never to wait for them.
            try:
                from_thread.run_sync(self._start_deliveries, targets, message)
            except RuntimeError as exc:
                for broker_email, _ in targets:
                    _report(DeliveryFailure(broker_email, exc))
        else:
            self._start_deliveries(targets, message)

    def _start_deliveries(
        self, targets: list[tuple[str, Any]], message: dict[str, Any]
    ) -> None:
        loop = asyncio.get_running_loop()
        for broker_email, handle in targets:
            task = loop.create_task(self._deliver(broker_email, handle, dict(message)))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _deliver(
        self, broker_email: str, handle: Any, message: dict[str, Any]
    ) -> None:
        try:
            await handle.send_json(message)
        except Exception as exc:
            _report(DeliveryFailure(broker_email, exc))


def _report(failure: DeliveryFailure) -> None:
    logger.warning("%s", failure)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the wire representation of ``notification``.

    Identifiers are rendered as strings and timestamps as ISO-8601 text.
    """

    return {
        "_id": str(notification.id) if notification.id is not None else None,
        "recipient": notification.recipient.label,
        "recipientType": notification.recipient.kind.value,
        "brokerEmail": notification.broker_email,
        "category": notification.category,
        "channel": notification.channel,
        "message": notification.message,
        "deliveryTime": isoformat_or_none(notification.delivery_time),
        "read": notification.read,
        "createdAt": isoformat_or_none(notification.created_at),
    }


notification_publisher = NotificationPublisher(presence_registry)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "serialize_notification",
]
