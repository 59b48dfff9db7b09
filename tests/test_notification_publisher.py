"""Unit tests for the live notification publisher."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from anyio import to_thread

from realty.domain.entities import Notification, Recipient
from realty.infrastructure.notifications import (
    NotificationPublisher,
    PresenceRegistry,
    serialize_notification,
)


def _notification(recipient: Recipient | None = None) -> Notification:
    return Notification(
        id=7,
        recipient=recipient or Recipient.all_brokers(),
        category="manual",
        channel="in-app",
        message="Open house on Saturday",
        delivery_time=datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc),
        read=False,
        created_at=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
    )


def test_serialize_notification_uses_strings_for_ids_and_dates():
    payload = serialize_notification(_notification(Recipient.individual("a@example.com")))

    assert payload == {
        "_id": "7",
        "recipient": "a@example.com",
        "recipientType": "broker",
        "brokerEmail": "a@example.com",
        "category": "manual",
        "channel": "in-app",
        "message": "Open house on Saturday",
        "deliveryTime": "2024-05-01T09:30:00+00:00",
        "read": False,
        "createdAt": "2024-05-01T09:00:00+00:00",
    }


def test_serialize_broadcast_has_no_broker_email():
    payload = serialize_notification(_notification(Recipient.all_subscribed_brokers()))

    assert payload["recipient"] == "All Subscribed Brokers"
    assert payload["recipientType"] == "all_subscribed_brokers"
    assert payload["brokerEmail"] is None


def test_dispatch_pushes_only_to_online_brokers(fake_socket_factory):
    registry = PresenceRegistry()
    online = fake_socket_factory()
    registry.register("a@example.com", online)
    publisher = NotificationPublisher(registry)

    async def scenario():
        delivered = publisher.dispatch(_notification(), ["a@example.com", "c@example.com"])
        await asyncio.sleep(0)
        return delivered

    delivered = asyncio.run(scenario())

    assert delivered == ["a@example.com"]
    assert len(online.sent) == 1
    assert online.sent[0]["type"] == "notification"
    assert online.sent[0]["data"]["_id"] == "7"


def test_dispatch_deduplicates_identities(fake_socket_factory):
    registry = PresenceRegistry()
    socket = fake_socket_factory()
    registry.register("a@example.com", socket)
    publisher = NotificationPublisher(registry)

    async def scenario():
        publisher.dispatch(_notification(), ["a@example.com", "a@example.com", ""])
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert len(socket.sent) == 1


def test_failed_send_is_logged_and_swallowed(fake_socket_factory, caplog):
    registry = PresenceRegistry()
    broken = fake_socket_factory(fail=True)
    healthy = fake_socket_factory()
    registry.register("a@example.com", broken)
    registry.register("b@example.com", healthy)
    publisher = NotificationPublisher(registry)

    async def scenario():
        delivered = publisher.dispatch(_notification(), ["a@example.com", "b@example.com"])
        await asyncio.sleep(0)
        return delivered

    with caplog.at_level(logging.WARNING):
        delivered = asyncio.run(scenario())

    assert delivered == ["a@example.com", "b@example.com"]
    assert len(healthy.sent) == 1
    assert "Delivery to a@example.com failed" in caplog.text


def test_dispatch_without_event_loop_does_not_raise(fake_socket_factory, caplog):
    registry = PresenceRegistry()
    socket = fake_socket_factory()
    registry.register("a@example.com", socket)
    publisher = NotificationPublisher(registry)

    with caplog.at_level(logging.WARNING):
        delivered = publisher.dispatch(_notification(), ["a@example.com"])

    assert delivered == ["a@example.com"]
    assert socket.sent == []
    assert "Delivery to a@example.com failed" in caplog.text


class BlockingSocket:
    """Socket whose send only completes once ``release`` is set."""

    def __init__(self) -> None:
        self.sent: list[dict] = []
        self.release: asyncio.Event | None = None

    async def send_json(self, message: dict) -> None:
        await self.release.wait()
        self.sent.append(message)


def test_dispatch_from_worker_thread_does_not_wait_for_sends(fake_socket_factory):
    registry = PresenceRegistry()
    blocked = BlockingSocket()
    fast = fake_socket_factory()
    registry.register("a@example.com", blocked)
    registry.register("b@example.com", fast)
    publisher = NotificationPublisher(registry)

    async def scenario():
        blocked.release = asyncio.Event()
        delivered = await to_thread.run_sync(
            publisher.dispatch, _notification(), ["a@example.com", "b@example.com"]
        )
        for _ in range(3):
            await asyncio.sleep(0)
        sent_before_release = (len(blocked.sent), len(fast.sent))

        blocked.release.set()
        for _ in range(3):
            await asyncio.sleep(0)
        return delivered, sent_before_release

    delivered, sent_before_release = asyncio.run(scenario())

    assert delivered == ["a@example.com", "b@example.com"]
    assert sent_before_release == (0, 1)
    assert len(blocked.sent) == 1
