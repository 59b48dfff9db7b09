"""Unit tests for the broker presence registry."""

from __future__ import annotations

import threading

import pytest

from realty.domain.entities import Broker
from realty.infrastructure.notifications import PresenceRegistry, all_subscribed_identities


def _broker(email: str, subscribed: bool) -> Broker:
    return Broker(id=None, email=email, password="x", full_name=email, is_subscribed=subscribed)


def test_lookup_returns_registered_handle():
    registry = PresenceRegistry()
    handle = object()

    registry.register("a@example.com", handle)

    assert registry.lookup("a@example.com") is handle
    assert "a@example.com" in registry
    assert len(registry) == 1


def test_lookup_of_unknown_broker_is_none():
    assert PresenceRegistry().lookup("ghost@example.com") is None


def test_reconnect_replaces_previous_handle():
    registry = PresenceRegistry()
    old, new = object(), object()

    registry.register("a@example.com", old)
    registry.register("a@example.com", new)

    assert registry.lookup("a@example.com") is new
    assert len(registry) == 1


def test_stale_disconnect_does_not_evict_newer_connection():
    registry = PresenceRegistry()
    stale, fresh = object(), object()
    registry.register("a@example.com", stale)
    registry.register("a@example.com", fresh)

    removed = registry.unregister("a@example.com", stale)

    assert removed is False
    assert registry.lookup("a@example.com") is fresh


def test_unregister_with_matching_handle_removes_entry():
    registry = PresenceRegistry()
    handle = object()
    registry.register("a@example.com", handle)

    assert registry.unregister("a@example.com", handle) is True
    assert registry.lookup("a@example.com") is None
    assert registry.unregister("a@example.com", handle) is False


def test_unregister_compares_identity_not_equality():
    registry = PresenceRegistry()
    stored, lookalike = {"socket": 1}, {"socket": 1}
    registry.register("a@example.com", stored)

    assert registry.unregister("a@example.com", lookalike) is False
    assert registry.lookup("a@example.com") is stored


def test_register_requires_identity():
    with pytest.raises(ValueError):
        PresenceRegistry().register("", object())


def test_online_identities_and_clear():
    registry = PresenceRegistry()
    registry.register("a@example.com", object())
    registry.register("b@example.com", object())

    assert registry.online_identities() == {"a@example.com", "b@example.com"}

    registry.clear()
    assert registry.online_identities() == set()


def test_concurrent_register_and_unregister_keep_one_entry_per_broker():
    registry = PresenceRegistry()
    handles = [object() for _ in range(50)]

    def churn(handle):
        registry.register("a@example.com", handle)
        registry.unregister("a@example.com", handle)

    threads = [threading.Thread(target=churn, args=(handle,)) for handle in handles]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry) <= 1
    remaining = registry.lookup("a@example.com")
    assert remaining is None or remaining in handles


def test_all_subscribed_identities_filters_on_flag():
    brokers = [
        _broker("a@example.com", True),
        _broker("b@example.com", False),
        _broker("c@example.com", True),
    ]

    assert all_subscribed_identities(brokers) == {"a@example.com", "c@example.com"}
    assert all_subscribed_identities([]) == set()
