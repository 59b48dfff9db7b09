"""Registry of brokers that currently hold a live notification websocket."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import Any

from realty.domain.entities import Broker

logger = logging.getLogger(__name__)


class PresenceRegistry:
    """Map each broker email to the one websocket it is connected through.

    A reconnect replaces the stored handle without closing the previous one.
    Removal compares handles by identity, so the late disconnect of a stale
    socket never evicts the newer connection of the same broker.
    """

    def __init__(self) -> None:
        self._handles: dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, broker_email: str, handle: Any) -> None:
        """Store ``handle`` as the live connection for ``broker_email``."""

        if not broker_email:
            raise ValueError("Broker identity is required to register a connection")

        with self._lock:
            previous = self._handles.get(broker_email)
            self._handles[broker_email] = handle

        if previous is not None and previous is not handle:
            logger.warning("Replaced live connection for broker %s", broker_email)

    def unregister(self, broker_email: str, handle: Any) -> bool:
        """Drop the entry for ``broker_email`` only if it still points to ``handle``."""

        with self._lock:
            current = self._handles.get(broker_email)
            if current is None or current is not handle:
                return False
            del self._handles[broker_email]
        return True

    def lookup(self, broker_email: str) -> Any | None:
        """Return the live handle for ``broker_email`` or ``None`` when offline."""

        return self._handles.get(broker_email)

    def online_identities(self) -> set[str]:
        with self._lock:
            return set(self._handles)

    def clear(self) -> None:
        with self._lock:
            self._handles.clear()

    def __contains__(self, broker_email: object) -> bool:
        return broker_email in self._handles

    def __len__(self) -> int:
        return len(self._handles)


def all_subscribed_identities(brokers: Iterable[Broker]) -> set[str]:
    """Return the emails of the brokers whose subscription flag is set."""

    return {broker.email for broker in brokers if broker.is_subscribed}


presence_registry = PresenceRegistry()


__all__ = ["PresenceRegistry", "all_subscribed_identities", "presence_registry"]
