"""Domain entities describing admin notifications and their recipients."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

CATEGORY_MANUAL = "manual"
CATEGORY_AUTOMATED = "automated"
NOTIFICATION_CATEGORIES = frozenset({CATEGORY_MANUAL, CATEGORY_AUTOMATED})

CHANNEL_IN_APP = "in-app"
CHANNEL_EMAIL = "email"
NOTIFICATION_CHANNELS = frozenset({CHANNEL_IN_APP, CHANNEL_EMAIL})


class RecipientKind(str, Enum):
    """Tag of the recipient variant."""

    BROKER = "broker"
    ALL_BROKERS = "all_brokers"
    ALL_SUBSCRIBED_BROKERS = "all_subscribed_brokers"


_SENTINEL_LABELS = {
    RecipientKind.ALL_BROKERS: "All Brokers",
    RecipientKind.ALL_SUBSCRIBED_BROKERS: "All Subscribed Brokers",
}


@dataclass(frozen=True)
class Recipient:
    """Either one concrete broker or one of the broadcast groups."""

    kind: RecipientKind
    broker_email: str | None = None

    def __post_init__(self) -> None:
        if self.kind is RecipientKind.BROKER and not self.broker_email:
            raise ValueError("An individual recipient requires a broker email")
        if self.kind is not RecipientKind.BROKER and self.broker_email is not None:
            raise ValueError("Broadcast recipients cannot name a broker")

    @classmethod
    def individual(cls, broker_email: str) -> "Recipient":
        return cls(RecipientKind.BROKER, broker_email)

    @classmethod
    def all_brokers(cls) -> "Recipient":
        return cls(RecipientKind.ALL_BROKERS)

    @classmethod
    def all_subscribed_brokers(cls) -> "Recipient":
        return cls(RecipientKind.ALL_SUBSCRIBED_BROKERS)

    @property
    def label(self) -> str:
        """Stored text form: the broker email or the sentinel group name."""

        if self.kind is RecipientKind.BROKER:
            return self.broker_email or ""
        return _SENTINEL_LABELS[self.kind]


@dataclass
class Notification:
    """Message created by an admin and pushed to one or many brokers."""

    id: int | None
    recipient: Recipient
    category: str
    channel: str
    message: str
    delivery_time: datetime
    read: bool = False
    created_at: datetime | None = None

    @property
    def broker_email(self) -> str | None:
        """Indexed personal-inbox field; absent for broadcasts."""

        if self.recipient.kind is RecipientKind.BROKER:
            return self.recipient.broker_email
        return None


__all__ = [
    "CATEGORY_AUTOMATED",
    "CATEGORY_MANUAL",
    "CHANNEL_EMAIL",
    "CHANNEL_IN_APP",
    "NOTIFICATION_CATEGORIES",
    "NOTIFICATION_CHANNELS",
    "Notification",
    "Recipient",
    "RecipientKind",
]
