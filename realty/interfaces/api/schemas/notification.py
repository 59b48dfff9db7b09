"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import EmailStr, Field

from realty.domain.entities import Recipient

from .common import CamelModel, IdStr


class BrokerRecipient(CamelModel):
    """A single broker, addressed by email."""

    type: Literal["broker"]
    email: EmailStr

    def to_domain(self) -> Recipient:
        return Recipient.individual(str(self.email))


class AllBrokersRecipient(CamelModel):
    type: Literal["all_brokers"]

    def to_domain(self) -> Recipient:
        return Recipient.all_brokers()


class AllSubscribedBrokersRecipient(CamelModel):
    type: Literal["all_subscribed_brokers"]

    def to_domain(self) -> Recipient:
        return Recipient.all_subscribed_brokers()


RecipientIn = Annotated[
    Union[BrokerRecipient, AllBrokersRecipient, AllSubscribedBrokersRecipient],
    Field(discriminator="type"),
]


class NotificationCreate(CamelModel):
    """Payload used by the admin panel to create a notification."""

    recipient: RecipientIn | None = None
    category: str | None = None
    channel: str | None = None
    message: str | None = None
    delivery_time: str | None = Field(
        default=None, description="ISO-8601 date-time the notification is dated at"
    )


class NotificationRead(CamelModel):
    """Representation of a notification delivered to the client."""

    id: IdStr = Field(alias="_id")
    recipient: str
    recipient_type: str
    broker_email: str | None = None
    category: str
    channel: str
    message: str
    delivery_time: datetime
    read: bool
    created_at: datetime | None = None


class NotificationList(CamelModel):
    data: list[NotificationRead]


__all__ = [
    "AllBrokersRecipient",
    "AllSubscribedBrokersRecipient",
    "BrokerRecipient",
    "NotificationCreate",
    "NotificationList",
    "NotificationRead",
    "RecipientIn",
]
