"""Broker schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from .common import CamelModel, IdStr


class BrokerRegister(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1, max_length=120)
    phone: str | None = None
    license: str | None = None
    agency: str | None = None
    profile_image_url: str | None = None


class BrokerLogin(CamelModel):
    email: EmailStr
    password: str


class BrokerRead(CamelModel):
    id: IdStr = Field(alias="_id")
    email: str
    full_name: str
    phone: str | None = None
    license: str | None = None
    agency: str | None = None
    profile_image_url: str = ""
    verification_status: str
    is_subscribed: bool
    subscription_end_date: datetime | None = None


class BrokerEnvelope(CamelModel):
    message: str
    broker: BrokerRead


class BrokerStatusRead(CamelModel):
    verification_status: str
    is_subscribed: bool
    subscription_end_date: datetime | None = None


class SubscribeRequest(CamelModel):
    email: str | None = None


class SubscriptionRead(CamelModel):
    message: str
    is_subscribed: bool
    subscription_end_date: datetime | None = None


class PropertySummarySchema(CamelModel):
    name: str | None = None
    type: str | None = None
    area: float | None = None
    baths: int | None = None
    location: str | None = None


class ProfileViewCreate(CamelModel):
    viewed_broker_name: str | None = None
    viewer_info: str | None = None
    viewer_phone: str | None = None
    estimated_budget: float | None = None
    property_summary: PropertySummarySchema | None = None


class ProfileViewRead(CamelModel):
    id: IdStr = Field(alias="_id")
    viewed_broker_name: str
    viewer_info: str
    viewer_phone: str = ""
    estimated_budget: float | None = None
    property_summary: PropertySummarySchema | None = None
    timestamp: datetime


class ProfileViewEnvelope(CamelModel):
    message: str
    view: ProfileViewRead


class ProfileViewList(CamelModel):
    data: list[ProfileViewRead]
    count: int


class BrokerDocumentRead(CamelModel):
    id: IdStr = Field(alias="_id")
    broker_email: str
    file_name: str
    file_path: str
    uploaded_at: datetime | None = None


class BrokerDocumentUpload(CamelModel):
    message: str
    files: list[BrokerDocumentRead]


__all__ = [
    "BrokerDocumentRead",
    "BrokerDocumentUpload",
    "BrokerEnvelope",
    "BrokerLogin",
    "BrokerRead",
    "BrokerRegister",
    "BrokerStatusRead",
    "ProfileViewCreate",
    "ProfileViewEnvelope",
    "ProfileViewList",
    "ProfileViewRead",
    "PropertySummarySchema",
    "SubscribeRequest",
    "SubscriptionRead",
]
