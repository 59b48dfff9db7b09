"""Domain entity representing a broker."""

from dataclasses import dataclass
from datetime import datetime

VERIFICATION_NOT_SUBMITTED = "not_submitted"
VERIFICATION_PENDING = "pending"
VERIFICATION_VERIFIED = "verified"
VERIFICATION_REJECTED = "rejected"

VERIFICATION_STATUSES = (
    VERIFICATION_NOT_SUBMITTED,
    VERIFICATION_PENDING,
    VERIFICATION_VERIFIED,
    VERIFICATION_REJECTED,
)


@dataclass
class Broker:
    """Real-estate agent registered on the marketplace."""

    id: int | None
    email: str
    password: str
    full_name: str
    phone: str | None = None
    license: str | None = None
    agency: str | None = None
    profile_image_url: str = ""
    verification_status: str = VERIFICATION_NOT_SUBMITTED
    is_subscribed: bool = False
    subscription_end_date: datetime | None = None


__all__ = [
    "Broker",
    "VERIFICATION_NOT_SUBMITTED",
    "VERIFICATION_PENDING",
    "VERIFICATION_REJECTED",
    "VERIFICATION_STATUSES",
    "VERIFICATION_VERIFIED",
]
