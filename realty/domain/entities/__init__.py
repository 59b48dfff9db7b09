"""Domain entities exposed by the application."""

from .broker import (
    VERIFICATION_NOT_SUBMITTED,
    VERIFICATION_PENDING,
    VERIFICATION_REJECTED,
    VERIFICATION_STATUSES,
    VERIFICATION_VERIFIED,
    Broker,
)
from .broker_document import BrokerDocument
from .notification import (
    CATEGORY_AUTOMATED,
    CATEGORY_MANUAL,
    CHANNEL_EMAIL,
    CHANNEL_IN_APP,
    NOTIFICATION_CATEGORIES,
    NOTIFICATION_CHANNELS,
    Notification,
    Recipient,
    RecipientKind,
)
from .profile_view import ProfileView, PropertySummary
from .property import Property
from .review import MAX_RATING, MIN_RATING, Review
from .user import User

__all__ = [
    "Broker",
    "BrokerDocument",
    "CATEGORY_AUTOMATED",
    "CATEGORY_MANUAL",
    "CHANNEL_EMAIL",
    "CHANNEL_IN_APP",
    "MAX_RATING",
    "MIN_RATING",
    "NOTIFICATION_CATEGORIES",
    "NOTIFICATION_CHANNELS",
    "Notification",
    "ProfileView",
    "Property",
    "PropertySummary",
    "Recipient",
    "RecipientKind",
    "Review",
    "User",
    "VERIFICATION_NOT_SUBMITTED",
    "VERIFICATION_PENDING",
    "VERIFICATION_REJECTED",
    "VERIFICATION_STATUSES",
    "VERIFICATION_VERIFIED",
]
