"""Repository implementations for infrastructure layer."""

from .broker_document_repository import BrokerDocumentRepository
from .broker_repository import BrokerRepository
from .notification_repository import NotificationRepository
from .profile_view_repository import ProfileViewRepository
from .property_repository import PropertyRepository
from .review_repository import ReviewRepository
from .user_repository import UserRepository

__all__ = [
    "BrokerDocumentRepository",
    "BrokerRepository",
    "NotificationRepository",
    "ProfileViewRepository",
    "PropertyRepository",
    "ReviewRepository",
    "UserRepository",
]
