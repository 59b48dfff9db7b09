"""ORM models used by the application infrastructure."""

from .broker import BrokerModel
from .broker_document import BrokerDocumentModel
from .notification import NotificationModel
from .profile_view import ProfileViewModel
from .property import PropertyModel
from .review import ReviewModel
from .user import UserModel

__all__ = [
    "BrokerModel",
    "BrokerDocumentModel",
    "NotificationModel",
    "ProfileViewModel",
    "PropertyModel",
    "ReviewModel",
    "UserModel",
]
