from .broker import (
    BrokerDocumentRead,
    BrokerDocumentUpload,
    BrokerEnvelope,
    BrokerLogin,
    BrokerRead,
    BrokerRegister,
    BrokerStatusRead,
    ProfileViewCreate,
    ProfileViewEnvelope,
    ProfileViewList,
    ProfileViewRead,
    PropertySummarySchema,
    SubscribeRequest,
    SubscriptionRead,
)
from .common import CamelModel, IdStr, MessageResponse
from .notification import (
    AllBrokersRecipient,
    AllSubscribedBrokersRecipient,
    BrokerRecipient,
    NotificationCreate,
    NotificationList,
    NotificationRead,
)
from .property import PropertyList, PropertyRead
from .review import ReviewCreate, ReviewEnvelope, ReviewList, ReviewRead
from .user import UserEnvelope, UserLogin, UserRead, UserSignup, UserUpdate

__all__ = [
    "AllBrokersRecipient",
    "AllSubscribedBrokersRecipient",
    "BrokerDocumentRead",
    "BrokerDocumentUpload",
    "BrokerEnvelope",
    "BrokerLogin",
    "BrokerRead",
    "BrokerRecipient",
    "BrokerRegister",
    "BrokerStatusRead",
    "CamelModel",
    "IdStr",
    "MessageResponse",
    "NotificationCreate",
    "NotificationList",
    "NotificationRead",
    "ProfileViewCreate",
    "ProfileViewEnvelope",
    "ProfileViewList",
    "ProfileViewRead",
    "PropertyList",
    "PropertyRead",
    "PropertySummarySchema",
    "ReviewCreate",
    "ReviewEnvelope",
    "ReviewList",
    "ReviewRead",
    "SubscribeRequest",
    "SubscriptionRead",
    "UserEnvelope",
    "UserLogin",
    "UserRead",
    "UserSignup",
    "UserUpdate",
]
