"""Use cases for managing brokers."""

from .account import UploadedFile, get_broker, subscribe_broker, upload_broker_documents
from .authenticate_broker import authenticate_broker
from .profile_views import list_profile_views, log_profile_view
from .register_broker import register_broker

__all__ = [
    "UploadedFile",
    "authenticate_broker",
    "get_broker",
    "list_profile_views",
    "log_profile_view",
    "register_broker",
    "subscribe_broker",
    "upload_broker_documents",
]
