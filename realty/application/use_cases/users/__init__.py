"""Use cases for managing property seekers."""

from .authenticate_user import authenticate_user
from .signup_user import signup_user
from .update_user import update_user

__all__ = [
    "authenticate_user",
    "signup_user",
    "update_user",
]
