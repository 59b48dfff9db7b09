"""Use case for updating a user's profile fields."""

from sqlalchemy.orm import Session

from realty.domain.entities import User
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.repositories import UserRepository


def update_user(session: Session, *, email: str | None, **profile: str | None) -> User:
    """Overwrite the profile of the user identified by ``email``.

    Fields left out of ``profile`` keep their stored value.
    """

    if not email:
        raise ValidationError("Email is required")

    user = UserRepository(session).update_profile(email, **profile)
    if user is None:
        raise NotFoundError("User not found")
    return user
