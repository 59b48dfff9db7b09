"""Use case for checking user credentials."""

from sqlalchemy.orm import Session

from realty.domain.entities import User
from realty.domain.errors import AuthenticationError, NotFoundError
from realty.infrastructure.repositories import UserRepository
from realty.infrastructure.security import get_password_hash, needs_rehash, verify_password


def authenticate_user(session: Session, *, email: str, password: str) -> User:
    """Return the user owning ``email`` when ``password`` matches."""

    repository = UserRepository(session)
    user = repository.get_by_email(email)
    if user is None:
        raise NotFoundError("User not found")
    if not verify_password(password, user.password):
        raise AuthenticationError("Invalid password")
    if needs_rehash(user.password):
        repository.update_password(email, get_password_hash(password))
    return user
