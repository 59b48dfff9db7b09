"""Use case for registering property seekers."""

from sqlalchemy.orm import Session

from realty.domain.entities import User
from realty.domain.errors import ConflictError, ValidationError
from realty.infrastructure.repositories import UserRepository
from realty.infrastructure.security import get_password_hash


def signup_user(
    session: Session,
    *,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
    phone: str | None = None,
    address: str | None = None,
    city: str | None = None,
    state: str | None = None,
    zip: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    if not email or not password:
        raise ValidationError("Email and password are required")

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ConflictError("User exists")

    user = User(
        id=None,
        email=email,
        password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        address=address,
        city=city,
        state=state,
        zip=zip,
    )
    return repository.create(user)
