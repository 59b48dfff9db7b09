"""Routes for property seekers' accounts."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from realty.application.use_cases.users import authenticate_user, signup_user, update_user
from realty.domain.entities import User
from realty.infrastructure.database import get_db
from realty.interfaces.api.routes_helpers import DomainError, http_error_from
from realty.interfaces.api.schemas import (
    UserEnvelope,
    UserLogin,
    UserRead,
    UserSignup,
    UserUpdate,
)

router = APIRouter(prefix="/api", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/signup", response_model=UserEnvelope)
def signup(payload: UserSignup, db: Session = Depends(get_db)) -> UserEnvelope:
    """Create a user account with a hashed password."""

    try:
        user = signup_user(db, **payload.model_dump())
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return UserEnvelope(message="User created", user=_to_read_model(user))


@router.post("/login", response_model=UserEnvelope)
def login(payload: UserLogin, db: Session = Depends(get_db)) -> UserEnvelope:
    try:
        user = authenticate_user(db, email=payload.email, password=payload.password)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return UserEnvelope(message="Login OK", user=_to_read_model(user))


@router.put("/users", response_model=UserEnvelope)
def update_profile(payload: UserUpdate, db: Session = Depends(get_db)) -> UserEnvelope:
    """Update the profile fields sent in the body; others are left untouched."""

    profile = payload.model_dump(exclude_unset=True)
    email = profile.pop("email")
    try:
        user = update_user(db, email=email, **profile)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return UserEnvelope(message="User updated", user=_to_read_model(user))


__all__ = ["router"]
