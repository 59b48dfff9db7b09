"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realty.domain.entities import User
from realty.infrastructure.models import UserModel

_PROFILE_FIELDS = ("first_name", "last_name", "phone", "address", "city", "state", "zip")


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(email=user.email, password=user.password)
        for field_name in _PROFILE_FIELDS:
            setattr(model, field_name, getattr(user, field_name))
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_profile(self, email: str, **fields: str | None) -> User | None:
        """Overwrite the profile columns of the user identified by ``email``."""

        model = self._get_model(email=email)
        if model is None:
            return None
        for field_name in _PROFILE_FIELDS:
            if field_name in fields:
                setattr(model, field_name, fields[field_name])
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_password(self, email: str, password_hash: str) -> None:
        model = self._get_model(email=email)
        if model is None:
            return
        model.password = password_hash
        self.session.add(model)
        self.session.commit()

    def _get_model(self, **filters) -> UserModel | None:
        return self.session.query(UserModel).filter_by(**filters).first()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            address=model.address,
            city=model.city,
            state=model.state,
            zip=model.zip,
        )


__all__ = ["UserRepository"]
