"""Use case for checking broker credentials."""

from dataclasses import replace

from sqlalchemy.orm import Session

from realty.domain.entities import Broker
from realty.domain.errors import AuthenticationError, NotFoundError
from realty.infrastructure.repositories import BrokerRepository
from realty.infrastructure.security import get_password_hash, needs_rehash, verify_password


def authenticate_broker(session: Session, *, email: str, password: str) -> Broker:
    """Return the broker owning ``email`` when ``password`` matches."""

    repository = BrokerRepository(session)
    broker = repository.get_by_email(email)
    if broker is None:
        raise NotFoundError("Broker not found")
    if not verify_password(password, broker.password):
        raise AuthenticationError("Invalid credentials")
    if needs_rehash(broker.password):
        broker = repository.update(replace(broker, password=get_password_hash(password)))
    return broker
