"""Use case for registering brokers."""

from sqlalchemy.orm import Session

from realty.domain.entities import VERIFICATION_NOT_SUBMITTED, Broker
from realty.domain.errors import ConflictError, ValidationError
from realty.infrastructure.repositories import BrokerRepository
from realty.infrastructure.security import get_password_hash


def register_broker(
    session: Session,
    *,
    email: str,
    password: str,
    full_name: str,
    phone: str | None = None,
    license: str | None = None,
    agency: str | None = None,
    profile_image_url: str | None = None,
) -> Broker:
    """Create a broker whose email and full name are both unused."""

    if not email or not password or not full_name:
        raise ValidationError("Email, password and full name are required")

    repository = BrokerRepository(session)
    if repository.find_by_email_or_full_name(email, full_name):
        raise ConflictError("Email/FullName taken")

    broker = Broker(
        id=None,
        email=email,
        password=get_password_hash(password),
        full_name=full_name,
        phone=phone,
        license=license,
        agency=agency,
        profile_image_url=profile_image_url or "",
        verification_status=VERIFICATION_NOT_SUBMITTED,
        is_subscribed=False,
        subscription_end_date=None,
    )
    return repository.create(broker)
