"""SQLAlchemy model for the broker table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from realty.domain.entities import VERIFICATION_NOT_SUBMITTED
from realty.infrastructure.database import Base


class BrokerModel(Base):
    """Database representation of a registered broker."""

    __tablename__ = "broker"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    full_name = Column(String(120), nullable=False, unique=True, index=True)
    phone = Column(String(40), nullable=True)
    license = Column(String(80), nullable=True)
    agency = Column(String(120), nullable=True)
    profile_image_url = Column(String(500), nullable=False, default="")
    verification_status = Column(
        String(20), nullable=False, default=VERIFICATION_NOT_SUBMITTED
    )
    is_subscribed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    subscription_end_date = Column(DateTime(), nullable=True)


__all__ = ["BrokerModel"]
