"""SQLAlchemy model for broker profile views."""

from sqlalchemy import JSON, Column, DateTime, Float, Integer, String, Text

from realty.infrastructure.database import Base
from realty.utils import now_in_app_naive_datetime


class ProfileViewModel(Base):
    """Database representation of a broker profile visit."""

    __tablename__ = "profile_view"

    id = Column(Integer, primary_key=True, index=True)
    viewed_broker_name = Column(String(120), nullable=False, index=True)
    viewer_phone = Column(String(40), nullable=False, default="")
    viewer_info = Column(Text, nullable=False)
    estimated_budget = Column(Float, nullable=True)
    property_summary = Column(JSON, nullable=True)
    timestamp = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ProfileViewModel"]
