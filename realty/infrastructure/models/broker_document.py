"""SQLAlchemy model for broker verification documents."""

from sqlalchemy import Column, DateTime, Integer, String

from realty.infrastructure.database import Base
from realty.utils import now_in_app_naive_datetime


class BrokerDocumentModel(Base):
    """Database representation of an uploaded document."""

    __tablename__ = "broker_document"

    id = Column(Integer, primary_key=True, index=True)
    broker_email = Column(String(120), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(500), nullable=False)
    uploaded_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["BrokerDocumentModel"]
