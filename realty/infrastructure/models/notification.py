"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.sql import expression

from realty.infrastructure.database import Base
from realty.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for admin notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_type_delivery", "recipient_type", "delivery_time"),
    )

    id = Column(Integer, primary_key=True, index=True)
    recipient = Column(String(120), nullable=False)
    recipient_type = Column(String(30), nullable=False)
    broker_email = Column(String(120), nullable=True, index=True)
    category = Column(String(20), nullable=False)
    channel = Column(String(20), nullable=False)
    message = Column(Text, nullable=False)
    delivery_time = Column(DateTime(), nullable=False, index=True)
    read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
