"""SQLAlchemy model for broker reviews."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text

from realty.infrastructure.database import Base
from realty.utils import now_in_app_naive_datetime


class ReviewModel(Base):
    """Database representation of a review left for a broker."""

    __tablename__ = "review"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_review_rating_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    broker_name = Column(String(120), nullable=False, index=True)
    rating = Column(Integer, nullable=False)
    feedback = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ReviewModel"]
