"""Persistence helpers for broker reviews."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realty.domain.entities import Review
from realty.infrastructure.models import ReviewModel
from realty.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ReviewRepository:
    """Provide CRUD operations for reviews."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_broker(self, broker_name: str) -> list[Review]:
        query = (
            self.session.query(ReviewModel)
            .filter(ReviewModel.broker_name == broker_name)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, review: Review) -> Review:
        model = ReviewModel(
            broker_name=review.broker_name,
            rating=review.rating,
            feedback=review.feedback or "",
            created_at=ensure_app_naive_datetime(review.created_at or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            broker_name=model.broker_name,
            rating=int(model.rating),
            feedback=model.feedback or "",
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ReviewRepository"]
