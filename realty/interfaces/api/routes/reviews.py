"""Routes for broker reviews."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from realty.application.use_cases.reviews import list_reviews, submit_review
from realty.domain.entities import Review
from realty.infrastructure.database import get_db
from realty.interfaces.api.routes_helpers import DomainError, http_error_from
from realty.interfaces.api.schemas import ReviewCreate, ReviewEnvelope, ReviewList, ReviewRead

router = APIRouter(prefix="/api/reviews", tags=["reviews"])
logger = logging.getLogger(__name__)


def _to_read_model(review: Review) -> ReviewRead:
    return ReviewRead.model_validate(review)


@router.post("", response_model=ReviewEnvelope)
def create_review(payload: ReviewCreate, db: Session = Depends(get_db)) -> ReviewEnvelope:
    try:
        review = submit_review(
            db,
            broker_name=payload.broker_name,
            rating=payload.rating,
            feedback=payload.feedback,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    logger.info("Review %s saved for broker %s", review.id, review.broker_name)
    return ReviewEnvelope(message="Review submitted", review=_to_read_model(review))


@router.get("/{broker_name}", response_model=ReviewList)
def read_reviews(broker_name: str, db: Session = Depends(get_db)) -> ReviewList:
    """Return the reviews left for ``broker_name`` only, newest first."""

    reviews = list_reviews(db, broker_name)
    return ReviewList(data=[_to_read_model(review) for review in reviews])


__all__ = ["router"]
