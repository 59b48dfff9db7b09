"""Use cases for broker reviews."""

from sqlalchemy.orm import Session

from realty.domain.entities import MAX_RATING, MIN_RATING, Review
from realty.domain.errors import ValidationError
from realty.infrastructure.repositories import ReviewRepository


def submit_review(
    session: Session,
    *,
    broker_name: str | None,
    rating: int | float | str | None,
    feedback: str | None = None,
) -> Review:
    """Store a rating for ``broker_name``."""

    if not broker_name or rating is None or rating == "":
        raise ValidationError("Missing required fields")

    try:
        numeric_rating = int(float(rating))
    except (TypeError, ValueError) as exc:
        raise ValidationError("Rating must be a number") from exc
    if not MIN_RATING <= numeric_rating <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    review = Review(
        id=None,
        broker_name=broker_name,
        rating=numeric_rating,
        feedback=feedback or "",
    )
    return ReviewRepository(session).create(review)


def list_reviews(session: Session, broker_name: str) -> list[Review]:
    """Return the reviews of ``broker_name``, newest first."""

    return ReviewRepository(session).list_for_broker(broker_name)


__all__ = ["list_reviews", "submit_review"]
