"""Domain entity representing a broker review."""

from dataclasses import dataclass
from datetime import datetime

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Review:
    """Rating left by a property seeker for a broker."""

    id: int | None
    broker_name: str
    rating: int
    feedback: str = ""
    created_at: datetime | None = None


__all__ = ["MAX_RATING", "MIN_RATING", "Review"]
