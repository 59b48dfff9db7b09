"""Review schemas."""

from datetime import datetime

from pydantic import Field

from .common import CamelModel, IdStr


class ReviewCreate(CamelModel):
    broker_name: str | None = None
    rating: float | None = None
    feedback: str | None = None


class ReviewRead(CamelModel):
    id: IdStr = Field(alias="_id")
    broker_name: str
    rating: int
    feedback: str = ""
    created_at: datetime


class ReviewEnvelope(CamelModel):
    message: str
    review: ReviewRead


class ReviewList(CamelModel):
    data: list[ReviewRead]


__all__ = ["ReviewCreate", "ReviewEnvelope", "ReviewList", "ReviewRead"]
