"""Use cases for broker verification and subscription state."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from realty.domain.entities import VERIFICATION_PENDING, Broker, BrokerDocument
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.repositories import BrokerDocumentRepository, BrokerRepository
from realty.infrastructure.storage import save_document
from realty.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """Raw upload handed over by the HTTP layer."""

    filename: str
    content: bytes


def get_broker(session: Session, email: str) -> Broker:
    """Return the broker identified by ``email`` or raise ``NotFoundError``."""

    broker = BrokerRepository(session).get_by_email(email)
    if broker is None:
        raise NotFoundError("Broker not found")
    return broker


def upload_broker_documents(
    session: Session, *, email: str | None, files: Sequence[UploadedFile]
) -> list[BrokerDocument]:
    """Store ``files`` for ``email`` and move the broker to pending verification."""

    if not files:
        raise ValidationError("No files")

    documents = [
        BrokerDocument(
            id=None,
            broker_email=email or "",
            file_name=upload.filename,
            file_path=save_document(email, upload.filename, upload.content),
        )
        for upload in files
    ]
    saved = BrokerDocumentRepository(session).bulk_create(documents)
    if email and BrokerRepository(session).update_verification_status(
        email, VERIFICATION_PENDING
    ) is None:
        logger.warning("Documents uploaded for unknown broker %s", email)
    return saved


def subscribe_broker(session: Session, *, email: str | None) -> Broker:
    """Flag ``email`` as subscribed for one year from now."""

    if not email:
        raise ValidationError("Email is required")

    end_date = _one_year_after(now_in_app_timezone())
    broker = BrokerRepository(session).update_subscription(
        email, is_subscribed=True, end_date=end_date
    )
    if broker is None:
        raise NotFoundError("Broker not found")
    return broker


def _one_year_after(value: datetime) -> datetime:
    try:
        return value.replace(year=value.year + 1)
    except ValueError:
        # 29 February
        return value.replace(year=value.year + 1, day=28)


__all__ = [
    "UploadedFile",
    "get_broker",
    "subscribe_broker",
    "upload_broker_documents",
]
