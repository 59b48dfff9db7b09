"""Persistence helpers for broker verification documents."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from realty.domain.entities import BrokerDocument
from realty.infrastructure.models import BrokerDocumentModel
from realty.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class BrokerDocumentRepository:
    """Provide CRUD operations for uploaded broker documents."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_broker(self, broker_email: str) -> list[BrokerDocument]:
        query = (
            self.session.query(BrokerDocumentModel)
            .filter(BrokerDocumentModel.broker_email == broker_email)
            .order_by(BrokerDocumentModel.uploaded_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def bulk_create(self, documents: Iterable[BrokerDocument]) -> list[BrokerDocument]:
        now = ensure_app_naive_datetime(now_in_app_timezone())
        models = [
            BrokerDocumentModel(
                broker_email=document.broker_email,
                file_name=document.file_name,
                file_path=document.file_path,
                uploaded_at=ensure_app_naive_datetime(document.uploaded_at) or now,
            )
            for document in documents
        ]
        self.session.add_all(models)
        self.session.commit()
        for model in models:
            self.session.refresh(model)
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: BrokerDocumentModel) -> BrokerDocument:
        return BrokerDocument(
            id=model.id,
            broker_email=model.broker_email,
            file_name=model.file_name,
            file_path=model.file_path,
            uploaded_at=ensure_app_timezone(model.uploaded_at),
        )


__all__ = ["BrokerDocumentRepository"]
