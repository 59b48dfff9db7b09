"""Persistence layer for broker data."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from realty.domain.entities import Broker
from realty.infrastructure.models import BrokerModel
from realty.utils import ensure_app_naive_datetime, ensure_app_timezone


class BrokerRepository:
    """Provide CRUD operations for broker entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Broker]:
        query = self.session.query(BrokerModel).order_by(BrokerModel.id)
        return [self._to_entity(model) for model in query.all()]

    def list_emails(self) -> list[str]:
        query = self.session.query(BrokerModel.email).order_by(BrokerModel.id)
        return [email for (email,) in query.all()]

    def get_by_email(self, email: str) -> Broker | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def get_by_full_name(self, full_name: str) -> Broker | None:
        model = self._get_model(full_name=full_name)
        return self._to_entity(model) if model else None

    def exists(self, email: str) -> bool:
        return (
            self.session.query(BrokerModel.id).filter(BrokerModel.email == email).first()
            is not None
        )

    def find_by_email_or_full_name(self, email: str, full_name: str) -> Broker | None:
        model = (
            self.session.query(BrokerModel)
            .filter(or_(BrokerModel.email == email, BrokerModel.full_name == full_name))
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, broker: Broker) -> Broker:
        model = BrokerModel()
        self._apply_entity_to_model(model, broker)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, broker: Broker) -> Broker:
        model = self._get_model(id=broker.id)
        if not model:
            msg = f"Broker with id {broker.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, broker)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_verification_status(self, email: str, status: str) -> Broker | None:
        model = self._get_model(email=email)
        if model is None:
            return None
        model.verification_status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_subscription(
        self, email: str, *, is_subscribed: bool, end_date: datetime | None
    ) -> Broker | None:
        model = self._get_model(email=email)
        if model is None:
            return None
        model.is_subscribed = is_subscribed
        model.subscription_end_date = ensure_app_naive_datetime(end_date)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(self, **filters) -> BrokerModel | None:
        return self.session.query(BrokerModel).filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: BrokerModel, broker: Broker) -> None:
        model.email = broker.email
        model.password = broker.password
        model.full_name = broker.full_name
        model.phone = broker.phone
        model.license = broker.license
        model.agency = broker.agency
        model.profile_image_url = broker.profile_image_url or ""
        model.verification_status = broker.verification_status
        model.is_subscribed = bool(broker.is_subscribed)
        model.subscription_end_date = ensure_app_naive_datetime(
            broker.subscription_end_date
        )

    @staticmethod
    def _to_entity(model: BrokerModel) -> Broker:
        return Broker(
            id=model.id,
            email=model.email,
            password=model.password,
            full_name=model.full_name,
            phone=model.phone,
            license=model.license,
            agency=model.agency,
            profile_image_url=model.profile_image_url or "",
            verification_status=model.verification_status,
            is_subscribed=bool(model.is_subscribed),
            subscription_end_date=ensure_app_timezone(model.subscription_end_date),
        )


__all__ = ["BrokerRepository"]
