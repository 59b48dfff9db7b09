"""Persistence helpers for property listings."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from realty.domain.entities import Property
from realty.infrastructure.models import PropertyModel


class PropertyRepository:
    """Provide read and bulk-insert operations for properties."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> list[Property]:
        query = self.session.query(PropertyModel).order_by(PropertyModel.id)
        return [self._to_entity(model) for model in query.all()]

    def count(self) -> int:
        return self.session.query(PropertyModel).count()

    def bulk_create(self, properties: Iterable[Property]) -> int:
        models = [
            PropertyModel(
                name=item.name,
                property_title=item.property_title,
                price=item.price,
                location=item.location,
                total_area=item.total_area,
                baths=item.baths,
            )
            for item in properties
        ]
        if not models:
            return 0
        self.session.add_all(models)
        self.session.commit()
        return len(models)

    @staticmethod
    def _to_entity(model: PropertyModel) -> Property:
        return Property(
            id=model.id,
            name=model.name,
            property_title=model.property_title,
            price=model.price,
            location=model.location,
            total_area=model.total_area,
            baths=model.baths,
        )


__all__ = ["PropertyRepository"]
