"""Use cases for the property catalogue."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session

from realty.domain.entities import Property
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.repositories import PropertyRepository

logger = logging.getLogger(__name__)


def list_properties(session: Session) -> list[Property]:
    """Return every stored property."""

    return PropertyRepository(session).list()


def count_properties(session: Session) -> int:
    return PropertyRepository(session).count()


def seed_properties(session: Session, fixture_path: str | Path) -> int:
    """Load the JSON fixture at ``fixture_path`` into the property table.

    Returns the number of inserted properties.
    """

    path = Path(fixture_path)
    if not path.exists():
        raise NotFoundError(f"{path.name} missing")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Invalid fixture: {exc}") from exc
    if not isinstance(raw, list):
        raise ValidationError("Invalid fixture: expected a list of properties")

    properties = list(_properties_from_fixture(raw))
    inserted = PropertyRepository(session).bulk_create(properties)
    logger.info("Seeded %d properties from %s", inserted, path)
    return inserted


def _properties_from_fixture(rows: Iterable[Any]) -> Iterable[Property]:
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        yield Property(
            id=None,
            name=row.get("Name"),
            property_title=row.get("Property Title"),
            price=_as_text(row.get("Price")),
            location=row.get("Location"),
            total_area=_as_number(row.get("Total_Area"), float),
            baths=_as_number(row.get("Baths"), int),
        )


def _as_text(value: Any) -> str | None:
    return None if value is None else str(value)


def _as_number(value: Any, kind: type) -> Any:
    if value is None or value == "":
        return None
    try:
        return kind(float(value))
    except (TypeError, ValueError):
        return None


__all__ = ["count_properties", "list_properties", "seed_properties"]
