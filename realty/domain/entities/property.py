"""Domain entity representing a listed property."""

from dataclasses import dataclass


@dataclass
class Property:
    """Property imported from the marketplace fixture."""

    id: int | None
    name: str | None
    property_title: str | None
    price: str | None
    location: str | None
    total_area: float | None
    baths: int | None


__all__ = ["Property"]
