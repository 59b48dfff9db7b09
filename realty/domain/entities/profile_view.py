"""Domain entities for broker profile-view analytics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PropertySummary:
    """Property the viewer was looking at when opening the broker profile."""

    name: str | None = None
    type: str | None = None
    area: float | None = None
    baths: int | None = None
    location: str | None = None


@dataclass
class ProfileView:
    """A single visit to a broker's profile."""

    id: int | None
    viewed_broker_name: str
    viewer_info: str
    viewer_phone: str = ""
    estimated_budget: float | None = None
    property_summary: PropertySummary | None = field(default=None)
    timestamp: datetime | None = None


__all__ = ["ProfileView", "PropertySummary"]
