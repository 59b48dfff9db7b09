"""Use cases for broker profile-view analytics."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realty.domain.entities import ProfileView, PropertySummary
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.repositories import BrokerRepository, ProfileViewRepository


def log_profile_view(
    session: Session,
    *,
    viewed_broker_name: str | None,
    viewer_info: str | None,
    viewer_phone: str | None = None,
    estimated_budget: float | None = None,
    property_summary: PropertySummary | None = None,
) -> ProfileView:
    """Record that someone opened the profile of ``viewed_broker_name``."""

    if not viewed_broker_name or not viewer_info:
        raise ValidationError("Missing required fields")

    if BrokerRepository(session).get_by_full_name(viewed_broker_name) is None:
        raise NotFoundError("Broker not found")

    view = ProfileView(
        id=None,
        viewed_broker_name=viewed_broker_name,
        viewer_info=viewer_info,
        viewer_phone=viewer_phone or "",
        estimated_budget=float(estimated_budget) if estimated_budget else None,
        property_summary=property_summary,
    )
    return ProfileViewRepository(session).create(view)


def list_profile_views(session: Session, full_name: str) -> list[ProfileView]:
    """Return the views of ``full_name``'s profile, newest first."""

    return ProfileViewRepository(session).list_for_broker(full_name)


__all__ = ["list_profile_views", "log_profile_view"]
