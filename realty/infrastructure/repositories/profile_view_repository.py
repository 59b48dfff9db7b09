"""Persistence helpers for broker profile views."""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy.orm import Session

from realty.domain.entities import ProfileView, PropertySummary
from realty.infrastructure.models import ProfileViewModel
from realty.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class ProfileViewRepository:
    """Provide CRUD operations for profile-view analytics."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_broker(self, full_name: str) -> list[ProfileView]:
        query = (
            self.session.query(ProfileViewModel)
            .filter(ProfileViewModel.viewed_broker_name == full_name)
            .order_by(ProfileViewModel.timestamp.desc(), ProfileViewModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, view: ProfileView) -> ProfileView:
        summary = asdict(view.property_summary) if view.property_summary else None
        model = ProfileViewModel(
            viewed_broker_name=view.viewed_broker_name,
            viewer_phone=view.viewer_phone or "",
            viewer_info=view.viewer_info,
            estimated_budget=view.estimated_budget,
            property_summary=summary,
            timestamp=ensure_app_naive_datetime(view.timestamp or now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ProfileViewModel) -> ProfileView:
        summary = model.property_summary
        return ProfileView(
            id=model.id,
            viewed_broker_name=model.viewed_broker_name,
            viewer_info=model.viewer_info,
            viewer_phone=model.viewer_phone or "",
            estimated_budget=model.estimated_budget,
            property_summary=PropertySummary(**summary) if summary else None,
            timestamp=ensure_app_timezone(model.timestamp),
        )


__all__ = ["ProfileViewRepository"]
