"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from realty.domain.entities import Notification, Recipient, RecipientKind
from realty.infrastructure.models import NotificationModel
from realty.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_inbox(
        self,
        broker_email: str,
        *,
        include_subscribed_broadcasts: bool,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        """Return notifications visible to ``broker_email``, newest delivery first.

        Personal records match on the indexed ``broker_email`` column; the
        "All Brokers" broadcast is always visible and the "All Subscribed
        Brokers" broadcast only when ``include_subscribed_broadcasts`` is set.
        """

        query = self.session.query(NotificationModel).filter(
            _visible_to(broker_email, include_subscribed_broadcasts)
        )
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))
        query = query.order_by(
            NotificationModel.delivery_time.desc(), NotificationModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        if not model.read:
            model.read = True
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_many_as_read(
        self,
        notification_ids: Iterable[int],
        *,
        broker_email: str,
        include_subscribed_broadcasts: bool,
    ) -> int:
        """Mark the given ids read, skipping any outside ``broker_email``'s inbox."""

        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                _visible_to(broker_email, include_subscribed_broadcasts),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.recipient = notification.recipient.label
        model.recipient_type = notification.recipient.kind.value
        model.broker_email = notification.broker_email
        model.category = notification.category
        model.channel = notification.channel
        model.message = notification.message
        model.delivery_time = ensure_app_naive_datetime(notification.delivery_time)
        model.read = bool(notification.read)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        kind = RecipientKind(model.recipient_type)
        recipient = Recipient(
            kind, model.broker_email if kind is RecipientKind.BROKER else None
        )
        return Notification(
            id=model.id,
            recipient=recipient,
            category=model.category,
            channel=model.channel,
            message=model.message,
            delivery_time=ensure_app_timezone(model.delivery_time),
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
        )


def _visible_to(broker_email: str, include_subscribed_broadcasts: bool):
    broadcast_kinds = [RecipientKind.ALL_BROKERS.value]
    if include_subscribed_broadcasts:
        broadcast_kinds.append(RecipientKind.ALL_SUBSCRIBED_BROKERS.value)
    return or_(
        NotificationModel.broker_email == broker_email,
        NotificationModel.recipient_type.in_(broadcast_kinds),
    )


__all__ = ["NotificationRepository"]
