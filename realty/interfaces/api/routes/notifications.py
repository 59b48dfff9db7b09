"""Endpoints and websocket handler for broker notifications."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from sqlalchemy.orm import Session

from realty.application.use_cases.notifications import (
    fetch_inbox,
    mark_notification_read,
    mark_notifications_read,
    submit_notification,
)
from realty.domain.entities import Notification
from realty.domain.errors import NotFoundError
from realty.infrastructure.database import SessionLocal, get_db
from realty.infrastructure.notifications import presence_registry, serialize_notification
from realty.interfaces.api.routes_helpers import DomainError, http_error_from
from realty.interfaces.api.schemas import NotificationCreate, NotificationList, NotificationRead

router = APIRouter(prefix="/api/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(serialize_notification(notification))


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate, db: Session = Depends(get_db)
) -> NotificationRead:
    """Store a notification and push it to the addressed brokers that are online."""

    try:
        notification = submit_notification(
            db,
            recipient=payload.recipient.to_domain() if payload.recipient else None,
            category=payload.category,
            channel=payload.channel,
            message=payload.message,
            delivery_time=payload.delivery_time,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return _notification_to_schema(notification)


@router.get("/inbox/{broker_email}", response_model=NotificationList)
def list_inbox(
    broker_email: str,
    unread_only: bool = False,
    db: Session = Depends(get_db),
) -> NotificationList:
    """Return personal and broadcast notifications visible to ``broker_email``."""

    try:
        notifications = fetch_inbox(db, broker_email, unread_only=unread_only)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return NotificationList(data=[_notification_to_schema(n) for n in notifications])


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(notification_id: int, db: Session = Depends(get_db)) -> NotificationRead:
    try:
        notification = mark_notification_read(db, notification_id)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return _notification_to_schema(notification)


def _pending_for(broker_email: str) -> list[dict[str, Any]]:
    session = SessionLocal()
    try:
        pending = fetch_inbox(session, broker_email, unread_only=True)
    finally:
        session.close()
    return [serialize_notification(notification) for notification in pending]


def _acknowledge(broker_email: str, ids: list[Any]) -> None:
    notification_ids = [int(value) for value in ids if str(value).isdigit()]
    if not notification_ids:
        return
    session = SessionLocal()
    try:
        updated = mark_notifications_read(session, broker_email, notification_ids)
    except NotFoundError:
        logger.warning("Ignored ack from unknown broker %s", broker_email)
        return
    finally:
        session.close()
    logger.debug("Broker %s acknowledged %d notifications", broker_email, updated)


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Websocket that keeps a broker in the presence registry while it is open.

    The client announces itself with ``{"type": "register", "broker": email}``
    and receives ``{"type": "init"}`` with its unread inbox, then a
    ``{"type": "notification"}`` message for every live push.
    """

    await websocket.accept()
    broker_email: str | None = None
    try:
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "register":
                requested = str(message.get("broker") or "").strip()
                try:
                    pending = _pending_for(requested)
                except NotFoundError:
                    logger.info("Rejected websocket for unknown broker %r", requested)
                    await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
                    return

                if broker_email and broker_email != requested:
                    presence_registry.unregister(broker_email, websocket)
                broker_email = requested
                presence_registry.register(broker_email, websocket)
                logger.info("Broker %s connected for notifications", broker_email)
                await websocket.send_json({"type": "init", "data": pending})
                continue

            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack" and broker_email:
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    _acknowledge(broker_email, ids)
                continue
    except WebSocketDisconnect:
        pass
    finally:
        if broker_email and presence_registry.unregister(broker_email, websocket):
            logger.info("Broker %s disconnected from notifications", broker_email)


__all__ = ["router"]
