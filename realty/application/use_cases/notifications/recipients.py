"""Resolve a notification recipient into concrete broker emails."""

from __future__ import annotations

from sqlalchemy.orm import Session

from realty.domain.entities import Recipient, RecipientKind
from realty.infrastructure.notifications import all_subscribed_identities
from realty.infrastructure.repositories import BrokerRepository


def resolve_recipient_emails(session: Session, recipient: Recipient) -> set[str]:
    """Return every broker email ``recipient`` addresses."""

    if recipient.kind is RecipientKind.BROKER:
        return {recipient.broker_email} if recipient.broker_email else set()

    repository = BrokerRepository(session)
    if recipient.kind is RecipientKind.ALL_BROKERS:
        return set(repository.list_emails())
    return all_subscribed_identities(repository.list())


__all__ = ["resolve_recipient_emails"]
