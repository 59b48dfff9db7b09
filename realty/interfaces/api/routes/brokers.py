"""Routes for broker accounts, analytics and verification."""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.orm import Session

from realty.application.use_cases.brokers import (
    UploadedFile,
    authenticate_broker,
    get_broker,
    list_profile_views,
    log_profile_view,
    register_broker,
    subscribe_broker,
    upload_broker_documents,
)
from realty.domain.entities import Broker, BrokerDocument, ProfileView, PropertySummary
from realty.infrastructure.database import get_db
from realty.interfaces.api.routes_helpers import DomainError, http_error_from
from realty.interfaces.api.schemas import (
    BrokerDocumentRead,
    BrokerDocumentUpload,
    BrokerEnvelope,
    BrokerLogin,
    BrokerRead,
    BrokerRegister,
    BrokerStatusRead,
    ProfileViewCreate,
    ProfileViewEnvelope,
    ProfileViewList,
    ProfileViewRead,
    SubscribeRequest,
    SubscriptionRead,
)

router = APIRouter(prefix="/api/broker", tags=["brokers"])
logger = logging.getLogger(__name__)


def _to_read_model(broker: Broker) -> BrokerRead:
    return BrokerRead.model_validate(broker)


def _view_to_read_model(view: ProfileView) -> ProfileViewRead:
    return ProfileViewRead.model_validate(view)


def _document_to_read_model(document: BrokerDocument) -> BrokerDocumentRead:
    return BrokerDocumentRead.model_validate(document)


@router.post(
    "/register", response_model=BrokerEnvelope, status_code=status.HTTP_201_CREATED
)
def register(payload: BrokerRegister, db: Session = Depends(get_db)) -> BrokerEnvelope:
    """Create a broker account; email and full name must both be unused."""

    try:
        broker = register_broker(db, **payload.model_dump())
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return BrokerEnvelope(message="Broker registered", broker=_to_read_model(broker))


@router.post("/login", response_model=BrokerEnvelope)
def login(payload: BrokerLogin, db: Session = Depends(get_db)) -> BrokerEnvelope:
    try:
        broker = authenticate_broker(db, email=payload.email, password=payload.password)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return BrokerEnvelope(message="Login OK", broker=_to_read_model(broker))


@router.post(
    "/log-view", response_model=ProfileViewEnvelope, status_code=status.HTTP_201_CREATED
)
def log_view(
    payload: ProfileViewCreate, db: Session = Depends(get_db)
) -> ProfileViewEnvelope:
    """Record a visit to a broker profile."""

    summary = (
        PropertySummary(**payload.property_summary.model_dump())
        if payload.property_summary
        else None
    )
    try:
        view = log_profile_view(
            db,
            viewed_broker_name=payload.viewed_broker_name,
            viewer_info=payload.viewer_info,
            viewer_phone=payload.viewer_phone,
            estimated_budget=payload.estimated_budget,
            property_summary=summary,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return ProfileViewEnvelope(message="View logged", view=_view_to_read_model(view))


@router.get("/views/{full_name}", response_model=ProfileViewList)
def read_views(full_name: str, db: Session = Depends(get_db)) -> ProfileViewList:
    views = list_profile_views(db, full_name)
    return ProfileViewList(
        data=[_view_to_read_model(view) for view in views], count=len(views)
    )


@router.get("/status/{email}", response_model=BrokerStatusRead)
def read_status(email: str, db: Session = Depends(get_db)) -> BrokerStatusRead:
    """Return the verification and subscription state of a broker."""

    try:
        broker = get_broker(db, email)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return BrokerStatusRead.model_validate(broker)


@router.post(
    "/documents",
    response_model=BrokerDocumentUpload,
    status_code=status.HTTP_201_CREATED,
)
def upload_documents(
    email: str | None = Form(None),
    documents: list[UploadFile] | None = File(None),
    db: Session = Depends(get_db),
) -> BrokerDocumentUpload:
    """Store verification documents and mark the broker as pending review."""

    uploads = [
        UploadedFile(filename=upload.filename or "document", content=upload.file.read())
        for upload in documents or []
    ]
    try:
        saved = upload_broker_documents(db, email=email, files=uploads)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    logger.info("Broker %s uploaded %d documents", email, len(saved))
    return BrokerDocumentUpload(
        message="Docs uploaded – pending verification",
        files=[_document_to_read_model(document) for document in saved],
    )


@router.post("/subscribe", response_model=SubscriptionRead)
def subscribe(payload: SubscribeRequest, db: Session = Depends(get_db)) -> SubscriptionRead:
    try:
        broker = subscribe_broker(db, email=payload.email)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return SubscriptionRead(
        message="Subscribed",
        is_subscribed=broker.is_subscribed,
        subscription_end_date=broker.subscription_end_date,
    )


__all__ = ["router"]
