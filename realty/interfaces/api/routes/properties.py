"""Routes for the property catalogue."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from realty.application.use_cases.properties import list_properties, seed_properties
from realty.config import get_settings
from realty.domain.entities import Property
from realty.domain.errors import NotFoundError, ValidationError
from realty.infrastructure.database import get_db
from realty.interfaces.api.schemas import PropertyList, PropertyRead

router = APIRouter(tags=["properties"])
logger = logging.getLogger(__name__)


def _to_read_model(item: Property) -> PropertyRead:
    return PropertyRead.model_validate(item)


@router.get("/seed", response_class=PlainTextResponse)
def seed(db: Session = Depends(get_db)):
    """Load the JSON fixture into the property table."""

    try:
        inserted = seed_properties(db, get_settings().seed_data_path)
    except NotFoundError as exc:
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)
    except (ValidationError, SQLAlchemyError) as exc:
        db.rollback()
        logger.exception("Seeding properties failed")
        return PlainTextResponse(
            f"Seed error: {exc}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return f"Seeded {inserted} properties"


@router.get(
    "/api/products", response_model=PropertyList, response_model_exclude_none=True
)
def list_products(db: Session = Depends(get_db)) -> PropertyList:
    """Return every property, hinting at the seed endpoint when empty."""

    properties = list_properties(db)
    if not properties:
        return PropertyList(data=[], message="Run /seed")
    return PropertyList(data=[_to_read_model(item) for item in properties])


__all__ = ["router"]
