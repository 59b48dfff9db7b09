"""Liveness and database connectivity probes."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from realty.application.use_cases.properties import count_properties
from realty.infrastructure.database import get_db

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    return "Real Estate API running"


@router.get("/test-db")
def test_database(db: Session = Depends(get_db)):
    """Report whether the store answers and how many properties it holds."""

    try:
        total = count_properties(db)
    except SQLAlchemyError as exc:
        logger.exception("Database probe failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"connected": False, "error": str(exc)},
        )
    return {"connected": True, "totalProperties": total}


__all__ = ["router"]
