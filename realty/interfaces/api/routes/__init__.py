from fastapi import FastAPI

from .brokers import router as brokers_router
from .health import router as health_router
from .notifications import router as notifications_router
from .properties import router as properties_router
from .reviews import router as reviews_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(properties_router)
    app.include_router(users_router)
    app.include_router(reviews_router)
    app.include_router(brokers_router)
    app.include_router(notifications_router)
