"""Shared fixtures: in-memory database, clean presence registry, API client."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
UPLOADS_DIR = Path(tempfile.mkdtemp(prefix="realty-uploads-"))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOADS_DIR"] = str(UPLOADS_DIR)
os.environ["SEED_DATA_PATH"] = str(PROJECT_ROOT / "data" / "real_estate_data.json")
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["APP_TIMEZONE"] = "UTC"

import pytest
from fastapi.testclient import TestClient

from realty.application.use_cases.brokers import register_broker, subscribe_broker
from realty.infrastructure import database, models  # noqa: F401
from realty.infrastructure.notifications import presence_registry


@pytest.fixture(autouse=True)
def clean_state():
    """Recreate the schema and empty the presence registry for every test."""

    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    presence_registry.clear()
    yield
    presence_registry.clear()


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    from realty.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def make_broker(session):
    """Create a broker, optionally subscribed, and return it."""

    def _make(email: str, full_name: str | None = None, *, subscribed: bool = False):
        broker = register_broker(
            session,
            email=email,
            password="secret",
            full_name=full_name or email.split("@", 1)[0].title(),
        )
        if subscribed:
            broker = subscribe_broker(session, email=email)
        return broker

    return _make


class FakeSocket:
    """Stand-in for a websocket that records every JSON message it is sent."""

    def __init__(self, *, fail: bool = False) -> None:
        self.sent: list[dict] = []
        self.fail = fail

    async def send_json(self, message: dict) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(message)


@pytest.fixture()
def fake_socket_factory():
    return FakeSocket
