"""API tests for the property catalogue and health probes."""

from __future__ import annotations

from realty.config import get_settings


def test_root_reports_running(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "Real Estate API running"


def test_products_hint_at_seed_when_empty(client):
    body = client.get("/api/products").json()

    assert body == {"data": [], "message": "Run /seed"}


def test_seed_then_list_products(client):
    seeded = client.get("/seed")

    assert seeded.status_code == 200
    assert seeded.text == "Seeded 4 properties"

    products = client.get("/api/products").json()["data"]
    assert len(products) == 4
    first = products[0]
    assert isinstance(first["_id"], str)
    assert {"Name", "PropertyTitle", "Price", "Location", "TotalArea", "Baths"} <= set(first)

    probe = client.get("/test-db").json()
    assert probe == {"connected": True, "totalProperties": 4}


def test_seed_with_missing_fixture_returns_404(client, monkeypatch, tmp_path):
    monkeypatch.setattr(get_settings(), "seed_data_path", str(tmp_path / "missing.json"))

    response = client.get("/seed")

    assert response.status_code == 404
    assert response.text == "missing.json missing"


def test_seed_with_broken_fixture_returns_500(client, monkeypatch, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(get_settings(), "seed_data_path", str(broken))

    response = client.get("/seed")

    assert response.status_code == 500
    assert response.text.startswith("Seed error:")
