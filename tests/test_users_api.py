"""API tests for property seeker accounts."""

from __future__ import annotations


def _signup(client, **overrides):
    payload = {
        "email": "seeker@example.com",
        "password": "hunter2",
        "firstName": "Sam",
        "lastName": "Seeker",
    }
    payload.update(overrides)
    return client.post("/api/signup", json=payload)


def test_signup_returns_user_without_password(client):
    response = _signup(client)

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["message"] == "User created"
    assert body["user"]["email"] == "seeker@example.com"
    assert body["user"]["firstName"] == "Sam"
    assert isinstance(body["user"]["_id"], str)
    assert "password" not in body["user"]


def test_signup_twice_is_rejected(client):
    _signup(client)

    response = _signup(client)

    assert response.status_code == 400
    assert response.json()["detail"] == "User exists"


def test_signup_requires_email_and_password(client):
    response = client.post("/api/signup", json={"firstName": "Sam"})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


def test_login_with_valid_credentials(client):
    _signup(client)

    response = client.post(
        "/api/login", json={"email": "seeker@example.com", "password": "hunter2"}
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Login OK"


def test_login_with_wrong_password_is_unauthorized(client):
    _signup(client)

    response = client.post(
        "/api/login", json={"email": "seeker@example.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid password"


def test_login_unknown_user_returns_404(client):
    response = client.post(
        "/api/login", json={"email": "nobody@example.com", "password": "x"}
    )

    assert response.status_code == 404


def test_update_profile_changes_only_sent_fields(client):
    _signup(client)

    response = client.put(
        "/api/users", json={"email": "seeker@example.com", "city": "Dubai"}
    )

    assert response.status_code == 200, response.text
    user = response.json()["user"]
    assert user["city"] == "Dubai"
    assert user["firstName"] == "Sam"


def test_update_unknown_user_returns_404(client):
    response = client.put("/api/users", json={"email": "nobody@example.com", "city": "Doha"})

    assert response.status_code == 404
