"""HTTP and websocket tests for the notification endpoints."""

from __future__ import annotations

import pytest
from starlette.websockets import WebSocketDisconnect

from realty.infrastructure.notifications import presence_registry

WS_PATH = "/api/notifications/ws"


def _payload(**overrides):
    payload = {
        "recipient": {"type": "all_brokers"},
        "category": "manual",
        "channel": "in-app",
        "message": "Office closed on Friday",
        "deliveryTime": "2024-06-01T08:00:00Z",
    }
    payload.update(overrides)
    return payload


def _register_broker(client, email, full_name, *, subscribed=False):
    response = client.post(
        "/api/broker/register",
        json={"email": email, "password": "secret", "fullName": full_name},
    )
    assert response.status_code == 201, response.text
    if subscribed:
        response = client.post("/api/broker/subscribe", json={"email": email})
        assert response.status_code == 200, response.text


def _connect(ws, email):
    ws.send_json({"type": "register", "broker": email})
    message = ws.receive_json()
    assert message["type"] == "init"
    return message["data"]


def test_create_notification_for_offline_broker_lands_in_inbox(client):
    _register_broker(client, "alice@example.com", "Alice Agent")

    response = client.post(
        "/api/notifications",
        json=_payload(recipient={"type": "broker", "email": "alice@example.com"}),
    )

    assert response.status_code == 201, response.text
    created = response.json()
    assert isinstance(created["_id"], str)
    assert created["recipient"] == "alice@example.com"
    assert created["recipientType"] == "broker"
    assert created["read"] is False

    inbox = client.get("/api/notifications/inbox/alice@example.com")
    assert inbox.status_code == 200
    assert [item["_id"] for item in inbox.json()["data"]] == [created["_id"]]


def test_missing_recipient_returns_400_and_stores_nothing(client):
    _register_broker(client, "alice@example.com", "Alice Agent")
    payload = _payload()
    payload.pop("recipient")

    response = client.post("/api/notifications", json=payload)

    assert response.status_code == 400
    assert "recipient" in response.json()["detail"]
    inbox = client.get("/api/notifications/inbox/alice@example.com")
    assert inbox.json()["data"] == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"category": "urgent"},
        {"channel": "pigeon"},
        {"deliveryTime": "not-a-date"},
        {"message": ""},
    ],
)
def test_invalid_fields_return_400(client, overrides):
    response = client.post("/api/notifications", json=_payload(**overrides))

    assert response.status_code == 400


def test_unknown_recipient_type_fails_validation(client):
    response = client.post(
        "/api/notifications", json=_payload(recipient={"type": "everyone"})
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"


def test_unknown_individual_broker_returns_404(client):
    response = client.post(
        "/api/notifications",
        json=_payload(recipient={"type": "broker", "email": "ghost@example.com"}),
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Broker not found"


def test_inbox_of_unknown_broker_returns_404(client):
    response = client.get("/api/notifications/inbox/ghost@example.com")

    assert response.status_code == 404


def test_inbox_order_and_unread_filter(client):
    _register_broker(client, "alice@example.com", "Alice Agent")
    ids = {}
    for label, when in (
        ("t2", "2024-01-02T00:00:00Z"),
        ("t1", "2024-01-01T00:00:00Z"),
        ("t3", "2024-01-03T00:00:00Z"),
    ):
        response = client.post(
            "/api/notifications",
            json=_payload(
                recipient={"type": "broker", "email": "alice@example.com"},
                deliveryTime=when,
            ),
        )
        ids[label] = response.json()["_id"]

    inbox = client.get("/api/notifications/inbox/alice@example.com").json()["data"]
    assert [item["_id"] for item in inbox] == [ids["t3"], ids["t2"], ids["t1"]]

    client.patch(f"/api/notifications/{ids['t2']}/read")
    unread = client.get(
        "/api/notifications/inbox/alice@example.com", params={"unread_only": True}
    ).json()["data"]
    assert [item["_id"] for item in unread] == [ids["t3"], ids["t1"]]


def test_mark_read_twice_succeeds(client):
    created = client.post("/api/notifications", json=_payload()).json()

    first = client.patch(f"/api/notifications/{created['_id']}/read")
    second = client.patch(f"/api/notifications/{created['_id']}/read")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["read"] is True


def test_mark_read_unknown_notification_returns_404(client):
    response = client.patch("/api/notifications/12345/read")

    assert response.status_code == 404


def test_connected_broker_receives_personal_notification(client):
    _register_broker(client, "alice@example.com", "Alice Agent")

    with client.websocket_connect(WS_PATH) as ws:
        assert _connect(ws, "alice@example.com") == []
        assert "alice@example.com" in presence_registry

        created = client.post(
            "/api/notifications",
            json=_payload(recipient={"type": "broker", "email": "alice@example.com"}),
        ).json()

        pushed = ws.receive_json()

    assert pushed["type"] == "notification"
    assert pushed["data"]["_id"] == created["_id"]
    assert pushed["data"]["message"] == "Office closed on Friday"
    assert "alice@example.com" not in presence_registry


def test_all_subscribed_brokers_reaches_subscribed_online_and_offline_inboxes(client):
    _register_broker(client, "a@example.com", "Broker A", subscribed=True)
    _register_broker(client, "b@example.com", "Broker B")
    _register_broker(client, "c@example.com", "Broker C", subscribed=True)

    with client.websocket_connect(WS_PATH) as ws_a, client.websocket_connect(
        WS_PATH
    ) as ws_b:
        _connect(ws_a, "a@example.com")
        _connect(ws_b, "b@example.com")

        created = client.post(
            "/api/notifications",
            json=_payload(recipient={"type": "all_subscribed_brokers"}),
        ).json()

        pushed = ws_a.receive_json()
        assert pushed["data"]["_id"] == created["_id"]

        ws_b.send_json({"type": "ping"})
        assert ws_b.receive_json() == {"type": "pong"}

    def inbox_ids(email):
        data = client.get(f"/api/notifications/inbox/{email}").json()["data"]
        return [item["_id"] for item in data]

    assert inbox_ids("a@example.com") == [created["_id"]]
    assert inbox_ids("c@example.com") == [created["_id"]]
    assert inbox_ids("b@example.com") == []


def test_register_sends_unread_backlog_and_ack_marks_read(client):
    _register_broker(client, "alice@example.com", "Alice Agent")
    created = client.post("/api/notifications", json=_payload()).json()

    with client.websocket_connect(WS_PATH) as ws:
        backlog = _connect(ws, "alice@example.com")
        assert [item["_id"] for item in backlog] == [created["_id"]]

        ws.send_json({"type": "ack", "ids": [created["_id"]]})
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

    unread = client.get(
        "/api/notifications/inbox/alice@example.com", params={"unread_only": True}
    )
    assert unread.json()["data"] == []


def test_websocket_rejects_unknown_broker(client):
    with client.websocket_connect(WS_PATH) as ws:
        ws.send_json({"type": "register", "broker": "ghost@example.com"})
        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_json()

    assert exc_info.value.code == 1008
    assert len(presence_registry) == 0


def test_closing_newer_connection_leaves_older_socket_usable(client):
    _register_broker(client, "alice@example.com", "Alice Agent")

    with client.websocket_connect(WS_PATH) as first:
        _connect(first, "alice@example.com")
        with client.websocket_connect(WS_PATH) as second:
            _connect(second, "alice@example.com")
            assert len(presence_registry) == 1

        assert presence_registry.lookup("alice@example.com") is None

        first.send_json({"type": "ping"})
        assert first.receive_json() == {"type": "pong"}


def _unread_ids(client, email):
    response = client.get(
        f"/api/notifications/inbox/{email}", params={"unread_only": True}
    )
    return [item["_id"] for item in response.json()["data"]]


def test_ack_before_register_changes_nothing(client):
    _register_broker(client, "alice@example.com", "Alice Agent")
    created = client.post(
        "/api/notifications",
        json=_payload(recipient={"type": "broker", "email": "alice@example.com"}),
    ).json()

    with client.websocket_connect(WS_PATH) as ws:
        ws.send_json({"type": "ack", "ids": [created["_id"]]})
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

    assert _unread_ids(client, "alice@example.com") == [created["_id"]]


def test_ack_cannot_mark_another_brokers_notification(client):
    _register_broker(client, "alice@example.com", "Alice Agent")
    _register_broker(client, "bob@example.com", "Bob Broker")
    created = client.post(
        "/api/notifications",
        json=_payload(recipient={"type": "broker", "email": "alice@example.com"}),
    ).json()

    with client.websocket_connect(WS_PATH) as ws:
        assert _connect(ws, "bob@example.com") == []
        ws.send_json({"type": "ack", "ids": [created["_id"]]})
        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

    assert _unread_ids(client, "alice@example.com") == [created["_id"]]
