# tests/test_messages_api.py
"""HTTP-level checks for the messages and notifications routers."""

from __future__ import annotations

import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from socialnet.database import get_db
from socialnet.main import app
from socialnet.utils.security import create_access_token


@pytest.fixture
def client(db_engine, users):
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _auth(user_id: int) -> dict:
    token = create_access_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


def test_requires_bearer_token(client):
    assert client.get("/messages/conversations").status_code == 401
    bad = client.get("/messages/conversations", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401


def test_message_round_trip_over_http(client):
    sent = client.post(
        "/messages",
        json={"receiver_id": 2, "content": "hi"},
        headers=_auth(1),
    )
    assert sent.status_code == 201
    body = sent.json()
    assert body["conversation_id"] == "1_2"
    assert body["kind"] == "text"
    assert body["attachment"] is None

    assert client.get("/messages/unread-count", headers=_auth(2)).json() == {"count": 1}
    assert client.get("/notifications/unread-count", headers=_auth(2)).json() == {"count": 1}

    conversations = client.get("/messages/conversations", headers=_auth(2)).json()
    assert len(conversations) == 1
    assert conversations[0]["other_user"]["username"] == "alice"
    assert conversations[0]["unread_count"] == 1

    thread = client.get("/messages/conversations/1", headers=_auth(2)).json()
    assert thread["unread_count"] == 1
    assert thread["messages"][0]["sender"]["id"] == 1
    assert client.get("/messages/unread-count", headers=_auth(2)).json() == {"count": 0}

    edited = client.put(f"/messages/{body['id']}", json={"content": "hello"}, headers=_auth(1))
    assert edited.status_code == 200
    assert edited.json()["is_edited"] is True

    deleted = client.delete(f"/messages/{body['id']}", headers=_auth(1))
    assert deleted.status_code == 200
    assert deleted.json()["is_deleted"] is True
    assert deleted.json()["content"] == "This message was deleted"


def test_media_message_attachment_shape(client):
    response = client.post(
        "/messages",
        json={
            "receiver_id": 2,
            "content": "photo",
            "kind": "image",
            "attachment": {"url": "/uploads/a.png", "mime_type": "image/png", "byte_size": 2048},
        },
        headers=_auth(1),
    )
    assert response.status_code == 201
    assert response.json()["attachment"] == {
        "url": "/uploads/a.png",
        "mime_type": "image/png",
        "byte_size": 2048,
    }


def test_domain_errors_map_to_status_codes(client):
    missing = client.post("/messages", json={"receiver_id": 404, "content": "hi"}, headers=_auth(1))
    assert missing.status_code == 404
    assert missing.json() == {"success": False, "message": "Receiver not found"}

    to_self = client.post("/messages", json={"receiver_id": 1, "content": "hi"}, headers=_auth(1))
    assert to_self.status_code == 400
    assert to_self.json()["success"] is False

    message_id = client.post(
        "/messages", json={"receiver_id": 2, "content": "hi"}, headers=_auth(1)
    ).json()["id"]
    forbidden = client.put(f"/messages/{message_id}", json={"content": "x"}, headers=_auth(2))
    assert forbidden.status_code == 403

    read = client.post(f"/messages/{message_id}/read", headers=_auth(2))
    assert read.status_code == 200
    assert read.json()["is_read"] is True


def test_blank_content_is_validation_error(client):
    response = client.post("/messages", json={"receiver_id": 2, "content": "   "}, headers=_auth(1))
    assert response.status_code == 422


def test_notification_routes(client):
    client.post("/messages", json={"receiver_id": 2, "content": "hi"}, headers=_auth(1))

    page = client.get("/notifications?page=1&limit=10", headers=_auth(2)).json()
    assert page["total"] == 1
    assert page["notifications"][0]["type"] == "message"
    notification_id = page["notifications"][0]["id"]

    assert client.post(f"/notifications/{notification_id}/read", headers=_auth(3)).status_code == 404
    assert client.post(f"/notifications/{notification_id}/read", headers=_auth(2)).json()["is_read"] is True
    assert client.post("/notifications/read-all", headers=_auth(2)).json() == {"success": True}

    assert client.delete(f"/notifications/{notification_id}", headers=_auth(3)).status_code == 404
    assert client.delete(f"/notifications/{notification_id}", headers=_auth(2)).status_code == 200
    assert client.get("/notifications", headers=_auth(2)).json()["total"] == 0


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_app_debug_follows_settings():
    from socialnet.config import settings

    assert app.debug is settings.DEBUG
