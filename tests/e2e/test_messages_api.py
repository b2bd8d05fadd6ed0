"""End-to-end tests for the message endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from chat.config import Settings
from chat.interface.api.app import create_app
from chat.util.di.container import setup_di
from chat.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def auth_headers(user_id: str) -> dict[str, str]:
    """Bearer header for a user, signed with the configured secret."""
    token = create_token(user_id, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sender_id():
    return str(uuid4())


@pytest.fixture
def conversation_id():
    return str(uuid4())


def send(client, conversation_id, sender_id, text="Hello world", tags=None):
    body = {"conversation_id": conversation_id, "text": text}
    if tags is not None:
        body["tags"] = [{"id": tag_id, "type": "subTopic"} for tag_id in tags]
    return client.post("/messages", json=body, headers=auth_headers(sender_id))


class TestAuthentication:
    """Every message route requires a bearer token."""

    def test_missing_token_is_401(self, client, conversation_id):
        # Act
        response = client.post(
            "/messages", json={"conversation_id": conversation_id, "text": "hi"}
        )

        # Assert
        assert response.status_code == 401

    def test_invalid_token_is_401(self, client):
        response = client.get(
            f"/messages/{uuid4()}", headers={"Authorization": "Bearer invalid-token"}
        )

        assert response.status_code == 401

    def test_health_is_public(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMessageEndpoints:
    """End-to-end tests for message API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_send_message(self, client, conversation_id, sender_id):
        # Act
        response = send(client, conversation_id, sender_id, tags=["tag1"])

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["text"] == "Hello world"
        assert data["sender"] == {"id": sender_id}
        assert data["conversation"] == {"id": conversation_id}
        assert data["tags"] == [{"id": "tag1", "type": "subTopic"}]
        assert data["likes"] == []
        assert data["likes_count"] == 0
        assert data["resolved"] is False
        assert data["deleted"] is False
        assert data["reactions"] == []

    def test_send_without_text_is_400(self, client, conversation_id, sender_id):
        response = client.post(
            "/messages",
            json={"conversation_id": conversation_id},
            headers=auth_headers(sender_id),
        )

        assert response.status_code == 400
        assert "text is required" in response.json()["detail"]

    def test_get_unknown_message_is_404(self, client, sender_id):
        response = client.get(f"/messages/{uuid4()}", headers=auth_headers(sender_id))

        assert response.status_code == 404

    def test_update_tags_unknown_message_is_404(self, client, sender_id):
        message_id = str(uuid4())

        response = client.put(
            f"/messages/{message_id}/tags",
            json={"tags": [{"id": "A"}]},
            headers=auth_headers(sender_id),
        )

        assert response.status_code == 404
        assert f"Could not update tags on message {message_id}" in response.json()["detail"]

    def test_update_tags_on_deleted_message_is_409(
        self, client, conversation_id, sender_id
    ):
        # Arrange
        headers = auth_headers(sender_id)
        message_id = send(client, conversation_id, sender_id, tags=["A"]).json()["id"]
        client.delete(f"/messages/{message_id}", headers=headers)

        # Act
        response = client.put(
            f"/messages/{message_id}/tags", json={"tags": [{"id": "B"}]}, headers=headers
        )

        # Assert
        assert response.status_code == 409

    def test_resolve_and_unresolve(self, client, conversation_id, sender_id):
        headers = auth_headers(sender_id)
        message_id = send(client, conversation_id, sender_id).json()["id"]

        resolved = client.post(f"/messages/{message_id}/resolve", headers=headers)
        unresolved = client.delete(f"/messages/{message_id}/resolve", headers=headers)

        assert resolved.json()["resolved"] is True
        assert unresolved.json()["resolved"] is False

    def test_list_conversation_messages(self, client, conversation_id, sender_id):
        # Arrange
        for text in ["one", "two", "three"]:
            send(client, conversation_id, sender_id, text=text)

        # Act
        response = client.get(
            f"/conversations/{conversation_id}/messages",
            params={"limit": 2},
            headers=auth_headers(sender_id),
        )

        # Assert
        assert response.status_code == 200
        assert [m["text"] for m in response.json()["messages"]] == ["three", "two"]

    def test_search_by_tags_groups(self, client, conversation_id, sender_id):
        # Arrange
        send(client, conversation_id, sender_id, text="M1", tags=["tag1", "tag2"])
        send(client, conversation_id, sender_id, text="M2", tags=["tag3"])

        # Act
        response = client.post(
            "/messages/search/tags",
            json={
                "conversation_ids": [conversation_id],
                "tags": [{"id": "tag1"}, {"id": "tag2"}],
                "limit": 5,
            },
            headers=auth_headers(sender_id),
        )

        # Assert
        assert response.status_code == 200
        groups = response.json()
        assert len(groups) == 1
        assert groups[0]["_id"] == ["tag1", "tag2"]
        assert groups[0]["tag_id"] == ["tag1", "tag2"]
        assert groups[0]["messages"] == [
            {
                "sender_id": sender_id,
                "message": "M1",
                "tags": [
                    {"id": "tag1", "type": "subTopic"},
                    {"id": "tag2", "type": "subTopic"},
                ],
            }
        ]

    def test_search_with_zero_limit_is_400(self, client, conversation_id, sender_id):
        response = client.post(
            "/messages/search/tags",
            json={"conversation_ids": [conversation_id], "tags": [{"id": "A"}], "limit": 0},
            headers=auth_headers(sender_id),
        )

        assert response.status_code == 400


class TestMessageLifecycle:
    """Send, delete, like and unlike over HTTP."""

    def test_scenario(self, client, conversation_id, sender_id):
        # Send
        sent = send(client, conversation_id, sender_id)
        assert sent.status_code == 201
        message_id = sent.json()["id"]
        assert sent.json()["tags"] == []

        # Delete
        deleted = client.delete(f"/messages/{message_id}", headers=auth_headers(sender_id))
        assert deleted.status_code == 200

        fetched = client.get(f"/messages/{message_id}", headers=auth_headers(sender_id))
        assert fetched.json()["text"] == "This message has been deleted"
        assert fetched.json()["deleted"] is True

        # Like by U1 then U2; the liker is the caller
        u1, u2 = str(uuid4()), str(uuid4())
        client.post(f"/messages/{message_id}/like", headers=auth_headers(u1))
        client.post(f"/messages/{message_id}/like", headers=auth_headers(u1))
        liked = client.post(f"/messages/{message_id}/like", headers=auth_headers(u2))
        assert liked.json()["likes"] == [u1, u2]
        assert liked.json()["likes_count"] == 2

        # Unlike by U1
        unliked = client.delete(f"/messages/{message_id}/like", headers=auth_headers(u1))
        assert unliked.json()["likes"] == [u2]
        assert unliked.json()["likes_count"] == 1


class TestLongTagIds:
    """Tag ids are caller labels without a length cap."""

    LONG_ID = "x" * 201

    def test_send_with_long_tag_id(self, client, conversation_id, sender_id):
        response = send(client, conversation_id, sender_id, tags=[self.LONG_ID])

        assert response.status_code == 201
        assert response.json()["tags"] == [{"id": self.LONG_ID, "type": "subTopic"}]

    def test_update_tags_with_long_tag_id(self, client, conversation_id, sender_id):
        # Arrange
        message_id = send(client, conversation_id, sender_id, tags=["A"]).json()["id"]

        # Act
        response = client.put(
            f"/messages/{message_id}/tags",
            json={"tags": [{"id": self.LONG_ID}]},
            headers=auth_headers(sender_id),
        )

        # Assert
        assert response.status_code == 200
        assert [t["id"] for t in response.json()["tags"]] == [self.LONG_ID]

    def test_search_with_long_tag_id(self, client, conversation_id, sender_id):
        # Arrange
        send(client, conversation_id, sender_id, text="long", tags=[self.LONG_ID])

        # Act
        response = client.post(
            "/messages/search/tags",
            json={
                "conversation_ids": [conversation_id],
                "tags": [{"id": self.LONG_ID}],
                "limit": 5,
            },
            headers=auth_headers(sender_id),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()[0]["_id"] == [self.LONG_ID]

    def test_empty_tag_id_is_rejected_by_schema(self, client, conversation_id, sender_id):
        response = send(client, conversation_id, sender_id, tags=[""])

        assert response.status_code == 422
