"""HTTP API: routing, envelope, status mapping and authentication."""

import io
from pathlib import Path
from unittest.mock import AsyncMock

from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

from messaging.domain.exceptions import StorageUnavailableError
from messaging.domain.exceptions.not_found_or_denied import NOT_FOUND_OR_DENIED
from messaging.domain.ports.repositories import (
    AttachmentRepository,
    ConversationRepository,
)
from messaging.fastapi_app import create_fastapi_app
from messaging.infrastructure.persistence import InMemoryAttachmentRepository
from messaging.setup.ioc.container import create_container

from jwt_generation import bearer, generate_jwt_token

API = "/api/v1"


def create_conversation(client, headers, channel="web"):
    res = client.post(f"{API}/conversations", headers=headers, json={"channel": channel})
    assert res.status_code == 201, res.text
    return res.json()["data"]


def send_message(client, headers, conversation_id, content="hello"):
    return client.post(
        f"{API}/conversations/{conversation_id}/messages",
        headers=headers,
        json={"content": content, "metadata": {"k": "v"}},
    )


# ==================== HEALTH ====================


def test_health_and_ready(client):
    assert client.get(f"{API}/health").status_code == 200

    res = client.get(f"{API}/ready")
    assert res.status_code == 200
    assert res.json()["data"]["checks"] == {"database": True, "cache": True}


def test_correlation_id_is_echoed(client, auth_headers):
    res = client.get(
        f"{API}/conversations",
        headers={**auth_headers, "X-Correlation-ID": "corr-123"},
    )
    assert res.headers["X-Correlation-ID"] == "corr-123"


def test_correlation_id_is_generated_when_absent(client):
    first = client.get(f"{API}/health").headers["X-Correlation-ID"]
    second = client.get(f"{API}/health").headers["X-Correlation-ID"]
    assert len(first) == 32
    assert first != second


# ==================== AUTH ====================


def test_missing_token_is_401(client):
    res = client.get(f"{API}/conversations")

    assert res.status_code == 401
    assert res.json()["code"] == "UNAUTHORIZED"


def test_invalid_tokens_are_401(client):
    bad_tokens = [
        "not-a-jwt",
        generate_jwt_token(secret="another-secret-that-is-long-enough-0123456789"),
        generate_jwt_token(iss="someone-else"),
        generate_jwt_token(exp=1),
    ]
    for token in bad_tokens:
        res = client.get(
            f"{API}/conversations", headers={"Authorization": f"Bearer {token}"}
        )
        assert res.status_code == 401, token


def test_sub_claim_is_accepted_as_user_id(client):
    headers = {"Authorization": f"Bearer {generate_jwt_token('user-9', claim='sub')}"}
    conversation = create_conversation(client, headers)
    assert conversation["user_id"] == "user-9"


# ==================== CONVERSATIONS ====================


def test_conversation_lifecycle(client, auth_headers):
    created = create_conversation(client, auth_headers, channel="whatsapp")
    assert created["status"] == "active"

    res = client.get(f"{API}/conversations/{created['id']}", headers=auth_headers)
    body = res.json()
    assert res.status_code == 200
    assert body["code"] == "SUCCESS"
    assert body["data"]["channel"] == "whatsapp"

    res = client.patch(
        f"{API}/conversations/{created['id']}",
        headers=auth_headers,
        json={"status": "archived"},
    )
    assert res.status_code == 200
    assert res.json()["data"]["status"] == "archived"

    res = client.get(
        f"{API}/conversations",
        headers=auth_headers,
        params={"status": "archived", "channel": "whatsapp"},
    )
    listed = res.json()["data"]
    assert [c["id"] for c in listed["conversations"]] == [created["id"]]
    assert listed["limit"] == 20


def test_list_limit_is_clamped(client, auth_headers):
    res = client.get(
        f"{API}/conversations", headers=auth_headers, params={"limit": 100000}
    )
    assert res.json()["data"]["limit"] == 100


def test_invalid_channel_is_400(client, auth_headers):
    res = client.post(
        f"{API}/conversations", headers=auth_headers, json={"channel": "fax"}
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_REQUEST"


def test_foreign_absent_and_malformed_ids_look_the_same(
    client, auth_headers, other_headers
):
    created = create_conversation(client, auth_headers)

    foreign = client.get(f"{API}/conversations/{created['id']}", headers=other_headers)
    absent = client.get(
        f"{API}/conversations/00000000-0000-4000-8000-000000000000",
        headers=other_headers,
    )
    malformed = client.get(f"{API}/conversations/not-a-uuid", headers=other_headers)

    for res in (foreign, absent, malformed):
        assert res.status_code == 404
        assert res.json() == {
            "code": "NOT_FOUND",
            "message": NOT_FOUND_OR_DENIED,
            "data": None,
        }


# ==================== MESSAGES ====================


def test_send_and_list_messages(client, auth_headers):
    conversation = create_conversation(client, auth_headers)
    first = send_message(client, auth_headers, conversation["id"], "first")
    second = send_message(client, auth_headers, conversation["id"], "second")
    assert first.status_code == 201
    assert first.json()["data"]["sender_id"] == "user-1"
    assert first.json()["data"]["sender_type"] == "user"

    res = client.get(
        f"{API}/conversations/{conversation['id']}/messages", headers=auth_headers
    )
    messages = res.json()["data"]["messages"]
    assert [m["content"] for m in messages] == ["second", "first"]
    assert messages[0]["metadata"] == {"k": "v"}

    message_id = second.json()["data"]["id"]
    res = client.get(f"{API}/messages/{message_id}", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["data"]["content"] == "second"


def test_empty_message_is_400(client, auth_headers):
    conversation = create_conversation(client, auth_headers)
    res = send_message(client, auth_headers, conversation["id"], "")
    assert res.status_code == 400


def test_other_user_cannot_send_or_read(client, auth_headers, other_headers):
    conversation = create_conversation(client, auth_headers)
    message = send_message(client, auth_headers, conversation["id"]).json()["data"]

    assert send_message(client, other_headers, conversation["id"]).status_code == 404
    assert (
        client.get(
            f"{API}/conversations/{conversation['id']}/messages", headers=other_headers
        ).status_code
        == 404
    )
    assert (
        client.get(f"{API}/messages/{message['id']}", headers=other_headers).status_code
        == 404
    )


# ==================== ATTACHMENTS ====================


def test_upload_attachment_to_message(client, auth_headers, other_headers):
    conversation = create_conversation(client, auth_headers)
    message = send_message(client, auth_headers, conversation["id"]).json()["data"]

    res = client.post(
        f"{API}/messages/{message['id']}/attachments",
        headers=auth_headers,
        files={"file": ("photo.jpg", io.BytesIO(b"\xff\xd8\xff"), "image/jpeg")},
    )
    assert res.status_code == 201, res.text
    attachment = res.json()["data"]
    assert attachment["type"] == "image"
    assert attachment["size"] == 3
    assert attachment["url"].startswith("/uploads/user-1/")

    res = client.get(f"{API}/attachments/{attachment['id']}", headers=auth_headers)
    assert res.status_code == 200
    assert (
        client.get(
            f"{API}/attachments/{attachment['id']}", headers=other_headers
        ).status_code
        == 404
    )

    res = client.get(f"{API}/messages/{message['id']}", headers=auth_headers)
    assert [a["id"] for a in res.json()["data"]["attachments"]] == [attachment["id"]]


def test_upload_to_foreign_message_stores_nothing(
    client, auth_headers, other_headers, test_config
):
    conversation = create_conversation(client, auth_headers)
    message = send_message(client, auth_headers, conversation["id"]).json()["data"]

    res = client.post(
        f"{API}/messages/{message['id']}/attachments",
        headers=other_headers,
        files={"file": ("x.txt", io.BytesIO(b"abc"), "text/plain")},
    )

    assert res.status_code == 404
    assert not (Path(test_config.FILE_STORAGE_LOCAL_PATH) / "user-2").exists()


def test_bare_upload_returns_reference(client, auth_headers):
    res = client.post(
        f"{API}/attachments/upload",
        headers=auth_headers,
        files={"file": ("song.mp3", io.BytesIO(b"ID3"), "audio/mpeg")},
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["type"] == "audio"
    assert data["size"] == 3
    assert data["filename"] == "song.mp3"


def test_oversized_upload_is_413(client, auth_headers, test_config):
    res = client.post(
        f"{API}/attachments/upload",
        headers=auth_headers,
        files={
            "file": (
                "big.bin",
                io.BytesIO(b"0" * (test_config.FILE_STORAGE_MAX_SIZE + 1)),
                "application/octet-stream",
            )
        },
    )
    assert res.status_code == 413
    assert res.json()["code"] == "PAYLOAD_TOO_LARGE"


# ==================== FAILURES ====================


class BrokenStoreProvider(Provider):
    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        repo = AsyncMock(spec=ConversationRepository)
        repo.create.side_effect = StorageUnavailableError("connection refused on 10.0.0.5")
        repo.list_by_user.side_effect = RuntimeError("secret internals")
        repo.ping.return_value = False
        return repo


def test_store_failures_are_generic_500(test_config):
    app = create_fastapi_app(create_container(test_config, BrokenStoreProvider()))
    with TestClient(app, raise_server_exceptions=False) as client:
        headers = bearer("user-1")

        res = client.post(
            f"{API}/conversations", headers=headers, json={"channel": "web"}
        )
        assert res.status_code == 500
        assert res.json() == {
            "code": "INTERNAL_ERROR",
            "message": "Internal server error",
            "data": None,
        }

        res = client.get(f"{API}/conversations", headers=headers)
        assert res.status_code == 500
        assert "secret" not in res.text

        res = client.get(f"{API}/ready")
        assert res.status_code == 503
        assert res.json()["data"]["checks"]["database"] is False


class FailingAttachmentStore(InMemoryAttachmentRepository):
    async def create(self, attachment):
        raise StorageUnavailableError("attachment table unavailable")


class FailingAttachmentStoreProvider(Provider):
    @provide(scope=Scope.APP)
    def get_attachment_repository(self) -> AttachmentRepository:
        return FailingAttachmentStore()


def test_failed_attachment_record_removes_stored_file(test_config):
    app = create_fastapi_app(
        create_container(test_config, FailingAttachmentStoreProvider())
    )
    uploads = Path(test_config.FILE_STORAGE_LOCAL_PATH)
    with TestClient(app, raise_server_exceptions=False) as client:
        headers = bearer("user-1")
        conversation = create_conversation(client, headers)
        message = send_message(client, headers, conversation["id"]).json()["data"]

        res = client.post(
            f"{API}/messages/{message['id']}/attachments",
            headers=headers,
            files={"file": ("notes.txt", io.BytesIO(b"abc"), "text/plain")},
        )

    assert res.status_code == 500
    assert res.json()["code"] == "INTERNAL_ERROR"
    assert [p for p in uploads.rglob("*") if p.is_file()] == []
