from __future__ import annotations

import io
import json
import urllib.error
import urllib.request

import pytest

from adapters.telegram_bot_client import TelegramBotClient
from core.errors import TransportError


class FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class FakeUrlopen:
    def __init__(self, body=None, error: "Exception | None" = None) -> None:
        self._body = body
        self._error = error
        self.requests: list[urllib.request.Request] = []

    def __call__(self, request: urllib.request.Request, timeout: float) -> FakeResponse:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        raw = self._body if isinstance(self._body, bytes) else json.dumps(self._body).encode("utf-8")
        return FakeResponse(raw)


@pytest.fixture
def client() -> TelegramBotClient:
    return TelegramBotClient("123:secret", host="api.example.org", timeout=5)


def test_fetch_updates_posts_offset_and_limit(monkeypatch, client) -> None:
    fake = FakeUrlopen(
        {
            "ok": True,
            "result": [
                {"update_id": 10, "message": {"chat": {"id": 1}, "from": {"username": "a"}, "text": "/meal"}},
                {"update_id": 11, "callback_query": {"id": "q"}},
            ],
        }
    )
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    updates = client.fetch_updates(offset=10, limit=50)

    assert [u.update_id for u in updates] == [10, 11]
    assert updates[0].message is not None and updates[0].message.text == "/meal"
    assert updates[1].message is None

    request = fake.requests[0]
    assert request.full_url == "https://api.example.org/bot123:secret/getUpdates"
    assert request.get_method() == "POST"
    assert json.loads(request.data) == {"offset": 10, "limit": 50}


def test_send_photo_payload(monkeypatch, client) -> None:
    fake = FakeUrlopen({"ok": True, "result": {"message_id": 1}})
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    client.send_photo(7, "https://example.com/soup.jpg", "Soup")

    request = fake.requests[0]
    assert request.full_url.endswith("/sendPhoto")
    assert json.loads(request.data) == {
        "chat_id": 7,
        "photo": "https://example.com/soup.jpg",
        "caption": "Soup",
    }


def test_send_text_payload(monkeypatch, client) -> None:
    fake = FakeUrlopen({"ok": True, "result": {"message_id": 2}})
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    client.send_text(7, "Saved! 👌")

    assert fake.requests[0].full_url.endswith("/sendMessage")
    assert json.loads(fake.requests[0].data) == {"chat_id": 7, "text": "Saved! 👌"}


def test_http_error_becomes_transport_error(monkeypatch, client) -> None:
    error = urllib.error.HTTPError(
        "https://api.example.org", 400, "Bad Request", {}, io.BytesIO(b'{"ok":false}')
    )
    monkeypatch.setattr(urllib.request, "urlopen", FakeUrlopen(error=error))

    with pytest.raises(TransportError, match="Bot API error 400 on sendMessage"):
        client.send_text(7, "hi")


def test_network_error_becomes_transport_error(monkeypatch, client) -> None:
    monkeypatch.setattr(
        urllib.request, "urlopen", FakeUrlopen(error=urllib.error.URLError("connection refused"))
    )

    with pytest.raises(TransportError, match="connection refused"):
        client.fetch_updates(0, 100)


def test_not_ok_envelope_becomes_transport_error(monkeypatch, client) -> None:
    fake = FakeUrlopen({"ok": False, "description": "Unauthorized"})
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    with pytest.raises(TransportError, match="Unauthorized"):
        client.fetch_updates(0, 100)


def test_invalid_json_becomes_transport_error(monkeypatch, client) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", FakeUrlopen(b"<html>502</html>"))

    with pytest.raises(TransportError, match="invalid JSON"):
        client.fetch_updates(0, 100)


def test_malformed_update_becomes_transport_error(monkeypatch, client) -> None:
    fake = FakeUrlopen({"ok": True, "result": [{"message": {"text": "no id"}}]})
    monkeypatch.setattr(urllib.request, "urlopen", fake)

    with pytest.raises(TransportError, match="cannot decode updates"):
        client.fetch_updates(0, 100)
