"""Telegram Bot API transport adapter.

Implements the core TransportPort with plain HTTPS calls to the Bot API.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any, List

from adapters.telegram_mapper import update_from_payload
from core.errors import TransportError
from core.models import Update

LOGGER = logging.getLogger(__name__)

DEFAULT_HOST = "api.telegram.org"

GET_UPDATES_METHOD = "getUpdates"
SEND_MESSAGE_METHOD = "sendMessage"
SEND_PHOTO_METHOD = "sendPhoto"


class TelegramBotClient:
    """Transport adapter that talks to the Telegram Bot API."""

    def __init__(self, bot_token: str, host: str = DEFAULT_HOST, timeout: float = 10.0) -> None:
        self._bot_token = bot_token
        self._host = host
        self._timeout = timeout

    def _endpoint(self, method: str) -> str:
        # The Bot API endpoint is deterministic and derived from the token.
        return f"https://{self._host}/bot{self._bot_token}/{method}"

    def _call(self, method: str, payload: dict[str, Any]) -> Any:
        """POST ``payload`` to ``method`` and return the envelope's result."""

        LOGGER.debug("Calling Bot API method %s", method)
        data = json.dumps(payload).encode("utf-8")
        request = urllib.request.Request(self._endpoint(method), data=data, method="POST")
        request.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                body = response.read()
        except urllib.error.HTTPError as e:
            detail = e.read().decode("utf-8", errors="replace")
            raise TransportError(f"Bot API error {e.code} on {method}: {detail}") from e
        except urllib.error.URLError as e:
            raise TransportError(f"{method} request failed: {e.reason}") from e
        except OSError as e:
            raise TransportError(f"{method} request failed: {e}") from e

        try:
            envelope = json.loads(body)
        except ValueError as e:
            raise TransportError(f"{method} returned invalid JSON") from e

        if not isinstance(envelope, dict) or not envelope.get("ok"):
            description = envelope.get("description") if isinstance(envelope, dict) else envelope
            raise TransportError(f"Bot API error on {method}: {description}")

        return envelope.get("result")

    def fetch_updates(self, offset: int, limit: int) -> List[Update]:
        """Return up to ``limit`` updates with ids >= ``offset``."""

        result = self._call(GET_UPDATES_METHOD, {"offset": offset, "limit": limit})
        try:
            return [update_from_payload(item) for item in result or []]
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(f"cannot decode updates: {e!r}") from e

    def send_text(self, chat_id: int, text: str) -> None:
        self._call(SEND_MESSAGE_METHOD, {"chat_id": chat_id, "text": text})

    def send_photo(self, chat_id: int, photo_url: str, caption: str) -> None:
        self._call(
            SEND_PHOTO_METHOD,
            {"chat_id": chat_id, "photo": photo_url, "caption": caption},
        )
