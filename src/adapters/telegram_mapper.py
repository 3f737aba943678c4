"""Telegram-to-core update mapping adapter.

This keeps Bot API payload details out of the core dispatcher.
"""

from __future__ import annotations

from typing import Any, Optional

from core.models import IncomingMessage, Update


def _message_from_payload(message: Optional[dict]) -> Optional[IncomingMessage]:
    if not message:
        return None

    chat = message.get("chat") or {}
    # "from" is absent for messages sent on behalf of channels.
    sender = message.get("from") or {}

    return IncomingMessage(
        chat_id=int(chat["id"]),
        username=sender.get("username") or "",
        # Media messages have no text; they route as unknown commands.
        text=message.get("text") or "",
    )


def update_from_payload(payload: dict[str, Any]) -> Update:
    """Build a core Update from a Bot API ``Update`` object.

    Only plain ``message`` updates are mapped to a message; every other kind
    (edited messages, callback queries, channel posts) keeps message=None.
    """

    return Update(
        update_id=int(payload["update_id"]),
        message=_message_from_payload(payload.get("message")),
    )
