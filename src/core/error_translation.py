"""Turn user-caused errors into chat replies.

Classification is structural: anything deriving from ClientError, anywhere on
the exception chain, is reported to the user instead of the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from core import replies
from core.errors import ClientError
from core.ports import TransportPort

LOGGER = logging.getLogger(__name__)

# Replies that differ from the error's own message, keyed by error code.
CLIENT_REPLIES = {
    "not_found": replies.NO_RECIPES,
}


def find_client_error(exc: BaseException) -> Optional[ClientError]:
    """Return the first ClientError on the exception's cause/context chain."""

    seen: set[int] = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, ClientError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def client_reply(error: ClientError) -> str:
    return CLIENT_REPLIES.get(error.code, str(error))


def reply_to_client_error(transport: TransportPort, chat_id: int, exc: BaseException) -> bool:
    """Reply to the chat if ``exc`` is user-caused.

    Returns True when the error was reported and should be swallowed, False
    when the caller has to handle it. Send failures raise TransportError.
    """

    error = find_client_error(exc)
    if error is None:
        return False

    LOGGER.info("Replying to chat %s with client error %s", chat_id, error.code)
    transport.send_text(chat_id, client_reply(error))
    return True
