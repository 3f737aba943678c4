"""Update ingestion and event dispatch.

The dispatcher owns the update cursor. Each non-empty fetch moves the cursor
past the last update it returned, so successive fetches never hand out the
same update twice (at-most-once delivery).
"""

from __future__ import annotations

import logging
from typing import List

from core.commands import CommandRouter
from core.errors import UnknownEventType, UnknownMetaType
from core.models import Event, EventType, MessageMeta, Update
from core.ports import TransportPort

LOGGER = logging.getLogger(__name__)


def event_from_update(update: Update) -> Event:
    """Classify an update: no message payload means an UNKNOWN event."""

    message = update.message
    if message is None:
        return Event(type=EventType.UNKNOWN)

    return Event(
        type=EventType.MESSAGE,
        text=message.text,
        meta=MessageMeta(chat_id=message.chat_id, username=message.username),
    )


class EventDispatcher:
    """Fetches updates as events and routes message events to commands.

    Not thread-safe: callers must serialize fetch/process per instance.
    """

    def __init__(self, transport: TransportPort, router: CommandRouter, offset: int = 0) -> None:
        self._transport = transport
        self._router = router
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    def fetch(self, limit: int) -> List[Event]:
        """Fetch up to ``limit`` events starting at the current cursor.

        TransportError propagates and leaves the cursor untouched.
        """

        updates = self._transport.fetch_updates(self._offset, limit)
        if not updates:
            return []

        events = [event_from_update(update) for update in updates]

        # Never move backwards, even if the provider misorders a batch.
        self._offset = max(self._offset, updates[-1].update_id + 1)
        LOGGER.debug("Fetched %s updates, offset is now %s", len(updates), self._offset)

        return events

    def process(self, event: Event) -> None:
        """Handle one event; raises UnknownEventType for non-message events."""

        if event.type is not EventType.MESSAGE:
            raise UnknownEventType(f"cannot process {event.type.value} event")
        if not isinstance(event.meta, MessageMeta):
            raise UnknownMetaType(f"unexpected meta {type(event.meta).__name__}")

        self._router.handle(event.text, event.meta)
