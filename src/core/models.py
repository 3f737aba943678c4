"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any provider-specific payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from core.errors import UnknownMetaType


@dataclass(frozen=True)
class IncomingMessage:
    """Message payload of an update, reduced to what command handling needs."""

    chat_id: int
    username: str
    text: str


@dataclass(frozen=True)
class Update:
    """One raw notification from the provider.

    ``update_id`` is unique and increasing. ``message`` is None for update
    kinds the bot does not understand (edits, callbacks, channel posts...).
    """

    update_id: int
    message: Optional[IncomingMessage] = None


class EventType(Enum):
    MESSAGE = "message"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MessageMeta:
    """Metadata carried by MESSAGE events."""

    chat_id: int
    username: str


@dataclass(frozen=True)
class Event:
    """Unit of work derived from an Update.

    The meta payload is tied to the type: MESSAGE events always carry a
    MessageMeta and UNKNOWN events never carry one.
    """

    type: EventType
    text: str = ""
    meta: Optional[MessageMeta] = None

    def __post_init__(self) -> None:
        if self.type is EventType.MESSAGE and not isinstance(self.meta, MessageMeta):
            raise UnknownMetaType(f"message event requires MessageMeta, got {type(self.meta).__name__}")
        if self.type is not EventType.MESSAGE and self.meta is not None:
            raise UnknownMetaType(f"{self.type.value} event must not carry meta")


@dataclass(frozen=True)
class Recipe:
    """A recipe as submitted by users and persisted by the store.

    ``id`` and ``created_at`` stay None until the store assigns them.
    """

    name: str
    photo_url: str
    description: str = ""
    instructions: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class SearchOptions:
    """Optional filters for RecipeStorePort.search; unset fields are ignored."""

    id: Optional[int] = None
    name: Optional[str] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None
