"""Exception taxonomy shared by the core and adapters.

User-caused failures derive from ClientError and carry a stable ``code`` so
they can be turned into chat replies without matching on message wording.
"""

from __future__ import annotations


class MealBotError(Exception):
    """Base class for all mealbot errors."""


class TransportError(MealBotError):
    """Talking to the messaging provider failed (network, HTTP or decoding)."""


class UnknownEventType(MealBotError):
    """An event of a type the dispatcher cannot process."""


class UnknownMetaType(MealBotError):
    """Event metadata does not match the event type."""


class ClientError(MealBotError):
    """An expected, user-caused failure that is reported back to the chat."""

    code = "client_error"


class ValidationError(ClientError):
    """A recipe submission failed validation."""

    code = "validation"


class NameEmpty(ValidationError):
    code = "name_empty"

    def __init__(self) -> None:
        super().__init__("name not provided")


class PhotoEmpty(ValidationError):
    code = "photo_empty"

    def __init__(self) -> None:
        super().__init__("photo url empty or invalid")


class StoreError(MealBotError):
    """Persistence layer failure."""


class RecipeNotFound(StoreError, ClientError):
    code = "not_found"
