"""Ports (interfaces) used by the core.

Ports define the minimal contracts for transport and storage adapters so
that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import List, Protocol

from core.models import Recipe, SearchOptions, Update


class TransportPort(Protocol):
    """Messaging provider operations. Failures raise TransportError."""

    def fetch_updates(self, offset: int, limit: int) -> List[Update]:
        ...

    def send_text(self, chat_id: int, text: str) -> None:
        ...

    def send_photo(self, chat_id: int, photo_url: str, caption: str) -> None:
        ...


class RecipeStorePort(Protocol):
    """Recipe persistence. get_random/get_by_id raise RecipeNotFound."""

    def create(self, recipe: Recipe) -> int:
        ...

    def get_random(self) -> Recipe:
        ...

    def get_by_id(self, recipe_id: int) -> Recipe:
        ...

    def search(self, options: SearchOptions) -> List[Recipe]:
        ...

    def get_all(self, limit: int) -> List[Recipe]:
        ...

    def delete(self, recipe_id: int) -> None:
        ...
