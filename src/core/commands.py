"""Command routing for incoming chat messages."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from core import replies
from core.error_translation import reply_to_client_error
from core.errors import TransportError
from core.models import MessageMeta
from core.ports import RecipeStorePort, TransportPort
from core.recipe_parser import parse_recipe_text

LOGGER = logging.getLogger(__name__)

ADD_RECIPE_CMD = "/add"
ADD_SAMPLE_CMD = "/add_sample"
MEAL_CMD = "/meal"
HELP_CMD = "/help"
START_CMD = "/start"


def is_add_recipe_command(text: str) -> bool:
    # Substring, not prefix: "/add" anywhere in the message counts.
    return ADD_RECIPE_CMD in text


class CommandRouter:
    """Maps message text to a command handler and reports client errors."""

    def __init__(self, transport: TransportPort, store: RecipeStorePort) -> None:
        self._transport = transport
        self._store = store
        self._exact: Dict[str, Callable[[int], None]] = {
            MEAL_CMD: self.send_random_recipe,
            HELP_CMD: self.send_help,
            START_CMD: self.send_hello,
            ADD_SAMPLE_CMD: self.send_add_sample,
        }

    def handle(self, text: str, meta: MessageMeta) -> None:
        """Run the command in ``text`` for the chat in ``meta``.

        User-caused errors (invalid submissions, empty store) are replied to
        in the chat and not raised. Everything else propagates.
        """

        try:
            self._dispatch(text, meta)
        except Exception as exc:
            if not reply_to_client_error(self._transport, meta.chat_id, exc):
                raise

    def _dispatch(self, text: str, meta: MessageMeta) -> None:
        text = text.strip()

        LOGGER.info("Got new command '%s' from '%s'", text, meta.username)

        # Exact commands take precedence over the /add substring rule.
        handler = self._exact.get(text)
        if handler is not None:
            handler(meta.chat_id)
            return

        if is_add_recipe_command(text):
            self.add_recipe(meta.chat_id, text)
            return

        self._transport.send_text(meta.chat_id, replies.UNKNOWN_COMMAND)

    def add_recipe(self, chat_id: int, text: str) -> None:
        recipe = parse_recipe_text(text)
        self._store.create(recipe)
        self._transport.send_text(chat_id, replies.SAVED)
        LOGGER.info("Recipe '%s' saved", recipe.name)

    def send_random_recipe(self, chat_id: int) -> None:
        recipe = self._store.get_random()

        try:
            self._transport.send_photo(chat_id, recipe.photo_url, recipe.name)
        except TransportError as exc:
            raise TransportError(f"can't send photo: {exc}") from exc

        if recipe.description:
            try:
                self._transport.send_text(chat_id, recipe.description)
            except TransportError as exc:
                raise TransportError(f"can't send description: {exc}") from exc

        if recipe.instructions:
            try:
                self._transport.send_text(chat_id, recipe.instructions)
            except TransportError as exc:
                raise TransportError(f"can't send instructions: {exc}") from exc

    def send_help(self, chat_id: int) -> None:
        self._transport.send_text(chat_id, replies.HELP)

    def send_hello(self, chat_id: int) -> None:
        self._transport.send_text(chat_id, replies.HELLO)

    def send_add_sample(self, chat_id: int) -> None:
        self._transport.send_text(chat_id, replies.ADD_SAMPLE)
