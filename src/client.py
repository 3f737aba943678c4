"""Telegram Bot API client factory for mealbot."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

import settings
from adapters.telegram_bot_client import TelegramBotClient


def build_client() -> TelegramBotClient:
    """Create a Bot API client from environment variables.

    We read BOT_TOKEN via python-dotenv to keep secrets out of the repo.
    """

    load_dotenv()

    bot_token = os.getenv("BOT_TOKEN")

    # Fail fast on missing credentials instead of polling with a bad URL.
    if not bot_token:
        raise RuntimeError("Missing BOT_TOKEN in environment")

    logging.getLogger(__name__).info("Initializing Telegram bot client")

    return TelegramBotClient(
        bot_token=bot_token,
        host=settings.TELEGRAM_HOST,
        timeout=settings.REQUEST_TIMEOUT,
    )
