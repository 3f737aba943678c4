"""Application entry point for the mealbot."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from dotenv import load_dotenv

import settings
from adapters.sqlite_storage import SQLiteRecipeStore
from client import build_client
from core.commands import CommandRouter
from core.config import PollingConfig
from core.consumer import Consumer
from core.dispatcher import EventDispatcher
from core.errors import ValidationError
from core.recipe_parser import parse_recipe_text

NAME = "MEALBOT"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in redact_cfg.get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    # Secrets must be in the environment before we collect redaction values.
    load_dotenv()
    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    secrets = _collect_redaction_values(config)
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/mealbot.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _run() -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting mealbot")

    store = SQLiteRecipeStore(settings.DB_PATH)
    store.init_db()

    client = build_client()
    router = CommandRouter(transport=client, store=store)
    dispatcher = EventDispatcher(transport=client, router=router)
    consumer = Consumer(
        dispatcher,
        PollingConfig(batch_size=settings.BATCH_SIZE, poll_interval=settings.POLL_INTERVAL),
    )

    stop_event = threading.Event()

    def _handle_signal(signum, frame) -> None:
        logger.info("Received signal %s, shutting down", signum)
        stop_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, _handle_signal)

    consumer.run(stop_event)


def _init_db() -> None:
    _configure_logging()
    SQLiteRecipeStore(settings.DB_PATH).init_db()
    print(f"Database ready at {settings.DB_PATH}")


def _check(path: str) -> int:
    """Parse a submission file and report what the bot would store."""

    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as handle:
            text = handle.read()

    try:
        recipe = parse_recipe_text(text)
    except ValidationError as e:
        print(f"Invalid submission: {e}")
        return 1

    print(f"name:         {recipe.name}")
    print(f"photo:        {recipe.photo_url}")
    print(f"instructions: {recipe.instructions or '-'}")
    print(f"description:  {recipe.description or '-'}")
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="mealbot")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Start polling for chat commands")
    subparsers.add_parser("init-db", help="Create the recipes database")
    check_parser = subparsers.add_parser(
        "check",
        help="Validate an /add submission without saving it.",
    )
    check_parser.add_argument("path", help="File with the submission text, or - for stdin")

    args = parser.parse_args(argv)
    if args.command == "init-db":
        _init_db()
        return
    if args.command == "check":
        sys.exit(_check(args.path))
    _run()


if __name__ == "__main__":
    main()
