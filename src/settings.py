"""Static configuration for mealbot.

Non-secret settings (polling, storage, logging) live in a single JSON file
for quick edits without touching Python. Secrets come from the environment.
"""

import json
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Bot API connection. The token itself is read from BOT_TOKEN in client.py.
_telegram = _CONFIG.get("telegram", {})
TELEGRAM_HOST = _telegram.get("host", "api.telegram.org")
REQUEST_TIMEOUT = float(_telegram.get("request_timeout", 10))

# Polling controls for the consumer loop.
# - BATCH_SIZE: max updates per getUpdates call (Bot API allows 1-100)
# - POLL_INTERVAL: seconds to wait after an empty or failed fetch
_polling = _CONFIG.get("polling", {})
BATCH_SIZE = int(_polling.get("batch_size", 100))
POLL_INTERVAL = float(_polling.get("poll_interval", 1.0))

# Where to store the SQLite database.
_storage = _CONFIG.get("storage", {})
DB_PATH = _resolve_path(_storage.get("db_path", "data/mealbot.db"))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
