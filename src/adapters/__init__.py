"""Adapters that implement the core ports for Telegram and SQLite."""
