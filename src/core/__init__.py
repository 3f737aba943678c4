"""Core domain package for mealbot.

Core contains event dispatch, command routing, and submission parsing without
any Telegram or storage-specific code, keeping the business logic portable.
"""
