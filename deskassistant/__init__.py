"""Desk assistant: important-day countdowns, memos, weather and daily tips, with a command line."""

__version__ = "0.1.0"