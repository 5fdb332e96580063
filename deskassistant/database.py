"""SQLite storage shared by the important-day and memo managers."""

from __future__ import annotations

import os
import sqlite3
import sys
from pathlib import Path

ORGANIZATION = "MyOrg"
APPLICATION = "sd-desktop-assistant"
DATABASE_FILE = "data.db"
MEMORY = ":memory:"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS important_day(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        date TEXT NOT NULL)""",
    """CREATE TABLE IF NOT EXISTS memo(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        ctime TEXT DEFAULT (datetime('now','localtime')))""",
)


class DatabaseError(Exception):
    """Raised when the database cannot be opened, prepared or queried."""


def default_database_path() -> Path:
    """Return the per-user location of the data file."""
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / ORGANIZATION / APPLICATION / DATABASE_FILE


class Database:
    """An open SQLite database holding the important_day and memo tables."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        target = default_database_path() if path is None else path
        self.path = str(target)
        if self.path != MEMORY:
            directory = Path(self.path).parent
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise DatabaseError(f"cannot create directory: {directory}") from exc
        try:
            self.connection = sqlite3.connect(self.path, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path}: {exc}") from exc
        try:
            self.connection.execute("PRAGMA foreign_keys = ON")
            for statement in _SCHEMA:
                self.connection.execute(statement)
        except sqlite3.Error as exc:
            self.connection.close()
            raise DatabaseError(f"cannot prepare database {self.path}: {exc}") from exc

    def close(self) -> None:
        """Close the connection; further queries fail."""
        self.connection.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()