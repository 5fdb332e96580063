"""Memos: titled notes with a creation time."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .database import Database, DatabaseError


@dataclass(frozen=True)
class Memo:
    id: int
    title: str
    content: str
    created: str


def _validated(title: str, content: str) -> tuple[str, str]:
    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        raise ValueError("title and content must not be empty")
    return title, content


class MemoManager:
    """Adds, edits, lists and deletes memos."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self._db.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def add_memo(self, title: str, content: str) -> int:
        """Store a memo and return its id."""
        title, content = _validated(title, content)
        cursor = self._execute(
            "INSERT INTO memo(title, content) VALUES (?, ?)", (title, content)
        )
        return cursor.lastrowid

    def list_titles(self) -> list[str]:
        """Titles of all memos, newest first."""
        rows = self._execute("SELECT title FROM memo ORDER BY id DESC").fetchall()
        return [title for (title,) in rows]

    def list_memos(self) -> list[Memo]:
        """All memos with a title, ordered by title."""
        rows = self._execute(
            "SELECT id, title, content, ctime FROM memo ORDER BY title ASC"
        ).fetchall()
        return [Memo(*row) for row in rows if row[1]]

    def content(self, memo_id: int) -> str | None:
        """Content of a memo, or None if there is no such memo."""
        if memo_id <= 0:
            return None
        row = self._execute("SELECT content FROM memo WHERE id = ?", (memo_id,)).fetchone()
        return row[0] if row else None

    def delete_memo(self, memo_id: int) -> bool:
        """Delete a memo; False if there is no such memo."""
        if memo_id <= 0:
            return False
        cursor = self._execute("DELETE FROM memo WHERE id = ?", (memo_id,))
        return cursor.rowcount > 0

    def update_memo(self, memo_id: int, title: str, content: str) -> bool:
        """Replace a memo's title and content; False if there is no such memo."""
        title, content = _validated(title, content)
        if memo_id <= 0:
            return False
        cursor = self._execute(
            "UPDATE memo SET title = ?, content = ? WHERE id = ?",
            (title, content, memo_id),
        )
        return cursor.rowcount > 0

    def id_by_title(self, title: str) -> int | None:
        """Id of the first memo with this title, or None."""
        title = (title or "").strip()
        if not title:
            return None
        row = self._execute(
            "SELECT id FROM memo WHERE title = ? ORDER BY id LIMIT 1", (title,)
        ).fetchone()
        return row[0] if row else None