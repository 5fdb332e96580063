"""Important days: storage and countdown to the nearest anniversary."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date, datetime

from .database import Database, DatabaseError


@dataclass(frozen=True)
class ImportantDay:
    id: int
    title: str
    day: date


@dataclass(frozen=True)
class NearestDay:
    title: str
    days: int


def days_until(day: date, today: date | None = None) -> int:
    """Days from today to the next yearly recurrence of day (0 if it is today).

    A 29 February falls on 1 March in years without one.
    """
    today = today or date.today()
    try:
        target = day.replace(year=today.year)
    except ValueError:
        target = date(today.year, 3, 1)
    if target < today:
        try:
            target = target.replace(year=target.year + 1)
        except ValueError:
            target = date(target.year + 1, 2, 28)
    return (target - today).days


def _parse(text: object) -> date | None:
    try:
        return date.fromisoformat(str(text))
    except ValueError:
        return None


def _validated(title: str, day: date) -> tuple[str, str]:
    stripped = (title or "").strip()
    if not stripped:
        raise ValueError("title must not be empty")
    if isinstance(day, datetime):
        day = day.date()
    if not isinstance(day, date):
        raise ValueError("day must be a date")
    return stripped, day.isoformat()


class ImportantDayManager:
    """Adds, edits, lists and counts down to important days."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self._db.connection.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def add_day(self, title: str, day: date) -> int:
        """Store a day and return its id."""
        stripped, iso = _validated(title, day)
        cursor = self._execute(
            "INSERT INTO important_day(title, date) VALUES (?, ?)", (stripped, iso)
        )
        return cursor.lastrowid

    def remove_day(self, day_id: int) -> bool:
        """Delete a day; False if no such id exists."""
        cursor = self._execute("DELETE FROM important_day WHERE id = ?", (day_id,))
        return cursor.rowcount > 0

    def update_day(self, day_id: int, title: str, day: date) -> bool:
        """Change a day's title and date; False if no such id exists."""
        stripped, iso = _validated(title, day)
        cursor = self._execute(
            "UPDATE important_day SET title = ?, date = ? WHERE id = ?",
            (stripped, iso, day_id),
        )
        return cursor.rowcount > 0

    def list_days(self) -> list[ImportantDay]:
        """All days with a title and a readable date, earliest date first."""
        rows = self._execute(
            "SELECT id, title, date FROM important_day ORDER BY date ASC"
        ).fetchall()
        days = []
        for day_id, title, text in rows:
            parsed = _parse(text)
            if title and parsed is not None:
                days.append(ImportantDay(day_id, title, parsed))
        return days

    def find_id(self, title: str, day: date) -> int | None:
        """Id of the first day with exactly this title and date, or None."""
        if isinstance(day, datetime):
            day = day.date()
        row = self._execute(
            "SELECT id FROM important_day WHERE title = ? AND date = ? ORDER BY id LIMIT 1",
            (title, day.isoformat()),
        ).fetchone()
        return row[0] if row else None

    def nearest_day(self, today: date | None = None) -> NearestDay | None:
        """The day whose next recurrence comes soonest, or None if there is none."""
        today = today or date.today()
        nearest: NearestDay | None = None
        for title, text in self._execute(
            "SELECT title, date FROM important_day ORDER BY id"
        ).fetchall():
            parsed = _parse(text)
            if parsed is None:
                continue
            diff = days_until(parsed, today)
            if nearest is None or diff < nearest.days:
                nearest = NearestDay(title, diff)
        return nearest