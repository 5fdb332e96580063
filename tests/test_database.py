import sqlite3
import sys

import pytest

from deskassistant.database import Database, DatabaseError, default_database_path


def _tables(db):
    rows = db.connection.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def test_tables_created_in_memory():
    with Database(":memory:") as db:
        assert _tables(db) == {"important_day", "memo"}


def test_foreign_keys_enabled():
    with Database(":memory:") as db:
        assert db.connection.execute("PRAGMA foreign_keys").fetchone() == (1,)


def test_memo_ctime_defaults_to_timestamp():
    with Database(":memory:") as db:
        db.connection.execute("INSERT INTO memo(title, content) VALUES ('a', 'b')")
        (ctime,) = db.connection.execute("SELECT ctime FROM memo").fetchone()
        assert len(ctime) == len("2000-01-01 00:00:00")
        assert ctime[4] == "-" and ctime[10] == " "


def test_creates_parent_directory_and_persists(tmp_path):
    path = tmp_path / "nested" / "dir" / "data.db"
    with Database(path) as db:
        db.connection.execute(
            "INSERT INTO important_day(title, date) VALUES ('x', '2020-01-01')"
        )
    assert path.exists()
    with Database(path) as db:
        rows = db.connection.execute("SELECT title, date FROM important_day").fetchall()
    assert rows == [("x", "2020-01-01")]


def test_close_by_context_manager():
    with Database(":memory:") as db:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        db.connection.execute("SELECT 1")


def test_unwritable_directory_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(DatabaseError):
        Database(blocker / "sub" / "data.db")


def test_default_path_uses_xdg_data_home(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert default_database_path() == tmp_path / "MyOrg" / "sd-desktop-assistant" / "data.db"


def test_default_path_falls_back_to_home(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    path = default_database_path()
    assert path.name == "data.db"
    assert path.parts[-3:-1] == ("MyOrg", "sd-desktop-assistant")