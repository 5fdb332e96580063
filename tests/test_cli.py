from datetime import date
from unittest import mock

import pytest

from deskassistant.cli import (
    DATE_INVALID,
    INVALID_ID,
    MEMO_EMPTY,
    NO_DAYS,
    NO_MEMOS,
    TITLE_EMPTY,
    InputError,
    build_parser,
    main,
    validate_day,
    validate_memo,
)
from deskassistant.database import Database
from deskassistant.important_days import ImportantDayManager
from deskassistant.memos import MemoManager


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data.db")


def run(db_path, *args):
    return main(["--db", db_path, *args])


def test_validate_day_strips_and_parses():
    assert validate_day("  生日 ", "2020-05-01") == ("生日", date(2020, 5, 1))


def test_validate_day_accepts_date_object():
    assert validate_day("a", date(2021, 2, 3)) == ("a", date(2021, 2, 3))


def test_validate_day_empty_title():
    with pytest.raises(InputError, match=TITLE_EMPTY):
        validate_day("   ", "2020-05-01")


@pytest.mark.parametrize("text", ["2020-13-40", "not a date", "1800-01-01"])
def test_validate_day_bad_date(text):
    with pytest.raises(InputError, match=DATE_INVALID):
        validate_day("t", text)


def test_validate_memo_strips():
    assert validate_memo(" t ", " body\n") == ("t", "body")


@pytest.mark.parametrize("title,content", [("", "x"), ("x", "  "), ("", "")])
def test_validate_memo_empty(title, content):
    with pytest.raises(InputError, match=MEMO_EMPTY):
        validate_memo(title, content)


def test_parser_day_add():
    args = build_parser().parse_args(["day", "add", "t", "2020-01-01"])
    assert (args.title, args.date) == ("t", "2020-01-01")


def test_parser_memo_edit_options():
    args = build_parser().parse_args(["memo", "edit", "old", "--title", "new"])
    assert (args.title, args.new_title, args.new_content) == ("old", "new", None)


def test_day_add_and_list(db_path, capsys):
    assert run(db_path, "day", "add", "生日", "2020-05-01") == 0
    assert run(db_path, "day", "list") == 0
    assert capsys.readouterr().out.splitlines() == ["生日\t2020-05-01"]


def test_day_list_empty(db_path, capsys):
    assert run(db_path, "day", "list") == 0
    assert capsys.readouterr().out.strip() == NO_DAYS


def test_day_add_empty_title_fails(db_path, capsys):
    assert run(db_path, "day", "add", " ", "2020-05-01") == 1
    assert TITLE_EMPTY in capsys.readouterr().err
    with Database(db_path) as db:
        assert ImportantDayManager(db).list_days() == []


def test_day_remove(db_path):
    run(db_path, "day", "add", "a", "2020-05-01")
    assert run(db_path, "day", "remove", "a", "2020-05-01", "--yes") == 0
    with Database(db_path) as db:
        assert ImportantDayManager(db).list_days() == []


def test_day_remove_missing(db_path):
    assert run(db_path, "day", "remove", "a", "2020-05-01", "--yes") == 1


def test_day_remove_declined(db_path):
    run(db_path, "day", "add", "a", "2020-05-01")
    with mock.patch("builtins.input", return_value="n"):
        assert run(db_path, "day", "remove", "a", "2020-05-01") == 0
    with Database(db_path) as db:
        assert [d.title for d in ImportantDayManager(db).list_days()] == ["a"]


def test_day_edit(db_path):
    run(db_path, "day", "add", "a", "2020-05-01")
    assert run(db_path, "day", "edit", "a", "2020-05-01", "--title", "b", "--date", "2021-06-02") == 0
    with Database(db_path) as db:
        days = ImportantDayManager(db).list_days()
    assert [(d.title, d.day) for d in days] == [("b", date(2021, 6, 2))]


def test_day_next_without_days(db_path, capsys):
    assert run(db_path, "day", "next") == 0
    assert capsys.readouterr().out.strip() == "最近有什么计划嘛？"


def test_day_next_with_day(db_path, capsys):
    run(db_path, "day", "add", "生日", "2020-05-01")
    run(db_path, "day", "next")
    assert capsys.readouterr().out.startswith("距离 生日 还有")


def test_memo_add_list_show(db_path, capsys):
    assert run(db_path, "memo", "add", "b", "second") == 0
    assert run(db_path, "memo", "add", "a", "first") == 0
    capsys.readouterr()
    run(db_path, "memo", "list")
    assert capsys.readouterr().out.splitlines() == ["a", "b"]
    run(db_path, "memo", "show", "a")
    assert capsys.readouterr().out.splitlines() == ["a", "first"]


def test_memo_list_empty(db_path, capsys):
    run(db_path, "memo", "list")
    assert capsys.readouterr().out.strip() == NO_MEMOS


def test_memo_add_empty_fails(db_path, capsys):
    assert run(db_path, "memo", "add", "t", "  ") == 1
    assert MEMO_EMPTY in capsys.readouterr().err


def test_memo_recent_newest_three(db_path, capsys):
    for title in ("a", "b", "c", "d"):
        run(db_path, "memo", "add", title, "x")
    capsys.readouterr()
    run(db_path, "memo", "recent")
    assert capsys.readouterr().out.splitlines() == ["d", "c", "b"]


def test_memo_edit_keeps_content(db_path):
    run(db_path, "memo", "add", "a", "body")
    assert run(db_path, "memo", "edit", "a", "--title", "z") == 0
    with Database(db_path) as db:
        memos = MemoManager(db).list_memos()
    assert [(m.title, m.content) for m in memos] == [("z", "body")]


def test_memo_remove(db_path):
    run(db_path, "memo", "add", "a", "body")
    assert run(db_path, "memo", "remove", "a", "-y") == 0
    with Database(db_path) as db:
        assert MemoManager(db).list_titles() == []


def test_memo_show_unknown(db_path, capsys):
    assert run(db_path, "memo", "show", "nothing") == 1
    assert INVALID_ID in capsys.readouterr().err


def test_show_offline(db_path, capsys):
    run(db_path, "memo", "add", "买菜", "x")
    capsys.readouterr()
    assert run(db_path, "show", "--offline") == 0
    out = capsys.readouterr().out
    assert "加载中..." in out
    assert "买菜" in out


def test_bad_database_path(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    assert main(["--db", str(blocker / "sub" / "data.db"), "day", "list"]) == 1