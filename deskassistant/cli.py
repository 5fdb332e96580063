"""Command line for the desk assistant: dashboard, important days and memos."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import TextIO

from .database import Database, DatabaseError
from .important_days import ImportantDayManager
from .memos import MemoManager
from .tips import TipsClient
from .views import day_tip_text, memo_preview, render_dashboard
from .weather import DEFAULT_KEY, DEFAULT_LOCATION, WeatherClient

TITLE_EMPTY = "标题不能为空！"
DATE_INVALID = "日期无效！"
MEMO_EMPTY = "标题和内容均不能为空！"
ADD_FAILED = "新增失败！"
DELETE_FAILED = "删除失败！"
UPDATE_FAILED = "更新失败！"
NOT_FOUND = "查询失败：未找到该记录！"
INVALID_ID = "无效ID！"
NO_DAYS = "暂无重要日记录"
NO_MEMOS = "暂无备忘录记录"
DELETED = "已删除！"
SAVED = "已保存！"
CANCELLED = "已取消"
CONFIRM_DAY = "确定要删除该记录吗？"
CONFIRM_MEMO = "确定要删除该备忘录吗？"
YEAR_RANGE = 100


class InputError(ValueError):
    """Raised when user input for a day or memo is rejected."""


def _shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)


def _parse_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InputError(DATE_INVALID) from None


def validate_day(title: str, day: date | str) -> tuple[str, date]:
    """Check an important day's input; returns the stripped title and the date.

    The date must lie within a hundred years of today.
    """
    stripped = (title or "").strip()
    if not stripped:
        raise InputError(TITLE_EMPTY)
    parsed = _parse_date(day)
    today = date.today()
    if not _shift_years(today, -YEAR_RANGE) <= parsed <= _shift_years(today, YEAR_RANGE):
        raise InputError(DATE_INVALID)
    return stripped, parsed


def validate_memo(title: str, content: str) -> tuple[str, str]:
    """Check a memo's input; returns the stripped title and content."""
    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        raise InputError(MEMO_EMPTY)
    return title, content


def _confirm(prompt: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    answer = input(f"{prompt} [y/N] ")
    return answer.strip().lower() in ("y", "yes")


Handler = Callable[[argparse.Namespace, Database, TextIO], int]


# Dashboard

def _show(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    days = ImportantDayManager(db)
    memos = MemoManager(db)
    if args.offline:
        report, tip = None, None
    else:
        report = WeatherClient(args.location, args.key).fetch()
        tip = TipsClient().fetch()
    text = render_dashboard(report, tip, day_tip_text(days.nearest_day()), memos.list_titles())
    print(text, file=out)
    return 0


# Important days

def _day_add(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    title, day = validate_day(args.title, args.date)
    ImportantDayManager(db).add_day(title, day)
    return 0


def _day_list(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    days = ImportantDayManager(db).list_days()
    if not days:
        print(NO_DAYS, file=out)
    for entry in days:
        print(f"{entry.title}\t{entry.day.isoformat()}", file=out)
    return 0


def _find_day(manager: ImportantDayManager, title: str, day: str) -> int:
    day_id = manager.find_id(title, _parse_date(day))
    if day_id is None:
        raise InputError(NOT_FOUND)
    return day_id


def _day_remove(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    manager = ImportantDayManager(db)
    day_id = _find_day(manager, args.title, args.date)
    if not _confirm(CONFIRM_DAY, args.yes):
        print(CANCELLED, file=out)
        return 0
    if not manager.remove_day(day_id):
        raise InputError(DELETE_FAILED)
    return 0


def _day_edit(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    manager = ImportantDayManager(db)
    day_id = _find_day(manager, args.title, args.date)
    new_title = args.title if args.new_title is None else args.new_title
    new_date = args.date if args.new_date is None else args.new_date
    title, day = validate_day(new_title, new_date)
    if not manager.update_day(day_id, title, day):
        raise InputError(UPDATE_FAILED)
    return 0


def _day_next(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    print(day_tip_text(ImportantDayManager(db).nearest_day()), file=out)
    return 0


# Memos

def _memo_add(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    title, content = validate_memo(args.title, args.content)
    MemoManager(db).add_memo(title, content)
    return 0


def _memo_list(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    memos = MemoManager(db).list_memos()
    if not memos:
        print(NO_MEMOS, file=out)
    for memo in memos:
        print(memo.title, file=out)
    return 0


def _memo_recent(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    for title in memo_preview(MemoManager(db).list_titles()):
        print(title, file=out)
    return 0


def _memo_id(manager: MemoManager, title: str) -> int:
    memo_id = manager.id_by_title(title)
    if memo_id is None or memo_id <= 0:
        raise InputError(INVALID_ID)
    return memo_id


def _memo_show(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    manager = MemoManager(db)
    memo_id = _memo_id(manager, args.title)
    print(args.title.strip(), file=out)
    print(manager.content(memo_id) or "", file=out)
    return 0


def _memo_remove(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    manager = MemoManager(db)
    memo_id = _memo_id(manager, args.title)
    if not _confirm(CONFIRM_MEMO, args.yes):
        print(CANCELLED, file=out)
        return 0
    if not manager.delete_memo(memo_id):
        raise InputError(DELETE_FAILED)
    print(DELETED, file=out)
    return 0


def _memo_edit(args: argparse.Namespace, db: Database, out: TextIO) -> int:
    manager = MemoManager(db)
    memo_id = _memo_id(manager, args.title)
    new_title = args.title if args.new_title is None else args.new_title
    new_content = manager.content(memo_id) if args.new_content is None else args.new_content
    title, content = validate_memo(new_title, new_content or "")
    if not manager.update_memo(memo_id, title, content):
        raise InputError(UPDATE_FAILED)
    print(SAVED, file=out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for all commands; with no command the dashboard is shown."""
    parser = argparse.ArgumentParser(
        prog="deskassistant",
        description="Weather, daily tips, important days and memos.",
    )
    parser.add_argument("--db", type=Path, default=None, help="database file")
    parser.set_defaults(
        handler=_show, offline=False, location=DEFAULT_LOCATION, key=DEFAULT_KEY
    )
    commands = parser.add_subparsers(dest="command")

    show = commands.add_parser("show", help="show the dashboard")
    show.add_argument("--offline", action="store_true", help="do not fetch weather or tips")
    show.add_argument("--location", default=DEFAULT_LOCATION, help="weather location code")
    show.add_argument("--key", default=DEFAULT_KEY, help="weather service key")
    show.set_defaults(handler=_show)

    day = commands.add_parser("day", help="manage important days")
    day_actions = day.add_subparsers(dest="action", required=True)

    day_add = day_actions.add_parser("add", help="add an important day")
    day_add.add_argument("title")
    day_add.add_argument("date", help="YYYY-MM-DD")
    day_add.set_defaults(handler=_day_add)

    day_actions.add_parser("list", help="list important days").set_defaults(handler=_day_list)

    day_remove = day_actions.add_parser("remove", help="delete an important day")
    day_remove.add_argument("title")
    day_remove.add_argument("date")
    day_remove.add_argument("-y", "--yes", action="store_true", help="do not ask")
    day_remove.set_defaults(handler=_day_remove)

    day_edit = day_actions.add_parser("edit", help="change an important day")
    day_edit.add_argument("title")
    day_edit.add_argument("date")
    day_edit.add_argument("--title", dest="new_title", default=None)
    day_edit.add_argument("--date", dest="new_date", default=None)
    day_edit.set_defaults(handler=_day_edit)

    day_actions.add_parser("next", help="countdown to the nearest day").set_defaults(
        handler=_day_next
    )

    memo = commands.add_parser("memo", help="manage memos")
    memo_actions = memo.add_subparsers(dest="action", required=True)

    memo_add = memo_actions.add_parser("add", help="add a memo")
    memo_add.add_argument("title")
    memo_add.add_argument("content")
    memo_add.set_defaults(handler=_memo_add)

    memo_actions.add_parser("list", help="list memos by title").set_defaults(
        handler=_memo_list
    )
    memo_actions.add_parser("recent", help="show the newest memos").set_defaults(
        handler=_memo_recent
    )

    memo_show = memo_actions.add_parser("show", help="show a memo")
    memo_show.add_argument("title")
    memo_show.set_defaults(handler=_memo_show)

    memo_remove = memo_actions.add_parser("remove", help="delete a memo")
    memo_remove.add_argument("title")
    memo_remove.add_argument("-y", "--yes", action="store_true", help="do not ask")
    memo_remove.set_defaults(handler=_memo_remove)

    memo_edit = memo_actions.add_parser("edit", help="change a memo")
    memo_edit.add_argument("title")
    memo_edit.add_argument("--title", dest="new_title", default=None)
    memo_edit.add_argument("--content", dest="new_content", default=None)
    memo_edit.set_defaults(handler=_memo_edit)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the exit status."""
    args = build_parser().parse_args(argv)
    handler: Handler = args.handler
    try:
        with Database(args.db) as db:
            return handler(args, db, sys.stdout)
    except (InputError, DatabaseError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())