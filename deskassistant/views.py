"""Plain-text rendering of the assistant's dashboard panels."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from itertools import islice

from .important_days import NearestDay
from .tips import Tip
from .weather import WeatherReport

LOADING = "加载中..."
NO_PLAN = "最近有什么计划嘛？"
NO_MEMOS = "暂无备忘录记录"
ICON_ERROR = "图片错误"
IMAGE_INVALID = "图片无效"
TEXT_EMPTY = "文本为空"
DATA_MISSING = "数据缺失"
MEMO_LIMIT = 3
COLUMN_GAP = 2
RULE = "─" * 40


def _width(text: str) -> int:
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)


def _pad(text: str, width: int) -> str:
    return text + " " * (width - _width(text))


def _columns(blocks: Iterable[str], gap: int = COLUMN_GAP) -> str:
    """Lay multi-line text blocks out side by side."""
    split = [block.splitlines() or [""] for block in blocks]
    if not split:
        return ""
    height = max(len(lines) for lines in split)
    widths = [max(_width(line) for line in lines) for lines in split]
    rows = []
    for row in range(height):
        cells = [
            _pad(lines[row] if row < len(lines) else "", width)
            for lines, width in zip(split, widths)
        ]
        rows.append((" " * gap).join(cells).rstrip())
    return "\n".join(rows)


def day_tip_text(nearest: NearestDay | None) -> str:
    """Countdown line for the nearest important day, or a prompt when there is none."""
    if nearest is None:
        return NO_PLAN
    return f"距离 {nearest.title} 还有 {max(nearest.days, 0)} 天"


def memo_preview(titles: Iterable[str], limit: int = MEMO_LIMIT) -> list[str]:
    """The first few non-blank memo titles, or a notice when there are none."""
    preview = list(islice((title for title in titles if title.strip()), max(limit, 0)))
    return preview or [NO_MEMOS]


def weather_panel(report: WeatherReport | None) -> str:
    """Current conditions, icon and the forecast laid out in columns."""
    if report is None:
        return LOADING
    icon = f"图标：{report.icon}" if report.icon else ICON_ERROR
    forecast = _columns(text or DATA_MISSING for text in report.forecast)
    return "\n".join(part for part in (report.info, icon, forecast) if part)


def tips_panel(tip: Tip | None, day_tip: str = "") -> str:
    """Tip picture, quote and the important-day line beneath it."""
    if tip is None:
        return LOADING
    image = f"图片：{tip.image}" if tip.image else IMAGE_INVALID
    text = tip.text or TEXT_EMPTY
    lines = [image, text]
    if day_tip:
        lines.append(day_tip)
    return "\n".join(lines)


def render_dashboard(
    report: WeatherReport | None,
    tip: Tip | None,
    day_tip: str,
    memos: Iterable[str],
) -> str:
    """The whole dashboard: weather, tip and memo sections separated by rules."""
    sections = (
        weather_panel(report),
        tips_panel(tip, day_tip),
        "\n".join(memo_preview(memos)),
    )
    return f"\n{RULE}\n".join(sections)