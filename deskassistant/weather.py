"""Current conditions and a four-day forecast from the weather service."""

from __future__ import annotations

import json
import urllib.request
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable
from urllib.parse import urlencode

CURRENT_URL = "https://mu759fccxy.re.qweatherapi.com/v7/weather/now"
FORECAST_URL = "https://mu759fccxy.re.qweatherapi.com/v7/weather/7d"
DEFAULT_LOCATION = "101180112"
DEFAULT_KEY = "placeholder"
ICON_DIR = "img/weather/"
FORECAST_DAYS = 4

NETWORK_ERROR = "网络错误: "
CURRENT_UNPARSABLE = "无法解析当前天气数据！"
FORECAST_UNPARSABLE = "无法解析预报数据！"
FORECAST_TOO_SHORT = "数据不足！"
FORECAST_MISSING = "数据缺失！"

WEEKDAYS = ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期天")

_ICONS = {
    "晴": "0.png",
    "多云": "1.png",
    "阴": "2.png",
    "阵雨": "3.png",
    "雷阵雨": "4.png",
    "雷雨": "5.png",
    "雨加雪": "6.png",
    "小雨": "7.png",
    "中雨": "8.png",
    "小到中雨": "8.png",
    "大雨": "9.png",
    "暴雨": "10.png",
    "大暴雨": "10.png",
    "特大暴雨": "10.png",
    "小雪": "14.png",
    "中雪": "15.png",
    "大雪": "16.png",
    "暴雪": "17.png",
    "雾": "18.png",
    "夜间阵雨": "36.png",
}

Fetcher = Callable[[str], bytes]


@dataclass(frozen=True)
class WeatherReport:
    """Text of the current conditions, its icon (if any) and four forecast texts."""

    info: str
    icon: str | None
    forecast: tuple[str, ...]


def icon_for(condition: str) -> str | None:
    """Icon file for a weather condition, or None when there is none."""
    name = _ICONS.get(condition)
    return ICON_DIR + name if name else None


def weekday_name(iso_weekday: int) -> str:
    """Name of an ISO weekday; values past 7 wrap around to Monday."""
    return WEEKDAYS[(iso_weekday - 1) % 7]


def _load_object(payload: bytes | str) -> dict | None:
    try:
        document = json.loads(payload)
    except (ValueError, TypeError):
        return None
    return document if isinstance(document, dict) else None


def _text(obj: object, key: str) -> str:
    value = obj.get(key) if isinstance(obj, dict) else None
    return value if isinstance(value, str) else ""


def _report_time(raw: str) -> str:
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(raw)
    except ValueError:
        return ""
    return moment.strftime("%m-%d %H:%M")


def format_current(payload: bytes | str) -> tuple[str, str | None]:
    """Describe the current conditions; returns the text and the icon file."""
    document = _load_object(payload)
    if document is None:
        return CURRENT_UNPARSABLE, None
    live = document.get("now")
    condition = _text(live, "text")
    info = (
        "天气：" + condition
        + "\n气温：" + _text(live, "temp")
        + "℃\n风向：" + _text(live, "windDir")
        + "\n风速：" + _text(live, "windScale")
        + "级\n湿度：" + _text(live, "humidity")
        + "%\n更新时间：" + _report_time(_text(live, "obsTime"))
    )
    return info, icon_for(condition)


def format_forecast(payload: bytes | str, today: date | None = None) -> tuple[str, ...]:
    """Describe the next four days, starting with today."""
    today = today or date.today()
    document = _load_object(payload)
    if document is None:
        return (FORECAST_UNPARSABLE,) * FORECAST_DAYS
    daily = document.get("daily")
    if not isinstance(daily, list) or len(daily) < FORECAST_DAYS:
        return (FORECAST_TOO_SHORT,) * FORECAST_DAYS

    texts = []
    for offset, cast in enumerate(daily[:FORECAST_DAYS]):
        fields = [_text(cast, key) for key in ("textDay", "tempMax", "textNight", "tempMin")]
        if not all(fields):
            texts.append(FORECAST_MISSING)
            continue
        day_text, day_temp, night_text, night_temp = fields
        texts.append(
            weekday_name(today.isoweekday() + offset)
            + "\n日间：" + day_text
            + "\n气温：" + day_temp
            + "℃\n夜间：" + night_text
            + "\n气温：" + night_temp + "℃"
        )
    return tuple(texts)


def _urlopen(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=15) as response:
        return response.read()


class WeatherClient:
    """Fetches current conditions and the forecast for one location."""

    def __init__(
        self,
        location: str = DEFAULT_LOCATION,
        key: str = DEFAULT_KEY,
        fetch: Fetcher | None = None,
    ) -> None:
        self.location = location
        self.key = key
        self._fetch = fetch or _urlopen

    def _url(self, base: str) -> str:
        return f"{base}?{urlencode({'location': self.location, 'key': self.key})}"

    def fetch(self, today: date | None = None) -> WeatherReport:
        """Request both reports; network failures become error texts."""
        try:
            info, icon = format_current(self._fetch(self._url(CURRENT_URL)))
        except OSError as exc:
            info, icon = NETWORK_ERROR + str(exc), None
        try:
            forecast = format_forecast(self._fetch(self._url(FORECAST_URL)), today)
        except OSError as exc:
            forecast = (NETWORK_ERROR + str(exc),) * FORECAST_DAYS
        return WeatherReport(info, icon, forecast)