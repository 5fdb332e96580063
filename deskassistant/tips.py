"""Daily tip: a random picture and a quote from the quote service."""

from __future__ import annotations

import random
import urllib.request
from dataclasses import dataclass
from typing import Callable, Protocol

QUOTE_URL = "https://uapis.cn/api/say"
IMAGE_COUNT = 24
IMAGE_DIR = "img/tipsimg/"
NETWORK_ERROR = "网络错误: "
EMPTY_QUOTE = "数据为空"

Fetcher = Callable[[str], bytes]


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Tip:
    """Picture file and quote text of one tip."""

    image: str
    text: str


def pick_image(rng: _IntSource | None = None) -> str:
    """Choose one of the tip pictures at random; out-of-range picks fall back to the first."""
    index = (rng or random).randint(1, IMAGE_COUNT)
    if not 1 <= index <= IMAGE_COUNT:
        index = 1
    return f"{IMAGE_DIR}{index}.jpg"


def decode_quote(data: bytes) -> str:
    """Text of a quote response; an empty body gives a notice instead."""
    if not data:
        return EMPTY_QUOTE
    return data.decode("utf-8", errors="replace")


def _urlopen(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=15) as response:
        return response.read()


class TipsClient:
    """Produces tips from a random picture and a fetched quote."""

    def __init__(self, fetch: Fetcher | None = None, rng: _IntSource | None = None) -> None:
        self._fetch = fetch or _urlopen
        self._rng = rng

    def fetch(self) -> Tip:
        """Pick a picture and fetch a quote; a network failure becomes the text."""
        image = pick_image(self._rng)
        try:
            text = decode_quote(self._fetch(QUOTE_URL))
        except OSError as exc:
            text = NETWORK_ERROR + str(exc)
        return Tip(image, text)