import random

from deskassistant.tips import (
    EMPTY_QUOTE,
    IMAGE_COUNT,
    IMAGE_DIR,
    NETWORK_ERROR,
    QUOTE_URL,
    Tip,
    TipsClient,
    decode_quote,
    pick_image,
)


class _Fixed:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


def test_pick_image_in_range():
    rng = random.Random(7)
    valid = {f"{IMAGE_DIR}{i}.jpg" for i in range(1, IMAGE_COUNT + 1)}
    picks = {pick_image(rng) for _ in range(300)}
    assert picks <= valid
    assert len(picks) > 1


def test_pick_image_uses_bounds():
    rng = _Fixed(5)
    assert pick_image(rng) == f"{IMAGE_DIR}5.jpg"
    assert rng.calls == [(1, IMAGE_COUNT)]


def test_pick_image_out_of_range_falls_back():
    assert pick_image(_Fixed(IMAGE_COUNT + 1)) == f"{IMAGE_DIR}1.jpg"
    assert pick_image(_Fixed(0)) == f"{IMAGE_DIR}1.jpg"


def test_decode_quote_empty():
    assert decode_quote(b"") == EMPTY_QUOTE


def test_decode_quote_utf8_round_trip():
    text = "路漫漫其修远兮"
    assert decode_quote(text.encode("utf-8")) == text


def test_decode_quote_invalid_bytes_replaced():
    assert decode_quote(b"ab\xff") == "ab\ufffd"


def test_client_fetch():
    requested = []

    def fetch(url):
        requested.append(url)
        return "好好学习".encode()

    tip = TipsClient(fetch=fetch, rng=_Fixed(3)).fetch()
    assert tip == Tip(f"{IMAGE_DIR}3.jpg", "好好学习")
    assert requested == [QUOTE_URL]


def test_client_empty_body():
    tip = TipsClient(fetch=lambda url: b"", rng=_Fixed(2)).fetch()
    assert tip.text == EMPTY_QUOTE


def test_client_network_error():
    def fetch(url):
        raise OSError("unreachable")

    tip = TipsClient(fetch=fetch, rng=_Fixed(4)).fetch()
    assert tip.text == NETWORK_ERROR + "unreachable"
    assert tip.image == f"{IMAGE_DIR}4.jpg"