# backend/tests/test_parser_rating.py

import pytest

from spark_joy.parser.rating import DEFAULT_RATING, clean_title, extract_rating


@pytest.mark.parametrize(
    "raw_title, expected",
    [
        ("Widget 🤩", 5),
        ("👍 Widget", 4),
        ("Wid🤷get", 3),
        ("Widget 👎", 2),
        ("Widget 🤮", 1),
    ],
)
def test_extract_rating_maps_each_glyph(raw_title, expected):
    assert extract_rating(raw_title) == expected


def test_extract_rating_defaults_to_middle():
    assert extract_rating("") == DEFAULT_RATING == 3
    assert extract_rating("plain title") == 3


def test_extract_rating_prefers_list_order_over_position():
    # 🤮 が先に出現しても、リスト上で先にある 👍 が優先される
    assert extract_rating("🤮 then 👍") == 4
    assert extract_rating("👎🤩") == 5


def test_clean_title_removes_every_glyph_and_trims():
    assert clean_title("  🤩 Widget 🤩 ") == "Widget"
    assert clean_title("A👍B👎C") == "ABC"


@pytest.mark.parametrize("raw", ["Widget 🤩", "  spaced  ", "", "🤮🤮", "普通の商品 👍"])
def test_clean_title_is_idempotent(raw):
    once = clean_title(raw)
    assert clean_title(once) == once
