# backend/spark_joy/parser/rating.py

"""
タイトル中の評価絵文字を扱うモジュール。

🤩=5, 👍=4, 🤷=3, 👎=2, 🤮=1
"""

from typing import List, Tuple

# 上から順に評価する。複数の絵文字が含まれる場合は先に並んでいるもの（高評価側）が優先。
RATING_GLYPHS: List[Tuple[str, int]] = [
    ("🤩", 5),
    ("👍", 4),
    ("🤷", 3),
    ("👎", 2),
    ("🤮", 1),
]

DEFAULT_RATING = 3


def extract_rating(raw_title: str) -> int:
    """
    絵文字付きの生タイトルから評価値を求める。

    絵文字が無い場合は DEFAULT_RATING（3）を返す。
    """
    for glyph, rating in RATING_GLYPHS:
        if glyph in raw_title:
            return rating
    return DEFAULT_RATING


def clean_title(raw_title: str) -> str:
    """
    タイトルから評価絵文字をすべて取り除き、前後の空白を削除する。
    """
    cleaned = raw_title
    for glyph, _ in RATING_GLYPHS:
        cleaned = cleaned.replace(glyph, "")
    return cleaned.strip()
