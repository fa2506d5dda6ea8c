# backend/spark_joy/parser/classifier.py

"""
「物」セクション内の 1 行を分類するモジュール。

対応する行の形式:
- 見出し形式:    ### [タイトル](URL)
- 箇条書き形式:  - `タイトル` [リンクテキスト](URL) 説明文
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .rating import clean_title, extract_rating
from .schemas import Entry

HEADING_PATTERN = re.compile(r"^###\s+\[([^\]]+)\]\(([^)]+)\)")
BULLET_PATTERN = re.compile(r"^-\s*`([^`]+)`(?:\s+\[([^\]]+)\]\(([^)]+)\))?\s*(.*)$")

# 説明文に含めない行の先頭（shortcode / 画像 / 区切り）
EXCLUDED_PREFIXES = ("{{", "![", "<---")


class LineKind(str, Enum):
    """trim 済みの 1 行の分類結果。"""

    HEADING = "heading"
    BULLET = "bullet"
    TEXT = "text"


@dataclass
class PendingEntry:
    """
    組み立て中のエントリ。

    説明文の断片は追記のみ行い、close() で一度だけ連結して Entry を確定させる。
    """

    title: str
    link: Optional[str] = None
    link_text: Optional[str] = None
    rating: Optional[int] = None
    fragments: List[str] = field(default_factory=list)

    def append(self, text: str) -> None:
        self.fragments.append(text)

    def close(self) -> Entry:
        return Entry(
            title=self.title,
            link=self.link,
            link_text=self.link_text,
            rating=self.rating,
            description=" ".join(self.fragments).strip(),
        )


def classify_line(line: str) -> LineKind:
    """
    trim 済みの行を分類する。見出し形式を先に判定する。
    """
    if HEADING_PATTERN.match(line):
        return LineKind.HEADING
    if BULLET_PATTERN.match(line):
        return LineKind.BULLET
    return LineKind.TEXT


def looks_like_opener(line: str) -> bool:
    """
    見出し / 箇条書きエントリの開始行「らしい」かどうか。

    パターンに完全一致しないこうした行は説明文としてそのまま扱う。
    """
    return line.startswith("###") or (line.startswith("-") and "`" in line)


def is_excluded_continuation(line: str) -> bool:
    """
    shortcode（{{）・画像（![）・区切り（<--->）の行は説明文に含めない。
    """
    return line.startswith(EXCLUDED_PREFIXES)


def open_entry(line: str, *, with_rating: bool = True) -> Optional[PendingEntry]:
    """
    エントリ開始行から PendingEntry を生成する。

    - 見出し形式: 行末の余分なテキストは説明文に使わない
    - 箇条書き形式: リンクの後ろのテキストを説明文の最初の断片にする
    - どちらにも一致しない行、または絵文字除去後にタイトルが空になる行は None
    """
    heading = HEADING_PATTERN.match(line)
    if heading:
        raw_title = heading.group(1).strip()
        pending = _new_pending(raw_title, with_rating)
        if pending is not None:
            pending.link = heading.group(2).strip()
        return pending

    bullet = BULLET_PATTERN.match(line)
    if bullet:
        raw_title = bullet.group(1).strip()
        pending = _new_pending(raw_title, with_rating)
        if pending is None:
            return None
        if bullet.group(3):
            pending.link = bullet.group(3).strip()
            pending.link_text = bullet.group(2).strip()
        trailing = (bullet.group(4) or "").strip()
        if trailing:
            pending.append(trailing)
        return pending

    return None


def _new_pending(raw_title: str, with_rating: bool) -> Optional[PendingEntry]:
    title = clean_title(raw_title)
    if not title:
        return None
    rating = extract_rating(raw_title) if with_rating else None
    return PendingEntry(title=title, rating=rating)
