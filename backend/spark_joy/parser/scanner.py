# backend/spark_joy/parser/scanner.py

"""
Markdown 記事の「## 物」セクションを走査してエントリを抽出する状態機械。

状態遷移:
    BEFORE_SECTION -> IN_SECTION: セクション見出し（## 物）に到達
    IN_SECTION -> AFTER_SECTION: 別の二階層見出し（## ...）に到達。以降は走査しない

IN_SECTION 中は「組み立て中のエントリ」を 1 つだけ保持し、
新しいエントリ行・セクション終端・文書終端のいずれかで確定させる。
"""

import logging
from enum import Enum
from typing import List, Optional

from .classifier import (
    LineKind,
    PendingEntry,
    classify_line,
    is_excluded_continuation,
    looks_like_opener,
    open_entry,
)
from .schemas import Entry

logger = logging.getLogger(__name__)

SECTION_MARKER = "## 物"
DEFAULT_HEADING_PREFIX = "## "


def section_heading_prefix(marker: str) -> str:
    """
    セクション見出しと同じ深さの見出し行の先頭（"## 物" なら "## "）を返す。

    marker が見出しでない場合は二階層見出しとみなす。
    """
    depth = len(marker) - len(marker.lstrip("#"))
    if depth == 0:
        return DEFAULT_HEADING_PREFIX
    return "#" * depth + " "


class ScanState(Enum):
    BEFORE_SECTION = "before_section"
    IN_SECTION = "in_section"
    AFTER_SECTION = "after_section"


class SectionScanner:
    """
    1 文書分の走査状態を持つスキャナー。

    インスタンスは 1 回の parse 呼び出し専用で、共有しない。
    """

    def __init__(self, *, marker: str = SECTION_MARKER, with_rating: bool = True) -> None:
        self._marker = marker
        self._exit_prefix = section_heading_prefix(marker)
        self._with_rating = with_rating
        self.state = ScanState.BEFORE_SECTION
        self.entries: List[Entry] = []
        self._pending: Optional[PendingEntry] = None

    def feed(self, raw_line: str) -> None:
        """
        1 行を処理する。AFTER_SECTION に入った後は何もしない。
        """
        if self.state is ScanState.AFTER_SECTION:
            return

        line = raw_line.strip()

        if line.startswith(self._marker):
            self.state = ScanState.IN_SECTION
            return

        if self.state is ScanState.BEFORE_SECTION:
            return

        # 見出し形式のエントリ行（### [..](..)）はセクション終端として扱わない
        if line.startswith(self._exit_prefix) and classify_line(line) is LineKind.TEXT:
            self._close_pending()
            self.state = ScanState.AFTER_SECTION
            return

        if not line:
            return

        if classify_line(line) is not LineKind.TEXT:
            pending = open_entry(line, with_rating=self._with_rating)
            if pending is not None:
                self._close_pending()
                self._pending = pending
                return

        if self._pending is None:
            return

        if looks_like_opener(line):
            # エントリ行に見えるがパターンに一致しない行は説明文として残す
            logger.debug("Treating malformed entry line as description: %s", line)
            self._pending.append(line)
        elif not is_excluded_continuation(line):
            self._pending.append(line)

    def finish(self) -> List[Entry]:
        """
        文書終端の処理。組み立て中のエントリがあれば確定させて結果を返す。
        """
        self._close_pending()
        return self.entries

    def _close_pending(self) -> None:
        if self._pending is not None:
            self.entries.append(self._pending.close())
            self._pending = None


def parse_section(
    content: str,
    *,
    marker: str = SECTION_MARKER,
    with_rating: bool = True,
) -> List[Entry]:
    """
    Markdown 全文から「物」セクションのエントリを文書順に抽出する。

    セクションが無い文書では空リストを返す。例外は投げない。
    """
    scanner = SectionScanner(marker=marker, with_rating=with_rating)
    for raw_line in content.split("\n"):
        scanner.feed(raw_line)
        if scanner.state is ScanState.AFTER_SECTION:
            break
    return scanner.finish()
