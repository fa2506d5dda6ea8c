# backend/spark_joy/parser/dedupe.py

"""
タイトルをキーにした重複除去。
"""

import logging
from typing import Iterable, List

from pydantic import BaseModel, Field

from .schemas import Entry

logger = logging.getLogger(__name__)


class DedupeResult(BaseModel):
    """重複除去の結果。"""

    entries: List[Entry] = Field(default_factory=list, description="残ったエントリ（元の順序）")
    duplicates: List[Entry] = Field(default_factory=list, description="除外されたエントリ")

    @property
    def removed_count(self) -> int:
        return len(self.duplicates)


def dedupe(entries: Iterable[Entry]) -> DedupeResult:
    """
    同じタイトルのエントリは最初に出現したものだけを残す。

    source が違っていても title が同じなら重複として扱う。
    """
    seen_titles = set()
    result = DedupeResult()

    for entry in entries:
        if entry.title in seen_titles:
            logger.info("Skipped duplicate: %s (source=%s)", entry.title, entry.source)
            result.duplicates.append(entry)
            continue
        seen_titles.add(entry.title)
        result.entries.append(entry)

    return result
