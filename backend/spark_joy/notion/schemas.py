# backend/spark_joy/notion/schemas.py

"""
Notion への upsert 結果を表現するスキーマ定義。
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class UpsertStatus(str, Enum):
    """1 エントリ分の upsert 結果。"""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class UpsertResult(BaseModel):
    title: str = Field(..., description="エントリのタイトル（Notion 上のキー）")
    status: UpsertStatus = Field(..., description="処理結果")
    page_id: Optional[str] = Field(None, description="作成 / 既存ページの ID")
    error: Optional[str] = Field(None, description="失敗時のエラー内容")


class UpsertReport(BaseModel):
    """
    upsert_entries() の結果全体。

    1 件の失敗で残りの処理は止めないため、結果はエントリごとに持つ。
    """

    results: List[UpsertResult] = Field(default_factory=list)

    def count(self, status: UpsertStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def created(self) -> int:
        return self.count(UpsertStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self.count(UpsertStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(UpsertStatus.FAILED)
