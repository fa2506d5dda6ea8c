# backend/spark_joy/digest/schemas.py

"""
収集処理と /digest エンドポイントで使う Pydantic モデル。
"""

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from spark_joy.notion.schemas import UpsertReport
from spark_joy.parser.schemas import Entry

YEAR_MONTH_PATTERN = re.compile(r"^\d{4}-\d{1,2}$")


class TargetKind(str, Enum):
    URL = "url"
    YEAR_MONTH = "year_month"


class Target(BaseModel):
    """
    CLI / API 引数 1 つ分の収集対象。

    - URL 指定: その記事 1 件
    - YYYY-MM 指定: GitHub の月別ディレクトリにある digest 記事すべて
    """

    kind: TargetKind
    value: str

    @property
    def year(self) -> str:
        return self.value.split("-")[0]

    @property
    def month(self) -> str:
        return self.value.split("-")[1]


class InvalidTargetError(ValueError):
    """URL でも YYYY-MM でもない引数。"""


def resolve_target(arg: str) -> Target:
    """
    引数文字列を Target に変換する。

    :raises InvalidTargetError: URL でも YYYY-MM 形式でもない場合
    """
    value = arg.strip()
    if value.startswith("http://") or value.startswith("https://"):
        return Target(kind=TargetKind.URL, value=value)

    if YEAR_MONTH_PATTERN.match(value):
        return Target(kind=TargetKind.YEAR_MONTH, value=value)

    raise InvalidTargetError(
        f"Invalid year-month format: {value}. Expected format: YYYY-MM"
    )


class CollectResult(BaseModel):
    """
    複数記事を収集・重複除去した結果。
    """

    entries: List[Entry] = Field(default_factory=list, description="重複除去後のエントリ")
    duplicates: List[Entry] = Field(default_factory=list, description="重複として除外したエントリ")
    total_found: int = Field(0, description="重複除去前のエントリ数")
    failed_sources: List[str] = Field(default_factory=list, description="取得に失敗した記事 URL")
    invalid_targets: List[str] = Field(default_factory=list, description="解釈できなかった引数")

    @property
    def removed_count(self) -> int:
        return len(self.duplicates)


class RunReport(BaseModel):
    """
    収集 + Notion 同期の結果全体。
    """

    collected: CollectResult
    upsert: Optional[UpsertReport] = Field(
        None,
        description="Notion 同期結果。同期しなかった場合は None",
    )


class ParseRequest(BaseModel):
    content: str = Field(..., description="Markdown 記事の全文")
    source: Optional[str] = Field(None, description="記事の取得元 URL（任意）")


class ParseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entries: List[Entry]
    count: int
    post_url: Optional[str] = Field(None, alias="postUrl")


class CollectRequest(BaseModel):
    targets: List[str] = Field(..., min_length=1, description="URL または YYYY-MM の一覧")
    sync: bool = Field(False, description="True の場合 Notion にも反映する")


class CollectResponse(BaseModel):
    entries: List[Entry]
    count: int
    total_found: int
    duplicates_removed: int
    failed_sources: List[str]
    invalid_targets: List[str]
    created: Optional[int] = None
    skipped: Optional[int] = None
    failed: Optional[int] = None
