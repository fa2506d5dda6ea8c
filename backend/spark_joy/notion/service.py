# backend/spark_joy/notion/service.py

"""
NotionClient とパース済みエントリをつなぐサービス層。

- 既存ページのタイトル一覧の取得
- Entry → Notion プロパティへの変換
- タイトルをキーにした upsert（既存ページは変更しない）
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from spark_joy.parser.schemas import Entry

from .client import NotionClient
from .config import (
    DESCRIPTION_PROPERTY,
    LINK_PROPERTY,
    POST_URL_PROPERTY,
    RATING_PROPERTY,
    TITLE_PROPERTY,
    NotionConfig,
)
from .schemas import UpsertReport, UpsertResult, UpsertStatus

logger = logging.getLogger(__name__)

# Notion の rich_text 1 要素あたりの文字数上限
RICH_TEXT_LIMIT = 2000


class UpsertError(RuntimeError):
    """1 エントリ分の Notion への書き込みに失敗した場合の例外。"""

    def __init__(self, title: str, cause: Exception) -> None:
        super().__init__(f'Failed to process "{title}" in Notion: {cause}')
        self.title = title
        self.cause = cause


def _extract_title(page: Dict[str, Any]) -> Optional[str]:
    """
    ページの title プロパティから先頭のプレーンテキストを取り出す。
    """
    properties = page.get("properties") or {}
    prop = properties.get(TITLE_PROPERTY)
    if not isinstance(prop, dict):
        return None

    title = prop.get("title")
    if isinstance(title, list) and title:
        first = title[0]
        if isinstance(first, dict):
            text = first.get("plain_text")
            if isinstance(text, str):
                return text
    return None


def _rich_text(content: str) -> Dict[str, Any]:
    return {"rich_text": [{"text": {"content": content[:RICH_TEXT_LIMIT]}}]}


def build_page_properties(entry: Entry) -> Dict[str, Any]:
    """
    新規ページ用のプロパティを組み立てる。

    説明文は新規作成時にだけ書き込むので、ここ（作成用）でのみ扱う。
    """
    properties: Dict[str, Any] = {
        TITLE_PROPERTY: {"title": [{"text": {"content": entry.title[:RICH_TEXT_LIMIT]}}]},
    }

    if entry.rating is not None:
        properties[RATING_PROPERTY] = {"select": {"name": str(entry.rating)}}

    if entry.link:
        properties[LINK_PROPERTY] = {"url": entry.link}

    if entry.post_url:
        properties[POST_URL_PROPERTY] = {"url": entry.post_url}

    if entry.description:
        properties[DESCRIPTION_PROPERTY] = _rich_text(entry.description)

    return properties


class NotionService:
    """
    NotionClient を利用して、エントリ一覧をデータベースに反映するサービス。
    """

    def __init__(
        self,
        config: Optional[NotionConfig] = None,
        client: Optional[NotionClient] = None,
    ) -> None:
        if client is None:
            if config is None:
                raise ValueError("NotionService requires either config or client.")
            client = NotionClient(config)
        self.client = client

    def load_existing_titles(self) -> Dict[str, str]:
        """
        既存ページのタイトル → ページ ID の対応表を返す。

        取得に失敗した場合はログを残して空の対応表を返す。
        """
        existing: Dict[str, str] = {}
        try:
            for page in self.client.iter_pages():
                title = _extract_title(page)
                if title:
                    existing[title] = page.get("id", "")
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to fetch existing pages: %s", exc)
        return existing

    def upsert_entries(self, entries: Iterable[Entry]) -> UpsertReport:
        """
        エントリを順番に Notion に反映する。

        - 既存タイトル: 何も変更せずスキップ
        - 新規タイトル: ページを作成
        - 失敗: ログを残して次のエントリへ
        """
        existing = self.load_existing_titles()
        report = UpsertReport()

        for entry in entries:
            page_id = existing.get(entry.title)
            if page_id is not None:
                logger.info("Skipped (exists, no changes): %s", entry.title)
                report.results.append(
                    UpsertResult(title=entry.title, status=UpsertStatus.SKIPPED, page_id=page_id)
                )
                continue

            try:
                page_id = self._create(entry)
            except UpsertError as exc:
                logger.error("%s", exc)
                report.results.append(
                    UpsertResult(title=entry.title, status=UpsertStatus.FAILED, error=str(exc.cause))
                )
                continue

            existing[entry.title] = page_id or ""
            logger.info("Added to Notion: %s", entry.title)
            report.results.append(
                UpsertResult(title=entry.title, status=UpsertStatus.CREATED, page_id=page_id)
            )

        return report

    def _create(self, entry: Entry) -> Optional[str]:
        try:
            page = self.client.create_page(build_page_properties(entry))
        except Exception as exc:  # noqa: BLE001 - 1 件の失敗で全体を止めない
            raise UpsertError(entry.title, exc) from exc
        return page.get("id")
