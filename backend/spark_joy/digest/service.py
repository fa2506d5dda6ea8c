# backend/spark_joy/digest/service.py
"""
digest 収集処理のサービス層。

責務:
- 引数（URL / YYYY-MM）から対象記事を解決する
- 記事を取得してパースし、取得元情報（source / yearMonth / postUrl）を付与する
- 全記事分をまとめてからタイトルで重複除去する
- Notion が設定されていれば upsert する

1 記事の取得失敗や 1 エントリの書き込み失敗で全体を止めない。
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from spark_joy.github.client import FetchError, GitHubClient
from spark_joy.notion.config import NotionConfig
from spark_joy.notion.schemas import UpsertReport
from spark_joy.notion.service import NotionService
from spark_joy.parser.dedupe import dedupe
from spark_joy.parser.frontmatter import extract_frontmatter_url
from spark_joy.parser.scanner import parse_section
from spark_joy.parser.schemas import Entry

from .config import DigestSettings, get_digest_settings
from .schemas import (
    CollectResult,
    InvalidTargetError,
    RunReport,
    Target,
    TargetKind,
    resolve_target,
)

logger = logging.getLogger(__name__)


class DigestService:
    """
    GitHubClient / NotionService を組み合わせて収集処理を行うサービスクラス。

    - コンストラクタで各クライアントを注入可能（テストではスタブを渡す）
    - notion_config が None の場合は Notion 同期をスキップする
    """

    def __init__(
        self,
        *,
        github_client: GitHubClient,
        settings: Optional[DigestSettings] = None,
        notion_config: Optional[NotionConfig] = None,
        notion_service: Optional[NotionService] = None,
    ) -> None:
        self._github = github_client
        self._settings = settings or get_digest_settings()
        if notion_service is None and notion_config is not None:
            notion_service = NotionService(config=notion_config)
        self._notion = notion_service

    @property
    def notion_enabled(self) -> bool:
        return self._notion is not None

    def parse_document(
        self,
        content: str,
        *,
        source: str,
        year_month: Optional[str] = None,
    ) -> List[Entry]:
        """
        1 記事分の Markdown をパースし、取得元情報を付与したエントリを返す。
        """
        frontmatter_url = extract_frontmatter_url(content)
        post_url = self._settings.build_post_url(frontmatter_url) if frontmatter_url else None

        entries = parse_section(
            content,
            marker=self._settings.section_marker,
            with_rating=self._settings.extract_rating,
        )
        return [
            entry.with_provenance(source=source, year_month=year_month, post_url=post_url)
            for entry in entries
        ]

    def _collect_url(
        self,
        url: str,
        year_month: Optional[str],
        result: CollectResult,
        found: List[Entry],
    ) -> None:
        try:
            content = self._github.fetch_document(url)
        except FetchError as exc:
            logger.error("Error processing %s: %s", url, exc)
            result.failed_sources.append(url)
            return

        entries = self.parse_document(content, source=url, year_month=year_month)
        found.extend(entries)
        logger.info("Found %d entries in %s", len(entries), url)

    def collect_targets(self, targets: Iterable[Target]) -> CollectResult:
        """
        対象を順番に処理し、全記事分のエントリを重複除去して返す。
        """
        result = CollectResult()
        found: List[Entry] = []

        for target in targets:
            if target.kind is TargetKind.URL:
                logger.info("Processing URL: %s", target.value)
                self._collect_url(target.value, None, result, found)
                continue

            logger.info("Processing %s...", target.value)
            urls = self._github.list_digest_urls(target.year, target.month)
            if not urls:
                logger.warning("No files found for %s", target.value)
                continue

            for url in urls:
                logger.info("Fetching %s...", url)
                self._collect_url(url, target.value, result, found)

        # 重複除去は全記事分が揃ってから行う（先に出現したものを残すため）
        deduped = dedupe(found)
        result.total_found = len(found)
        result.entries = deduped.entries
        result.duplicates = deduped.duplicates
        return result

    def collect(self, args: Iterable[str]) -> CollectResult:
        """
        CLI / API の引数文字列から収集する。解釈できない引数はログを残して飛ばす。
        """
        targets: List[Target] = []
        invalid: List[str] = []
        for arg in args:
            try:
                targets.append(resolve_target(arg))
            except InvalidTargetError as exc:
                logger.error("%s", exc)
                invalid.append(arg)

        result = self.collect_targets(targets)
        result.invalid_targets = invalid
        return result

    def run(self, args: Iterable[str], *, sync: bool = True) -> RunReport:
        """
        収集してから、必要に応じて Notion に反映する。
        """
        collected = self.collect(args)
        report = RunReport(collected=collected)

        if not sync or not collected.entries:
            return report

        if self._notion is None:
            logger.info("Notion integration skipped: NOTION_TOKEN or NOTION_DATABASE_ID not set")
            return report

        report.upsert = self.sync(collected.entries)
        return report

    def sync(self, entries: List[Entry]) -> UpsertReport:
        """
        エントリを Notion に反映する。Notion 未設定の場合は RuntimeError。
        """
        if self._notion is None:
            raise RuntimeError("Notion is not configured.")

        upsert = self._notion.upsert_entries(entries)
        logger.info(
            "Notion sync finished: created=%d skipped=%d failed=%d",
            upsert.created,
            upsert.skipped,
            upsert.failed,
        )
        return upsert
