# backend/spark_joy/github/client.py

"""
GitHub API / raw コンテンツ取得を担当するクライアントモジュール。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import GitHubConfig, get_github_config

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """記事の取得に失敗した場合の例外（非 2xx またはネットワークエラー）。"""

    def __init__(self, url: str, status_code: Optional[int], reason: str) -> None:
        if status_code is None:
            message = f"Failed to fetch {url}: {reason}"
        else:
            message = f"Failed to fetch {url}: {status_code} {reason}"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.reason = reason


class GitHubClient:
    """
    GitHub の薄いラッパークライアント。

    - 月別ディレクトリ（{base_path}/{YYYY-MM}）の digest 記事一覧
    - 記事本文（raw Markdown）の取得
    """

    def __init__(self, config: Optional[GitHubConfig] = None) -> None:
        self.config = config or get_github_config()

    def _build_headers(self) -> Dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}
        if self.config.token:
            headers["Authorization"] = f"token {self.config.token}"
        return headers

    def _get(self, url: str) -> httpx.Response:
        """
        GET を発行し、2xx 以外は FetchError にする。
        """
        try:
            response = httpx.get(
                url,
                headers=self._build_headers(),
                timeout=self.config.timeout_seconds,
                follow_redirects=True,
            )
        except (httpx.RequestError, httpx.InvalidURL, ValueError) as exc:
            # 不正な URL（ポート・ホスト名の IDNA 変換失敗など）も取得失敗として扱う
            raise FetchError(url, None, str(exc)) from exc

        if response.status_code // 100 != 2:
            raise FetchError(url, response.status_code, response.reason_phrase)

        return response

    def fetch_document(self, url: str) -> str:
        """
        URL から Markdown 本文を取得する。

        :raises FetchError: 2xx 以外のステータス、または接続エラー時。
        """
        response = self._get(url)
        # マルチバイト文字（絵文字・漢字）を正しく扱うため UTF-8 として解釈する
        return response.content.decode("utf-8", errors="replace")

    def directory_url(self, year: str, month: str) -> str:
        return (
            f"{self.config.api_base_url}/repos/{self.config.repo_name}"
            f"/contents/{self.config.base_path}/{year}-{month}"
        )

    def list_digest_urls(self, year: str, month: str) -> List[str]:
        """
        指定した年月ディレクトリにある digest 記事の download_url 一覧を返す。

        取得に失敗した場合はログを残して空リストを返す（その月は処理対象なし扱い）。
        """
        url = self.directory_url(year, month)
        try:
            payload = self._get(url).json()
        except (FetchError, ValueError) as exc:
            logger.error("Error fetching file list: %s", exc)
            return []

        # ファイル 1 件だけの場合はオブジェクトで返ってくる
        files: List[Any] = payload if isinstance(payload, list) else [payload]

        urls: List[str] = []
        for item in files:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            download_url = item.get("download_url")
            if not isinstance(name, str):
                continue
            if self.config.file_keyword not in name or not name.endswith(".md"):
                continue
            if not download_url:
                logger.warning("Skipping %s: no download_url", name)
                continue
            urls.append(download_url)

        return urls
