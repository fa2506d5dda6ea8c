# backend/spark_joy/notion/client.py

"""
Notion API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, Iterator, Optional

import httpx

from .config import NotionConfig


class NotionClientError(RuntimeError):
    """Notion クライアント全般の例外。"""


class NotionAuthError(NotionClientError):
    """認証・権限関連のエラー。"""


class NotionAPIError(NotionClientError):
    """その他 Notion API 呼び出し時のエラー。"""


class NotionClient:
    """
    Notion API の薄いラッパークライアント。

    - データベースの query（カーソルを辿って全件）
    - ページの作成
    """

    def __init__(self, config: NotionConfig, timeout: float = 10.0) -> None:
        self.config = config
        self._timeout = timeout

    def _build_headers(self) -> Dict[str, str]:
        """
        Notion API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Notion-Version": self.config.api_version,
            "Content-Type": "application/json",
        }

    def _raise_for_status(self, response: httpx.Response) -> None:
        """
        HTTP レスポンスコードに応じて適切な例外を投げる。
        """
        if response.status_code == 401:
            raise NotionAuthError("Unauthorized. Check NOTION_TOKEN.")
        if response.status_code == 403:
            raise NotionAuthError("Forbidden. Check Notion integration permissions.")
        if response.status_code >= 400:
            raise NotionAPIError(
                f"Notion API error: {response.status_code} {response.text}"
            )

    def _post(self, url: str, body: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = httpx.post(
                url,
                headers=self._build_headers(),
                json=body,
                timeout=self._timeout,
            )
        except httpx.RequestError as exc:
            raise NotionClientError(f"Failed to call Notion API: {exc}") from exc

        self._raise_for_status(response)

        data = response.json()
        if not isinstance(data, dict):
            raise NotionAPIError("Unexpected Notion API response format: not an object.")
        return data

    def query_database(
        self,
        start_cursor: Optional[str] = None,
        page_size: int = 100,
    ) -> Dict[str, Any]:
        """
        データベースを 1 ページ分 query する。返り値は Notion API の生レスポンス。
        """
        url = f"{self.config.api_base_url}/databases/{self.config.database_id}/query"

        payload: Dict[str, Any] = {"page_size": page_size}
        if start_cursor:
            payload["start_cursor"] = start_cursor

        data = self._post(url, payload)
        if not isinstance(data.get("results", []), list):
            raise NotionAPIError("Unexpected Notion API response format: 'results' is not a list.")
        return data

    def iter_pages(self, page_size: int = 100) -> Iterator[Dict[str, Any]]:
        """
        has_more / next_cursor を辿ってデータベースの全ページを返す。
        """
        cursor: Optional[str] = None
        while True:
            data = self.query_database(start_cursor=cursor, page_size=page_size)
            for page in data.get("results", []):
                yield page

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break

    def create_page(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        """
        データベースに新しいページを作成する。
        """
        url = f"{self.config.api_base_url}/pages"
        body = {
            "parent": {"database_id": self.config.database_id},
            "properties": properties,
        }
        return self._post(url, body)
