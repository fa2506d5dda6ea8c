# backend/spark_joy/notion/config.py

"""
Notion 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from spark_joy.utils.config import get_env

# データベースのプロパティ名
TITLE_PROPERTY = "Name"
RATING_PROPERTY = "推荐度"
LINK_PROPERTY = "购买链接"
POST_URL_PROPERTY = "详细测评"
DESCRIPTION_PROPERTY = "简介"


@dataclass(frozen=True)
class NotionConfig:
    """Notion API 用の設定値コンテナ。"""

    api_key: str
    database_id: str
    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"


@lru_cache()
def get_notion_config() -> Optional[NotionConfig]:
    """
    環境変数から Notion 設定を読み込む。

    トークンかデータベース ID が無い場合は None（Notion 連携をスキップする）。

    必須（連携する場合）:
      - NOTION_TOKEN（または NOTION_API_KEY）
      - NOTION_DATABASE_ID

    任意:
      - NOTION_API_BASE_URL (デフォルト: https://api.notion.com/v1)
      - NOTION_API_VERSION   (デフォルト: 2022-06-28)
    """
    api_key = get_env("NOTION_TOKEN", required=False) or get_env(
        "NOTION_API_KEY", required=False
    )
    database_id = get_env("NOTION_DATABASE_ID", required=False)

    if not api_key or not database_id:
        return None

    return NotionConfig(
        api_key=api_key,
        database_id=database_id,
        api_base_url=get_env(
            "NOTION_API_BASE_URL",
            default="https://api.notion.com/v1",
            required=False,
        ),
        api_version=get_env(
            "NOTION_API_VERSION",
            default="2022-06-28",
            required=False,
        ),
    )
