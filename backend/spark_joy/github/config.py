# backend/spark_joy/github/config.py

"""
GitHub 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from spark_joy.utils.config import get_env, get_env_int


@dataclass(frozen=True)
class GitHubConfig:
    """GitHub API 用の設定値コンテナ。"""

    repo_name: str
    base_path: str = "content/posts"
    api_base_url: str = "https://api.github.com"
    token: Optional[str] = None
    user_agent: str = "spark-joy-parser/1.0"
    file_keyword: str = "spark-joy-digest"
    timeout_seconds: int = 10


@lru_cache()
def get_github_config() -> GitHubConfig:
    """
    環境変数から GitHub 設定を読み込む。

    必須:
      - REPO_NAME（owner/repo 形式）

    任意:
      - SPARK_JOY_BASE_PATH    (デフォルト: content/posts)
      - GITHUB_API_BASE_URL    (デフォルト: https://api.github.com)
      - GITHUB_TOKEN
      - SPARK_JOY_HTTP_TIMEOUT (デフォルト: 10 秒)
    """
    repo_name = get_env("REPO_NAME")

    return GitHubConfig(
        repo_name=repo_name,
        base_path=get_env("SPARK_JOY_BASE_PATH", default="content/posts", required=False),
        api_base_url=get_env(
            "GITHUB_API_BASE_URL",
            default="https://api.github.com",
            required=False,
        ),
        token=get_env("GITHUB_TOKEN", required=False),
        timeout_seconds=get_env_int("SPARK_JOY_HTTP_TIMEOUT", default=10),
    )
