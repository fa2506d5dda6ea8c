# backend/spark_joy/github/__init__.py

"""
GitHub 上のブログリポジトリから spark-joy digest 記事を取得するモジュール群。

- config: リポジトリ名・パス・トークン等の設定値
- client: ディレクトリ一覧の取得 / raw Markdown の取得
"""

from .client import FetchError, GitHubClient  # noqa: F401
from .config import GitHubConfig, get_github_config  # noqa: F401
