# backend/tests/conftest.py
"""
Pytest configuration for spark-joy digest tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import spark_joy.*` works correctly in tests.
- Ensures required environment variables for tests are set
  with safe dummy values (e.g., REPO_NAME).
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    Notion の設定はテストごとに monkeypatch で入れるので、ここでは消しておく。
    """
    os.environ.setdefault("REPO_NAME", "dummy-owner/dummy-blog")
    for name in ("NOTION_TOKEN", "NOTION_API_KEY", "NOTION_DATABASE_ID", "GITHUB_TOKEN"):
        os.environ.pop(name, None)


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """
    設定の getter は lru_cache でキャッシュしているので、
    テストごとに monkeypatch した環境変数を読み直せるようにする。
    """
    from spark_joy.digest.config import get_digest_settings
    from spark_joy.github.config import get_github_config
    from spark_joy.notion.config import get_notion_config

    for getter in (get_github_config, get_notion_config, get_digest_settings):
        getter.cache_clear()
    yield
    for getter in (get_github_config, get_notion_config, get_digest_settings):
        getter.cache_clear()
