# backend/spark_joy/cli.py

"""
簡易 CLI エントリーポイント。

例:
    python -m spark_joy.cli 2025-11
    python -m spark_joy.cli 2025-10 2025-11
    python -m spark_joy.cli https://raw.githubusercontent.com/.../spark-joy-digest-42.md

GitHub Actions のワークフローから定期実行する想定。
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from spark_joy.digest.config import get_digest_settings
from spark_joy.digest.service import DigestService
from spark_joy.github.client import GitHubClient
from spark_joy.github.config import get_github_config
from spark_joy.notion.config import get_notion_config
from spark_joy.utils.config import get_env, load_env_file

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """\
examples:
  spark-joy 2025-11
  spark-joy https://example.com/spark-joy-digest-1.md
"""


def _configure_logging() -> None:
    level_name = (get_env("SPARK_JOY_LOG_LEVEL", default="INFO", required=False) or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spark-joy",
        description="Parse the 物 section of spark-joy digest posts and sync entries to Notion.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="YEAR-MONTH|URL",
        help="YYYY-MM（GitHub の月別ディレクトリ）または記事の URL",
    )
    parser.add_argument(
        "--no-notion",
        action="store_true",
        help="Notion への反映を行わない",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    引数を解釈して収集処理を実行し、終了コードを返す。

    - 引数なし: usage を表示して 1
    - REPO_NAME 未設定: 処理を始める前に 1
    - それ以外: 個別の失敗があっても 0
    """
    load_env_file()
    _configure_logging()

    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_usage(sys.stderr)
        print(USAGE_EXAMPLES, file=sys.stderr)
        return 1
    args = parser.parse_args(argv)

    # 必須の未設定（EnvVarMissingError）も不正な値も RuntimeError として扱う
    try:
        github_config = get_github_config()
        settings = get_digest_settings()
    except RuntimeError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    service = DigestService(
        github_client=GitHubClient(github_config),
        settings=settings,
        notion_config=None if args.no_notion else get_notion_config(),
    )

    collected = service.collect(args.targets)
    entries = collected.entries

    print("\n=== Results ===")
    print(json.dumps([entry.to_output() for entry in entries], ensure_ascii=False, indent=2))
    print(
        f"\nTotal entries found: {collected.total_found} "
        f"({collected.removed_count} duplicates removed)"
    )
    print(f"Unique entries: {len(entries)}")

    if not entries:
        print("No entries found")
        return 0

    if args.no_notion:
        return 0

    print("\n=== Adding to Notion ===")
    if not service.notion_enabled:
        logger.info("Notion integration skipped: NOTION_TOKEN or NOTION_DATABASE_ID not set")
        return 0

    report = service.sync(entries)
    print(f"Created: {report.created}, skipped: {report.skipped}, failed: {report.failed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
