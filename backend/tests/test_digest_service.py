# backend/tests/test_digest_service.py

from typing import Dict, List

import pytest

from spark_joy.digest.config import DigestSettings, get_digest_settings
from spark_joy.digest.schemas import InvalidTargetError, TargetKind, resolve_target
from spark_joy.digest.service import DigestService
from spark_joy.github.client import FetchError
from spark_joy.notion.schemas import UpsertReport, UpsertResult, UpsertStatus

POST_41 = """---
title: spark joy digest 41
url: /posts/spark-joy-digest-41/
---

## 物

- `Widget 🤩` [buy](https://shop/widget) great toy
  more text
- `Mug`

## 读

- `Book` not an item
"""

POST_42 = """## 物

### [Widget 👎](https://shop/widget-v2)
second opinion

### [Lamp](https://shop/lamp)
"""


class FakeGitHubClient:
    def __init__(self, documents: Dict[str, str], listings: Dict[str, List[str]]) -> None:
        self._documents = documents
        self._listings = listings
        self.fetched: List[str] = []

    def fetch_document(self, url: str) -> str:
        self.fetched.append(url)
        if url not in self._documents:
            raise FetchError(url, 404, "Not Found")
        return self._documents[url]

    def list_digest_urls(self, year: str, month: str) -> List[str]:
        return self._listings.get(f"{year}-{month}", [])


class FakeNotionService:
    def __init__(self) -> None:
        self.received = []

    def upsert_entries(self, entries):
        self.received.extend(entries)
        return UpsertReport(
            results=[UpsertResult(title=e.title, status=UpsertStatus.CREATED) for e in entries]
        )


def _service(notion=None) -> DigestService:
    github = FakeGitHubClient(
        documents={
            "https://raw/41.md": POST_41,
            "https://raw/42.md": POST_42,
        },
        listings={"2025-11": ["https://raw/41.md", "https://raw/missing.md", "https://raw/42.md"]},
    )
    return DigestService(
        github_client=github,
        settings=DigestSettings(),
        notion_service=notion,
    )


def test_resolve_target():
    assert resolve_target("https://raw/41.md").kind is TargetKind.URL
    target = resolve_target("2025-11")
    assert target.kind is TargetKind.YEAR_MONTH
    assert (target.year, target.month) == ("2025", "11")
    with pytest.raises(InvalidTargetError):
        resolve_target("november")


def test_parse_document_attaches_provenance():
    entries = _service().parse_document(POST_41, source="https://raw/41.md", year_month="2025-11")

    assert [e.title for e in entries] == ["Widget", "Mug"]
    widget = entries[0]
    assert widget.source == "https://raw/41.md"
    assert widget.year_month == "2025-11"
    assert widget.post_url == (
        "https://blog.douchi.space/posts/spark-joy-digest-41/?utm_source=notion_shopping"
    )
    assert widget.rating == 5
    assert widget.description == "great toy more text"


def test_collect_year_month_skips_failed_document_and_dedupes():
    result = _service().collect(["2025-11"])

    assert result.failed_sources == ["https://raw/missing.md"]
    assert result.total_found == 4
    assert [e.title for e in result.entries] == ["Widget", "Mug", "Lamp"]
    assert result.removed_count == 1
    assert result.duplicates[0].link == "https://shop/widget-v2"
    # 先に出現した方が残る
    assert result.entries[0].link == "https://shop/widget"
    # frontmatter の無い記事は post_url なし
    assert result.entries[2].post_url is None


def test_collect_url_target_has_no_year_month():
    result = _service().collect(["https://raw/42.md"])

    assert [e.title for e in result.entries] == ["Widget", "Lamp"]
    assert all(e.year_month is None for e in result.entries)
    assert all(e.source == "https://raw/42.md" for e in result.entries)


def test_collect_records_invalid_targets_and_empty_months():
    result = _service().collect(["2024-01", "bad-arg-x", "nope"])

    assert result.entries == []
    assert result.invalid_targets == ["bad-arg-x", "nope"]


def test_run_syncs_unique_entries_to_notion():
    notion = FakeNotionService()

    report = _service(notion=notion).run(["2025-11"])

    assert [e.title for e in notion.received] == ["Widget", "Mug", "Lamp"]
    assert report.upsert is not None
    assert report.upsert.created == 3


def test_run_without_notion_only_collects():
    report = _service().run(["2025-11"])

    assert report.upsert is None
    assert len(report.collected.entries) == 3


def test_run_with_sync_disabled():
    notion = FakeNotionService()

    report = _service(notion=notion).run(["2025-11"], sync=False)

    assert report.upsert is None
    assert notion.received == []


def test_rating_toggle_from_settings():
    service = DigestService(
        github_client=FakeGitHubClient({}, {}),
        settings=DigestSettings(extract_rating=False),
    )

    entries = service.parse_document(POST_42, source="s")

    assert all(e.rating is None for e in entries)


def test_get_digest_settings_reads_env(monkeypatch):
    monkeypatch.setenv("SPARK_JOY_EXTRACT_RATING", "false")
    monkeypatch.setenv("SPARK_JOY_POST_URL_SUFFIX", "")

    settings = get_digest_settings()

    assert settings.extract_rating is False
    # 空文字を設定すると suffix なし
    assert settings.post_url_suffix == ""
    assert settings.build_post_url("/posts/1/") == "https://blog.douchi.space/posts/1/"


def test_get_digest_settings_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("SPARK_JOY_POST_URL_SUFFIX", raising=False)
    monkeypatch.delenv("SPARK_JOY_EXTRACT_RATING", raising=False)

    settings = get_digest_settings()

    assert settings.post_url_suffix == "?utm_source=notion_shopping"
    assert settings.extract_rating is True
