# backend/tests/test_parser_dedupe.py

import logging

from spark_joy.parser.dedupe import dedupe
from spark_joy.parser.schemas import Entry


def _entry(title: str, source: str) -> Entry:
    return Entry(title=title, description=f"from {source}").with_provenance(source=source)


def test_dedupe_keeps_first_occurrence_across_sources(caplog):
    entries = [
        _entry("X", "https://a"),
        _entry("Y", "https://a"),
        _entry("X", "https://b"),
    ]

    with caplog.at_level(logging.INFO, logger="spark_joy.parser.dedupe"):
        result = dedupe(entries)

    assert [e.title for e in result.entries] == ["X", "Y"]
    assert result.entries[0].source == "https://a"
    assert result.removed_count == 1
    assert result.duplicates[0].source == "https://b"
    assert any("Skipped duplicate: X" in r.getMessage() for r in caplog.records)


def test_dedupe_is_idempotent_and_order_preserving():
    entries = [_entry(t, "s") for t in ["b", "a", "b", "c", "a"]]

    once = dedupe(entries).entries
    twice = dedupe(once).entries

    assert [e.title for e in once] == ["b", "a", "c"]
    assert twice == once


def test_dedupe_empty():
    result = dedupe([])
    assert result.entries == []
    assert result.removed_count == 0
