"""Tests for the builder module."""

import pytest
import json
import tempfile
from pathlib import Path

from ejdict.builder import DictionaryBuilder
from ejdict.ingest.base import IngestResult
from ejdict.schema import Dictionary, Entry


def create_result(entries: list[Entry], name: str = "test") -> IngestResult:
    """Helper to wrap entries in an IngestResult."""
    return IngestResult(
        entries=entries,
        source_path=f"/test/{name}.txt",
        dict_name=name,
        total_raw=len(entries),
        total_valid=len(entries),
    )


class TestDictionaryBuilder:
    """Tests for DictionaryBuilder."""

    def test_add_entries(self, sample_entries):
        """Test adding entries from an ingest result."""
        builder = DictionaryBuilder()
        builder.add_entries(create_result(sample_entries))
        assert builder.get_entry_count() == 4

    def test_order_across_results(self):
        """Test entries keep the order they were added in."""
        builder = DictionaryBuilder()
        builder.add_entries(create_result([Entry(("b",), "2")], "first"))
        builder.add_entries(create_result([Entry(("a",), "1")], "second"))
        builder.add_entry(Entry(("c",), "3"))

        d = builder.to_dictionary()
        assert [e.headwords[0] for e in d] == ["b", "a", "c"]

    def test_build_writes_json(self, sample_entries):
        """Test build writes the words/mean payload."""
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir, "data", "ejdict.json")
            builder = DictionaryBuilder()
            builder.add_entries(create_result(sample_entries, "ejdict"))
            stats = builder.build(output)

            assert stats.skipped is False
            assert stats.total_entries == 4
            assert stats.total_headwords == 4
            assert stats.by_source == {"ejdict": 4}
            assert stats.files_written == [str(output)]

            with open(output, encoding="utf-8") as f:
                data = json.load(f)
            assert data["words"][0] == {"words": ["apple"], "mean": "『リンゴ』;リンゴの木"}
            assert Dictionary.load(output) == Dictionary.from_entries(sample_entries)

    def test_build_skips_existing(self, tmp_path):
        """Test an existing output is left alone without force."""
        output = tmp_path / "ejdict.json"
        output.write_text('{"words": []}', encoding="utf-8")

        builder = DictionaryBuilder()
        builder.add_entry(Entry(("apple",), "m1"))
        stats = builder.build(output)

        assert stats.skipped is True
        assert stats.files_written == []
        assert json.loads(output.read_text(encoding="utf-8")) == {"words": []}

    def test_needs_build(self, tmp_path):
        """Test the rebuild decision used by build and the CLI."""
        output = tmp_path / "ejdict.json"
        assert DictionaryBuilder.needs_build(output) is True
        output.write_text('{"words": []}', encoding="utf-8")
        assert DictionaryBuilder.needs_build(output) is False
        assert DictionaryBuilder.needs_build(output, force=True) is True

    def test_build_force_overwrites(self, tmp_path):
        """Test force rewrites an existing output."""
        output = tmp_path / "ejdict.json"
        output.write_text('{"words": []}', encoding="utf-8")

        builder = DictionaryBuilder()
        builder.add_entry(Entry(("A", "a"), "エイ"))
        stats = builder.build(output, force=True)

        assert stats.skipped is False
        assert stats.total_headwords == 2
        assert len(Dictionary.load(output)) == 1
