"""Tests for the CLI."""

import pytest
import json

from ejdict.main import main, mode_or_default, parse_number
from ejdict.schema import Dictionary
from ejdict.search import SearchMode


class TestHelpers:
    """Tests for argument fallbacks."""

    def test_mode_or_default(self):
        """Test invalid names fall back instead of failing."""
        assert mode_or_default("exact", SearchMode.LOWER) is SearchMode.EXACT
        assert mode_or_default("bogus", SearchMode.LOWER) is SearchMode.LOWER
        assert mode_or_default(None, SearchMode.FUZZY) is SearchMode.FUZZY

    def test_parse_number(self):
        """Test candidate counts fall back on bad input."""
        assert parse_number("3", 5) == 3
        assert parse_number("many", 5) == 5
        assert parse_number("-1", 5) == 5
        assert parse_number(None, 5) == 5


class TestLookCommand:
    """Tests for the look subcommand."""

    def test_json_output(self, dictionary_file, capsys):
        """Test --json prints the entry in serialized form."""
        code = main(["--dictionary", str(dictionary_file), "look", "apple", "--json"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"words": ["apple"], "mean": "『リンゴ』;リンゴの木"}

    def test_default_mode_is_lower(self, dictionary_file, capsys):
        """Test look ignores case by default."""
        code = main(["-d", str(dictionary_file), "look", "APPLE", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["words"] == ["apple"]

    def test_invalid_mode_falls_back(self, dictionary_file, capsys):
        """Test an unknown mode uses the look default."""
        code = main(["-d", str(dictionary_file), "look", "APPLE", "-m", "bogus", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["words"] == ["apple"]

    def test_not_found(self, dictionary_file, capsys):
        """Test a miss exits 1 with a message."""
        code = main(["-d", str(dictionary_file), "look", "Apple", "-m", "exact"])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_table_output(self, dictionary_file, capsys):
        """Test the table lists headword and meaning."""
        code = main(["-d", str(dictionary_file), "look", "blue"])
        assert code == 0
        out = capsys.readouterr().out
        assert "word" in out
        assert "blue" in out
        assert "青黒い" in out

    def test_missing_dictionary(self, tmp_path, capsys):
        """Test a missing dictionary file exits 1."""
        code = main(["-d", str(tmp_path / "none.json"), "look", "apple"])
        assert code == 1
        assert "Failed to load dictionary" in capsys.readouterr().err


class TestCandidatesCommand:
    """Tests for the candidates subcommand."""

    def test_default_fuzzy(self, dictionary_file, capsys):
        """Test candidates defaults to prefix matching."""
        code = main(["-d", str(dictionary_file), "candidates", "apple", "--json"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert [d["words"][0] for d in data] == ["apple", "apple butter", "apple green"]

    def test_number_limits_results(self, dictionary_file, capsys):
        """Test --number caps the result count."""
        code = main(["-d", str(dictionary_file), "candidates", "apple", "-n", "2", "--json"])
        assert code == 0
        assert len(json.loads(capsys.readouterr().out)) == 2

    def test_no_results(self, dictionary_file, capsys):
        """Test an empty candidate list is not an error."""
        code = main(["-d", str(dictionary_file), "candidates", "zebra", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out) == []


class TestBuildCommand:
    """Tests for the build subcommand."""

    def test_build_from_source(self, tmp_path, sample_ejdict_content, capsys):
        """Test building the JSON dictionary from a local text file."""
        source = tmp_path / "ejdic-hand-utf8.txt"
        source.write_text(sample_ejdict_content, encoding="utf-8")
        output = tmp_path / "data" / "ejdict.json"

        code = main(["build", "--source", str(source), "--output", str(output)])
        assert code == 0
        assert len(Dictionary.load(output)) == 5
        assert "Entries: 5" in capsys.readouterr().out

        code = main(["-d", str(output), "look", "a", "-m", "exact", "--json"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["words"] == ["A", "a"]

    def test_build_skips_existing(self, tmp_path, capsys):
        """Test an existing output is kept without --force."""
        output = tmp_path / "ejdict.json"
        output.write_text('{"words": []}', encoding="utf-8")

        code = main(["build", "--source", str(tmp_path / "none.txt"), "--output", str(output)])
        assert code == 0
        assert "already exists" in capsys.readouterr().out
        assert output.read_text(encoding="utf-8") == '{"words": []}'

    def test_build_undecodable_source(self, tmp_path, capsys):
        """Test a source that is not UTF-8 exits 1 with an error line."""
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"apple\t\xff\xfe\n")
        output = tmp_path / "out.json"

        code = main(["build", "--source", str(source), "--output", str(output)])
        assert code == 1
        assert "ERROR - " in capsys.readouterr().err
        assert not output.exists()

    def test_build_missing_source(self, tmp_path, capsys):
        """Test a missing source file exits 1."""
        code = main([
            "build",
            "--source", str(tmp_path / "none.txt"),
            "--output", str(tmp_path / "out.json"),
        ])
        assert code == 1
        assert "ERROR" in capsys.readouterr().err


def test_no_command(capsys):
    """Test running without a subcommand prints help."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
