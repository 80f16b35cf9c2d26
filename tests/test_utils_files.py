"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

from viewjson.utils.files import is_jsonl_path, iter_json_paths


class TestIterJsonPaths:
    """Test iter_json_paths function."""

    def test_single_json_file(self, tmp_path: Path) -> None:
        """Should yield single JSON file."""
        doc = tmp_path / "test.json"
        doc.write_text("{}")

        paths = list(iter_json_paths([doc]))

        assert paths == [doc]

    def test_directory_with_documents(self, tmp_path: Path) -> None:
        """Should find JSON and JSONL files and skip others."""
        (tmp_path / "doc1.json").write_text("{}")
        (tmp_path / "doc2.jsonl").write_text("{}")
        (tmp_path / "doc3.ndjson").write_text("{}")
        (tmp_path / "notes.txt").write_text("text")

        paths = list(iter_json_paths([tmp_path]))

        assert [p.name for p in paths] == ["doc1.json", "doc2.jsonl", "doc3.ndjson"]

    def test_nested_directories(self, tmp_path: Path) -> None:
        """Should find documents in nested directories."""
        subdir = tmp_path / "subdir"
        subdir.mkdir()
        (tmp_path / "root.json").write_text("{}")
        (subdir / "nested.json").write_text("{}")

        names = {p.name for p in iter_json_paths([tmp_path])}

        assert names == {"root.json", "nested.json"}

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Should handle empty directory."""
        assert list(iter_json_paths([tmp_path])) == []

    def test_missing_input(self, tmp_path: Path) -> None:
        """Missing paths are skipped."""
        assert list(iter_json_paths([tmp_path / "missing.json"])) == []

    def test_multiple_inputs(self, tmp_path: Path) -> None:
        """Inputs are yielded in the given order."""
        second = tmp_path / "b.json"
        first = tmp_path / "a.jsonl"
        second.write_text("{}")
        first.write_text("{}")

        assert list(iter_json_paths([second, first])) == [second, first]


class TestIsJsonlPath:
    """Test is_jsonl_path function."""

    def test_suffixes(self) -> None:
        """JSONL suffixes are recognised case-insensitively."""
        assert is_jsonl_path(Path("a.jsonl"))
        assert is_jsonl_path(Path("a.NDJSON"))
        assert not is_jsonl_path(Path("a.json"))
        assert not is_jsonl_path(Path("jsonl"))
