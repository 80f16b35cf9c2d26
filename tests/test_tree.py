"""Tests for the tree walk and value previews."""

from __future__ import annotations

from viewjson.index.store import StoredDocument
from viewjson.paths.lookup import lookup_value
from viewjson.tree.walker import iter_document_records, iter_tree_records
from viewjson.utils.preview import format_value_preview


class TestFormatValuePreview:
    """Test format_value_preview function."""

    def test_scalars(self) -> None:
        """Scalars render in JSON notation, strings raw."""
        assert format_value_preview("text") == "text"
        assert format_value_preview(None) == "null"
        assert format_value_preview(True) == "true"
        assert format_value_preview(False) == "false"
        assert format_value_preview(42) == "42"
        assert format_value_preview(1.5) == "1.5"

    def test_containers(self) -> None:
        """Containers render their size."""
        assert format_value_preview({}) == "{0 keys}"
        assert format_value_preview({"a": 1}) == "{1 key}"
        assert format_value_preview([1, 2]) == "[2 items]"
        assert format_value_preview([1]) == "[1 item]"

    def test_truncation(self) -> None:
        """Long text is cut with an ellipsis."""
        assert format_value_preview("abcdef", max_chars=3) == "abc…"
        assert format_value_preview("abc", max_chars=3) == "abc"
        assert format_value_preview("abcdef", max_chars=0) == "abcdef"

    def test_keeps_newlines(self) -> None:
        """Newlines are part of the preview."""
        assert format_value_preview("a\nb") == "a\nb"


class TestIterTreeRecords:
    """Test iter_tree_records function."""

    VALUE = {"name": "x", "my key": [1, {"deep": None}]}

    def test_preorder_paths(self) -> None:
        """Records come parent first, in insertion order."""
        records = list(iter_tree_records(self.VALUE, root_name="root"))
        assert [r.data_path for r in records] == [
            "$",
            "$.name",
            '$["my key"]',
            '$["my key"][0]',
            '$["my key"][1]',
            '$["my key"][1].deep',
        ]

    def test_names_and_keys(self) -> None:
        """Object members are named by key, array elements by index."""
        records = list(iter_tree_records(self.VALUE, root_name="root"))
        assert [(r.name, r.key) for r in records] == [
            ("root", None),
            ("name", "name"),
            ("my key", "my key"),
            ("[0]", None),
            ("[1]", None),
            ("deep", "deep"),
        ]

    def test_leaf_flags_and_previews(self) -> None:
        """Containers are not leaves."""
        records = list(iter_tree_records(self.VALUE, root_name="root"))
        assert [(r.preview, r.is_leaf) for r in records] == [
            ("{2 keys}", False),
            ("x", True),
            ("[2 items]", False),
            ("1", True),
            ("{1 key}", False),
            ("null", True),
        ]

    def test_display_root(self) -> None:
        """Display paths use the caller's root; data paths always use $."""
        records = list(
            iter_tree_records(self.VALUE, root_name="root", display_root="file.json", doc_id=7)
        )
        assert records[2].display_path == 'file.json["my key"]'
        assert records[2].data_path == '$["my key"]'
        assert {r.doc_id for r in records} == {7}

    def test_data_paths_resolve(self) -> None:
        """Every data path looks up the node it was built for."""
        sentinel = object()
        for record in iter_tree_records(self.VALUE, root_name="root"):
            assert lookup_value(self.VALUE, record.data_path, sentinel) is not sentinel

    def test_scalar_root(self) -> None:
        """A scalar document has a single record."""
        records = list(iter_tree_records("hello", root_name="root"))
        assert len(records) == 1
        assert records[0].is_leaf


class TestIterDocumentRecords:
    """Test iter_document_records function."""

    def test_single_document(self) -> None:
        """Single documents walk like plain values."""
        document = StoredDocument.single({"a": 1})
        records = list(iter_document_records(document, name="doc.json"))
        assert [r.name for r in records] == ["doc.json", "a"]

    def test_jsonl_document(self) -> None:
        """JSONL documents get a summary root and one node per line."""
        document = StoredDocument.from_lines([{"a": 1}, "two"])
        records = list(
            iter_document_records(document, name="data.jsonl", display_root="data.jsonl", doc_id=3)
        )
        assert [(r.name, r.preview, r.display_path, r.data_path) for r in records] == [
            ("data.jsonl (JSONL)", "2 objects", "data.jsonl", "$"),
            ("Line 1", "{1 key}", "data.jsonl[0]", "$[0]"),
            ("a", "1", "data.jsonl[0].a", "$[0].a"),
            ("Line 2", "two", "data.jsonl[1]", "$[1]"),
        ]
        assert all(r.doc_id == 3 for r in records)

    def test_jsonl_data_paths_resolve(self) -> None:
        """Data paths resolve through the document store."""
        document = StoredDocument.from_lines([{"a": [True]}, None])
        sentinel = object()
        for record in iter_document_records(document, name="x"):
            assert document.lookup_value(record.data_path, sentinel) is not sentinel
