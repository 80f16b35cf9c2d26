"""Walk documents into flat, ordered node records.

Each record carries a display path (rooted wherever the caller chooses, e.g. a
file name) and a data path (always rooted at ``$``) so a renderer can show one
and resolve the other.
"""

from __future__ import annotations

from typing import Iterator

from viewjson.index.store import StoredDocument
from viewjson.models import JsonValue, NodeRecord
from viewjson.paths.formatting import build_array_path, build_object_path
from viewjson.paths.parser import ROOT
from viewjson.utils.preview import format_value_preview


def _is_container(value: JsonValue) -> bool:
    return isinstance(value, (dict, list))


def _iter_children(
    value: JsonValue,
    display_path: str,
    data_path: str,
    doc_id: int,
    max_chars: int,
) -> Iterator[NodeRecord]:
    if isinstance(value, dict):
        children = (
            (key, key, child, build_object_path(display_path, key), build_object_path(data_path, key))
            for key, child in value.items()
        )
    elif isinstance(value, list):
        children = (
            (f"[{idx}]", None, child, build_array_path(display_path, idx), build_array_path(data_path, idx))
            for idx, child in enumerate(value)
        )
    else:
        return

    for name, key, child, child_display, child_data in children:
        yield NodeRecord(
            name=name,
            preview=format_value_preview(child, max_chars=max_chars),
            display_path=child_display,
            data_path=child_data,
            doc_id=doc_id,
            key=key,
            is_leaf=not _is_container(child),
        )
        yield from _iter_children(child, child_display, child_data, doc_id, max_chars)


def iter_tree_records(
    value: JsonValue,
    *,
    root_name: str,
    display_root: str = ROOT,
    doc_id: int = 0,
    max_chars: int = 200,
) -> Iterator[NodeRecord]:
    """Yield the root and every descendant of ``value`` in pre-order."""
    yield NodeRecord(
        name=root_name,
        preview=format_value_preview(value, max_chars=max_chars),
        display_path=display_root,
        data_path=ROOT,
        doc_id=doc_id,
        is_leaf=not _is_container(value),
    )
    yield from _iter_children(value, display_root, ROOT, doc_id, max_chars)


def iter_document_records(
    document: StoredDocument,
    *,
    name: str,
    display_root: str = ROOT,
    doc_id: int = 0,
    max_chars: int = 200,
) -> Iterator[NodeRecord]:
    """Yield node records for a stored document, expanding JSONL lines."""
    if not document.is_jsonl:
        yield from iter_tree_records(
            document.value,
            root_name=name,
            display_root=display_root,
            doc_id=doc_id,
            max_chars=max_chars,
        )
        return

    lines = document.lines
    yield NodeRecord(
        name=f"{name} (JSONL)",
        preview=f"{len(lines)} objects",
        display_path=display_root,
        data_path=ROOT,
        doc_id=doc_id,
        is_leaf=False,
    )
    for idx, value in enumerate(lines):
        line_display = build_array_path(display_root, idx)
        line_data = build_array_path(ROOT, idx)
        yield NodeRecord(
            name=f"Line {idx + 1}",
            preview=format_value_preview(value, max_chars=max_chars),
            display_path=line_display,
            data_path=line_data,
            doc_id=doc_id,
            is_leaf=not _is_container(value),
        )
        yield from _iter_children(value, line_display, line_data, doc_id, max_chars)
