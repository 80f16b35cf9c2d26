"""Utility helpers for working with files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

JSON_SUFFIXES = frozenset({".json"})
JSONL_SUFFIXES = frozenset({".jsonl", ".ndjson"})


def is_jsonl_path(path: Path) -> bool:
    return path.suffix.lower() in JSONL_SUFFIXES


def iter_json_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield JSON and JSONL paths from input paths, descending into directories."""
    suffixes = JSON_SUFFIXES | JSONL_SUFFIXES
    for item in inputs:
        if item.is_dir():
            yield from iter_json_paths(
                sorted(child for child in item.rglob("*") if child.is_file())
            )
        elif item.is_file() and item.suffix.lower() in suffixes:
            yield item
