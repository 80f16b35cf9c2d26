"""Resolve parsed paths against document values."""

from __future__ import annotations

from typing import Any, Sequence

from viewjson.models import Index, JsonValue, Key, PathSegment
from viewjson.paths.parser import parse_json_path

_MISSING = object()


def _lookup_in_value(value: JsonValue, segments: Sequence[PathSegment]) -> Any:
    current: Any = value
    for segment in segments:
        if isinstance(segment, Key):
            if not isinstance(current, dict) or segment.name not in current:
                return _MISSING
            current = current[segment.name]
        else:
            if not isinstance(current, list) or segment.position >= len(current):
                return _MISSING
            current = current[segment.position]
    return current


def lookup_value(root: JsonValue, path: str, default: Any = None) -> Any:
    """Return the value addressed by ``path`` inside ``root``.

    ``default`` is returned when the path is malformed or does not exist. Pass a
    sentinel to tell a missing node apart from a stored JSON ``null``.
    """
    segments = parse_json_path(path)
    if segments is None:
        return default
    found = _lookup_in_value(root, segments)
    return default if found is _MISSING else found


def lookup_value_in_jsonl(values: Sequence[JsonValue], path: str, default: Any = None) -> Any:
    """Return the value addressed by ``path`` inside a line-delimited collection.

    The first segment must be an index selecting the line. The bare root ``$`` has
    no single value at this level and resolves to ``default``.
    """
    segments = parse_json_path(path)
    if not segments:
        return default

    first, rest = segments[0], segments[1:]
    if not isinstance(first, Index) or first.position >= len(values):
        return default
    found = _lookup_in_value(values[first.position], rest)
    return default if found is _MISSING else found
