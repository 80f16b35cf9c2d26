"""Parser for the ``$``-rooted path mini-language.

Grammar::

    path       := '$' component*
    component  := '.' identifier-chars+
                | '[' '"' escaped-key '"' ']'
                | '[' digit+ ']'

Malformed paths yield ``None`` rather than raising.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from viewjson.models import Index, Key, PathSegment

ROOT = "$"


def parse_json_path(path: str) -> Optional[List[PathSegment]]:
    """Parse ``path`` into segments, or return ``None`` if it is malformed.

    ``"$"`` alone parses to an empty list (the document root).
    """
    if not path or path[0] != ROOT:
        return None

    segments: List[PathSegment] = []
    pos = 1
    length = len(path)
    while pos < length:
        char = path[pos]
        if char == ".":
            parsed = _parse_dot_key(path, pos + 1)
        elif char == "[":
            if path.startswith('"', pos + 1):
                parsed = _parse_quoted_key(path, pos + 2)
            else:
                parsed = _parse_index(path, pos + 1)
        else:
            return None

        if parsed is None:
            return None
        segment, pos = parsed
        segments.append(segment)

    return segments


def _parse_dot_key(path: str, start: int) -> Optional[Tuple[PathSegment, int]]:
    end = start
    while end < len(path) and path[end] not in ".[":
        end += 1
    if end == start:
        return None
    return Key(path[start:end]), end


def _parse_quoted_key(path: str, start: int) -> Optional[Tuple[PathSegment, int]]:
    chars: List[str] = []
    pos = start
    while pos < len(path):
        char = path[pos]
        if char == "\\":
            if pos + 1 >= len(path):
                return None
            chars.append(path[pos + 1])
            pos += 2
            continue
        if char == '"':
            if not path.startswith("]", pos + 1):
                return None
            return Key("".join(chars)), pos + 2
        chars.append(char)
        pos += 1
    # unterminated quote
    return None


def _parse_index(path: str, start: int) -> Optional[Tuple[PathSegment, int]]:
    end = path.find("]", start)
    if end == -1:
        return None
    digits = path[start:end]
    # str.isdigit accepts non-ASCII digits such as superscripts
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return Index(int(digits)), end + 1
