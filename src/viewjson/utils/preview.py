"""Short, searchable previews of JSON values."""

from __future__ import annotations

import json

from viewjson.models import JsonValue

ELLIPSIS = "…"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def format_value_preview(value: JsonValue, *, max_chars: int = 200) -> str:
    """Render ``value`` as the text shown (and searched) next to a tree node.

    Containers render as a size summary; scalars render as their text.
    ``max_chars <= 0`` disables truncation.
    """
    if isinstance(value, dict):
        text = "{" + _plural(len(value), "key") + "}"
    elif isinstance(value, list):
        text = "[" + _plural(len(value), "item") + "]"
    elif isinstance(value, str):
        text = value
    else:
        # null, booleans and numbers in JSON notation
        text = json.dumps(value)

    if max_chars > 0 and len(text) > max_chars:
        return text[:max_chars] + ELLIPSIS
    return text
