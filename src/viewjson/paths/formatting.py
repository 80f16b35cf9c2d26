"""Build path strings while descending into a document."""

from __future__ import annotations


def _is_identifier(key: str) -> bool:
    if not key:
        return False
    first = key[0]
    if not (first.isalpha() or first == "_"):
        return False
    return all(char.isalnum() or char == "_" for char in key)


def format_path_component(key: str) -> str:
    """Render an object key as ``.key`` or ``["escaped key"]``."""
    if _is_identifier(key):
        return f".{key}"
    # backslashes first so the quote pass does not double them
    escaped = key.replace("\\", "\\\\").replace('"', '\\"')
    return f'["{escaped}"]'


def build_object_path(base: str, key: str) -> str:
    """Append an object key to ``base``."""
    return base + format_path_component(key)


def build_array_path(base: str, index: int) -> str:
    """Append an array index to ``base``."""
    return f"{base}[{index}]"
