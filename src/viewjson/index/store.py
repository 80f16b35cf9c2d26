"""In-memory document store for single and line-delimited JSON documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from viewjson.models import JsonValue
from viewjson.paths.lookup import lookup_value, lookup_value_in_jsonl
from viewjson.paths.parser import ROOT


@dataclass(frozen=True, slots=True)
class JsonLDocument:
    """Ordered JSONL lines; the line tuple is fixed at construction time."""

    values: Tuple[JsonValue, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def summary(self) -> Dict[str, Any]:
        """A fresh ``{"lines": n}`` mapping; callers may not alter the stored state."""
        return {"lines": len(self.values)}

    def __len__(self) -> int:
        return len(self.values)


class StoredDocument:
    """A loaded document: either one value or a JSONL collection."""

    __slots__ = ("_value", "_jsonl")

    def __init__(self, value: JsonValue = None, *, jsonl: JsonLDocument | None = None) -> None:
        self._value = value
        self._jsonl = jsonl

    @classmethod
    def single(cls, value: JsonValue) -> "StoredDocument":
        return cls(value)

    @classmethod
    def from_lines(cls, values: Sequence[JsonValue]) -> "StoredDocument":
        return cls(jsonl=JsonLDocument(tuple(values)))

    @property
    def is_jsonl(self) -> bool:
        return self._jsonl is not None

    @property
    def value(self) -> JsonValue:
        """The single document value, or the summary for a JSONL collection."""
        if self._jsonl is not None:
            return self._jsonl.summary
        return self._value

    @property
    def lines(self) -> List[JsonValue]:
        if self._jsonl is None:
            return []
        return list(self._jsonl.values)

    def lookup_value(self, path: str, default: Any = None) -> Any:
        """Resolve ``path``; the JSONL root ``$`` yields the line-count summary."""
        if self._jsonl is None:
            return lookup_value(self._value, path, default)
        if path == ROOT:
            return self._jsonl.summary
        return lookup_value_in_jsonl(self._jsonl.values, path, default)

    def __repr__(self) -> str:
        if self._jsonl is not None:
            return f"StoredDocument(jsonl, lines={len(self._jsonl)})"
        return f"StoredDocument(single, type={type(self._value).__name__})"
