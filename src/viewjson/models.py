"""Core viewjson data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
Span = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Key:
    """Selects a member of an object by name."""

    name: str


@dataclass(frozen=True, slots=True)
class Index:
    """Selects an element of an array by position."""

    position: int


PathSegment = Union[Key, Index]


class MatchRecord(NamedTuple):
    """One search match for a node, identified by its global index."""

    global_index: int
    is_key_match: bool


@dataclass(slots=True)
class NodeRecord:
    """A single node produced by walking a document tree."""

    name: str
    preview: str
    display_path: str
    data_path: str
    doc_id: int
    key: Optional[str] = None
    is_leaf: bool = True


@dataclass(slots=True)
class SearchMatch:
    """A match found during a full search pass over one or more documents."""

    index: int
    doc_id: int
    data_path: str
    display_path: str
    name: str
    preview: str
    is_key_match: bool
    span: Optional[Span] = None

    def to_record(self) -> MatchRecord:
        return MatchRecord(self.index, self.is_key_match)
