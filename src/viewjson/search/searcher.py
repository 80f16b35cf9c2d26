"""Full search pass over node records and match highlighting."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from viewjson.models import MatchRecord, NodeRecord, SearchMatch, Span
from viewjson.search.correlate import find_occurrence_to_highlight
from viewjson.search.occurrences import find_all_occurrences

LOGGER = logging.getLogger(__name__)


def _contains(text: str, query: str, case_sensitive: bool) -> bool:
    if case_sensitive:
        return query in text
    return bool(find_all_occurrences(text, query, case_sensitive=False))


class Searcher:
    """Search the key and value text of a sequence of node records."""

    def __init__(self, records: Iterable[NodeRecord]) -> None:
        self.records: List[NodeRecord] = list(records)
        self._by_address: Dict[Tuple[int, str], NodeRecord] = {
            (record.doc_id, record.data_path): record for record in self.records
        }

    def search(self, query: str, *, case_sensitive: bool = False) -> List[SearchMatch]:
        """Return every key and value match in record order.

        Global indices are assigned in discovery order. A node contributes at
        most one key match, followed by one value match per occurrence in its
        preview (leaf nodes only).
        """
        if not query:
            return []

        matches: List[SearchMatch] = []
        for record in self.records:
            if record.key is not None and _contains(record.key, query, case_sensitive):
                matches.append(self._make_match(len(matches), record, is_key_match=True))
            if not record.is_leaf:
                continue
            for span in find_all_occurrences(record.preview, query, case_sensitive):
                matches.append(self._make_match(len(matches), record, is_key_match=False, span=span))

        LOGGER.debug("Query %r matched %d times in %d nodes", query, len(matches), len(self.records))
        return matches

    @staticmethod
    def _make_match(
        index: int, record: NodeRecord, *, is_key_match: bool, span: Optional[Span] = None
    ) -> SearchMatch:
        return SearchMatch(
            index=index,
            doc_id=record.doc_id,
            data_path=record.data_path,
            display_path=record.display_path,
            name=record.name,
            preview=record.preview,
            is_key_match=is_key_match,
            span=span,
        )

    @staticmethod
    def matches_for_node(
        matches: Sequence[SearchMatch], doc_id: int, data_path: str
    ) -> List[MatchRecord]:
        """Reduce the flat match list to the records for one node's address."""
        return [
            match.to_record()
            for match in matches
            if match.doc_id == doc_id and match.data_path == data_path
        ]

    def highlight(
        self,
        matches: Sequence[SearchMatch],
        match_index: int,
        query: str,
        *,
        case_sensitive: bool = False,
    ) -> Optional[Span]:
        """Return the span to highlight in the preview of the node holding ``match_index``."""
        target = next((match for match in matches if match.index == match_index), None)
        if target is None:
            return None

        record = self._by_address.get((target.doc_id, target.data_path))
        if record is None:
            LOGGER.debug("No node at %s for match %d", target.data_path, match_index)
            return None

        node_matches = self.matches_for_node(matches, target.doc_id, target.data_path)
        return find_occurrence_to_highlight(
            node_matches, match_index, record.preview, query, case_sensitive
        )
