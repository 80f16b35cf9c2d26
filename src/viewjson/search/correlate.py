"""Map a global match index to the span to highlight inside one node."""

from __future__ import annotations

from typing import Optional, Sequence

from viewjson.models import MatchRecord, Span
from viewjson.search.occurrences import find_all_occurrences


def find_occurrence_to_highlight(
    matches: Sequence[MatchRecord],
    match_index: int,
    formatted_value: str,
    search_text: str,
    case_sensitive: bool,
) -> Optional[Span]:
    """Return the span in ``formatted_value`` that corresponds to ``match_index``.

    ``matches`` holds the ``(global_index, is_key_match)`` records that share one
    node's address, in discovery order. Key matches are never highlighted in the
    value. The node-local rank of a value match is the number of value matches
    that precede it; that rank selects among the occurrences re-found in
    ``formatted_value``. Any inconsistency yields ``None``.
    """
    local_index = next(
        (position for position, (index, _) in enumerate(matches) if index == match_index),
        None,
    )
    if local_index is None:
        return None

    if matches[local_index][1]:
        return None

    rank = sum(1 for _, is_key in matches[:local_index] if not is_key)

    occurrences = find_all_occurrences(formatted_value, search_text, case_sensitive)
    if rank < len(occurrences):
        return occurrences[rank]
    return None
