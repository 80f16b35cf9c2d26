"""Find literal pattern occurrences in rendered text.

Offsets are character positions, which is how text widgets address their
buffers. Matches may overlap: after each hit the scan resumes one character
past the start of the hit, not past its end.
"""

from __future__ import annotations

from typing import List

from viewjson.models import Span


def find_all_occurrences(text: str, pattern: str, case_sensitive: bool) -> List[Span]:
    """Return every ``(start, end)`` span of ``pattern`` in ``text``.

    An empty pattern has no occurrences.
    """
    if not pattern:
        return []
    if case_sensitive:
        return _find_exact(text, pattern)
    return _find_folded(text, pattern)


def _find_exact(text: str, pattern: str) -> List[Span]:
    occurrences: List[Span] = []
    width = len(pattern)
    start = text.find(pattern)
    while start != -1:
        occurrences.append((start, start + width))
        start = text.find(pattern, start + 1)
    return occurrences


def _find_folded(text: str, pattern: str) -> List[Span]:
    # Each text character is compared through the first character of its
    # lower-case form, so multi-character lowerings (e.g. "İ") do not shift offsets.
    needle = pattern.lower()
    width = len(needle)
    folded = [char.lower()[:1] for char in text]

    occurrences: List[Span] = []
    for start in range(len(folded) - width + 1):
        if all(folded[start + offset] == needle[offset] for offset in range(width)):
            occurrences.append((start, start + width))
    return occurrences
