"""JSON and JSONL document loading.

Single documents are parsed whole; JSONL sources are parsed line by line with
blank lines skipped.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from viewjson.index.store import StoredDocument
from viewjson.models import JsonValue
from viewjson.utils.files import is_jsonl_path

LOGGER = logging.getLogger(__name__)


class DocumentLoadError(ValueError):
    """Raised when a source does not contain well-formed JSON."""

    def __init__(self, source: str, message: str, *, line: int | None = None) -> None:
        self.source = source
        self.line = line
        location = f"{source}, line {line}" if line is not None else source
        super().__init__(f"{location}: {message}")


def _parse_lines(lines: Iterable[str], source: str) -> List[JsonValue]:
    values: List[JsonValue] = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            values.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(source, exc.msg, line=number) from exc
    return values


def parse_document_text(text: str, *, jsonl: bool = False, source: str = "<text>") -> StoredDocument:
    """Parse in-memory text into a stored document."""
    if jsonl:
        return StoredDocument.from_lines(_parse_lines(text.split("\n"), source))
    try:
        return StoredDocument.single(json.loads(text))
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(source, exc.msg, line=exc.lineno) from exc


def load_document(path: Path) -> StoredDocument:
    """Load ``path`` as JSONL when its suffix says so, otherwise as one document."""
    path = Path(path)
    LOGGER.debug("Loading %s", path)
    if is_jsonl_path(path):
        with path.open("r", encoding="utf-8") as handle:
            document = StoredDocument.from_lines(_parse_lines(handle, str(path)))
        LOGGER.info("Loaded %s (%d lines)", path, len(document.lines))
        return document

    text = path.read_text(encoding="utf-8")
    document = parse_document_text(text, source=str(path))
    LOGGER.info("Loaded %s", path)
    return document
