"""FastAPI application exposing path lookup and search over JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from viewjson.config import AppConfig
from viewjson.index.store import StoredDocument
from viewjson.ingestion.json_loader import DocumentLoadError, load_document
from viewjson.models import NodeRecord, SearchMatch
from viewjson.search.searcher import Searcher
from viewjson.tree.walker import iter_document_records

LOGGER = logging.getLogger(__name__)

MAX_SEARCH_LIMIT = 1000

app = FastAPI(title="viewjson", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_MISSING = object()


class LookupPayload(BaseModel):
    file: Path
    path: str


class SearchPayload(BaseModel):
    files: List[Path]
    query: str
    case_sensitive: bool = False
    limit: int = AppConfig().search_limit


class HighlightPayload(BaseModel):
    files: List[Path]
    query: str
    match_index: int
    case_sensitive: bool = False


def _load(path: Path) -> StoredDocument:
    path = path.expanduser()
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"File not found: {path}")
    try:
        return load_document(path)
    except DocumentLoadError as exc:
        LOGGER.error("Unable to load %s: %s", path, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _build_searcher(files: List[Path]) -> Searcher:
    config = AppConfig(display_root=None)
    records: List[NodeRecord] = []
    for doc_id, path in enumerate(files):
        document = _load(path)
        records.extend(
            iter_document_records(
                document,
                name=path.name,
                display_root=config.resolve_display_root(path),
                doc_id=doc_id,
                max_chars=config.max_preview_chars,
            )
        )
    return Searcher(records)


def _check_query(query: str) -> str:
    if not query.strip():
        raise HTTPException(status_code=400, detail="Empty query")
    return query


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/lookup")
async def lookup(payload: LookupPayload) -> dict[str, Any]:
    document = _load(payload.file)
    value = document.lookup_value(payload.path, _MISSING)
    if value is _MISSING:
        raise HTTPException(status_code=404, detail=f"Path does not exist: {payload.path}")
    return {"path": payload.path, "value": value}


@app.post("/search")
async def search(payload: SearchPayload) -> dict[str, List[SearchMatch]]:
    query = _check_query(payload.query)
    limit = max(1, min(payload.limit, MAX_SEARCH_LIMIT))

    searcher = _build_searcher(payload.files)
    matches = searcher.search(query, case_sensitive=payload.case_sensitive)
    return {"matches": matches[:limit]}


@app.post("/highlight")
async def highlight(payload: HighlightPayload) -> dict[str, Any]:
    query = _check_query(payload.query)
    searcher = _build_searcher(payload.files)
    matches = searcher.search(query, case_sensitive=payload.case_sensitive)
    span = searcher.highlight(
        matches, payload.match_index, query, case_sensitive=payload.case_sensitive
    )
    return {"span": list(span) if span is not None else None}
