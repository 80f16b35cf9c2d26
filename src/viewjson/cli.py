"""Command line interface for viewjson."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from viewjson.config import AppConfig
from viewjson.index.store import StoredDocument
from viewjson.ingestion.json_loader import DocumentLoadError, load_document
from viewjson.models import NodeRecord, Span
from viewjson.search.searcher import Searcher
from viewjson.tree.walker import iter_document_records
from viewjson.utils.files import iter_json_paths
from viewjson.web.app import app as web_app

LOGGER = logging.getLogger(__name__)

console = Console()
app = typer.Typer(help="viewjson - browse, address and search JSON documents")

_MISSING = object()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load(path: Path) -> StoredDocument:
    try:
        return load_document(path)
    except DocumentLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _collect_records(
    inputs: List[Path], config: AppConfig
) -> Tuple[List[NodeRecord], List[Path]]:
    records: List[NodeRecord] = []
    paths = list(iter_json_paths(inputs))
    for doc_id, path in enumerate(paths):
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
    return records, paths


def _highlighted(preview: str, span: Optional[Span]) -> Text:
    text = Text(preview.replace("\n", " "))
    if span is not None:
        text.stylize("bold black on yellow", span[0], span[1])
    return text


@app.command()
def tree(
    inputs: List[Path] = typer.Argument(..., help="JSON/JSONL files or directories.", resolve_path=True),
    root: Optional[str] = typer.Option(None, "--root", help="Display root; defaults to the file name"),
    max_preview: int = typer.Option(AppConfig().max_preview_chars, help="Preview length in characters"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List every node of the given documents."""
    _setup_logging(verbose)
    config = AppConfig(max_preview_chars=max_preview, display_root=root)
    records, paths = _collect_records(inputs, config)
    if not paths:
        console.print("[yellow]No JSON files found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Path")
    table.add_column("Name")
    table.add_column("Preview")
    for record in records:
        table.add_row(record.display_path, record.name, record.preview.replace("\n", " "))
    console.print(table)


@app.command()
def get(
    file: Path = typer.Argument(..., help="JSON or JSONL file", exists=True, dir_okay=False),
    path: str = typer.Argument(..., help="Path such as $.items[0][\"my key\"]"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the value addressed by a path."""
    _setup_logging(verbose)
    document = _load(file)
    value = document.lookup_value(path, _MISSING)
    if value is _MISSING:
        console.print(f"[yellow]Path does not exist: {path}[/yellow]")
        raise typer.Exit(code=1)
    console.print_json(json.dumps(value, ensure_ascii=False))


@app.command()
def search(
    query: str = typer.Argument(..., help="Literal text to find"),
    inputs: List[Path] = typer.Argument(..., help="JSON/JSONL files or directories.", resolve_path=True),
    case_sensitive: bool = typer.Option(AppConfig().case_sensitive, "--case-sensitive", help="Match case"),
    limit: int = typer.Option(AppConfig().search_limit, help="Number of matches to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find keys and values containing the query."""
    _setup_logging(verbose)
    if not query.strip():
        raise typer.BadParameter("Empty query")

    config = AppConfig(case_sensitive=case_sensitive, display_root=None)
    records, _ = _collect_records(inputs, config)
    searcher = Searcher(records)
    matches = searcher.search(query, case_sensitive=config.case_sensitive)
    if not matches:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#")
    table.add_column("Path")
    table.add_column("Kind")
    table.add_column("Preview")
    limit = max(limit, 1)
    for match in matches[:limit]:
        span = searcher.highlight(matches, match.index, query, case_sensitive=config.case_sensitive)
        table.add_row(
            str(match.index),
            match.display_path,
            "key" if match.is_key_match else "value",
            _highlighted(match.preview, span),
        )
    console.print(table)
    if len(matches) > limit:
        console.print(f"Showing {limit} of {len(matches)} matches.")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the JSON API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web API on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
