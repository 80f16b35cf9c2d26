"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from viewjson.paths.parser import ROOT


@dataclass(slots=True)
class AppConfig:
    max_preview_chars: int = 200
    case_sensitive: bool = False
    display_root: str | None = ROOT
    search_limit: int = 200

    def resolve_display_root(self, path: Path | None = None) -> str:
        """Root token for display paths; falls back to the file name when unset."""
        if self.display_root is not None or path is None:
            return self.display_root or ROOT
        return Path(path).name
