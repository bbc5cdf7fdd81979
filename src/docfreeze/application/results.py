"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from docfreeze.schemas import ExecuteResult


@dataclass(frozen=True)
class RenderResult:
    """Structured render outcome."""

    output_path: Path
    source_path: Path
    result: ExecuteResult
    from_cache: bool
    record_path: Path | None = None
