"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from docfreeze.schemas import ExecuteResult


class ComputationEngine(Protocol):
    """Execute code embedded in a document."""

    def execute(self, input_path: Path, output_path: Path) -> ExecuteResult:
        """Run the document's computations and return their result."""


class DocumentConverter(Protocol):
    """Convert a document plus its computation result into rendered output."""

    def convert(
        self,
        input_path: Path,
        output_path: Path,
        result: ExecuteResult,
    ) -> Path:
        """Render and return the written output path."""
