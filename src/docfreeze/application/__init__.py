"""Application layer: options, ports and render use-cases."""

from __future__ import annotations

from pathlib import Path

from docfreeze.application.options import FreezeOptions, RenderOptions
from docfreeze.application.ports import ComputationEngine, DocumentConverter
from docfreeze.application.results import RenderResult
from docfreeze.project import ProjectContext
from docfreeze.temp import TempFileAllocator
from docfreeze.types import FreezeMode


def build_render_options(
    *,
    freeze: FreezeMode = "auto",
    hidden: bool = True,
    incremental: bool = False,
    use_freezer: bool = True,
) -> RenderOptions:
    """Build typed render options via lazy use-case import."""
    from docfreeze.application.use_cases import build_render_options as _impl

    return _impl(
        freeze=freeze,
        hidden=hidden,
        incremental=incremental,
        use_freezer=use_freezer,
    )


def render_input(
    *,
    input_path: Path,
    output_path: Path,
    engine: ComputationEngine,
    converter: DocumentConverter,
    options: RenderOptions,
    project: ProjectContext | None = None,
    temp: TempFileAllocator | None = None,
) -> RenderResult:
    """Render one input via lazy use-case import."""
    from docfreeze.application.use_cases import render_input as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        engine=engine,
        converter=converter,
        options=options,
        project=project,
        temp=temp,
    )


__all__ = [
    "ComputationEngine",
    "DocumentConverter",
    "FreezeOptions",
    "RenderOptions",
    "RenderResult",
    "build_render_options",
    "render_input",
]
