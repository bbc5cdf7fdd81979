"""Application use-cases orchestrating execute, freeze and convert."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import ExitStack
from pathlib import Path, PurePath

from pydantic import ValidationError

from docfreeze.application.options import FreezeOptions, RenderOptions
from docfreeze.application.ports import ComputationEngine, DocumentConverter
from docfreeze.application.results import RenderResult
from docfreeze.errors import FreezerError, InvalidResultError
from docfreeze.project import ProjectContext
from docfreeze.schemas import ExecuteResult
from docfreeze.store.defrost import defrost_execute_result
from docfreeze.store.freeze import freeze_execute_result
from docfreeze.store.freezer import (
    copy_from_project_freezer,
    copy_to_project_freezer,
    prune_project_freezer,
)
from docfreeze.store.paths import (
    freeze_result_file,
    input_files_dir,
    remove_freeze_results,
)
from docfreeze.temp import TempFileAllocator
from docfreeze.types import FreezeMode

logger = logging.getLogger(__name__)


def _best_effort(action: Callable[..., object], *args: object) -> None:
    try:
        action(*args)
    except FreezerError as exc:
        logger.warning("freezer bookkeeping failed: %s", exc)


def _project_files_dir(
    project: ProjectContext | None, input_path: Path
) -> PurePath | None:
    """Files dir of ``input_path`` relative to the project root, if inside it."""
    if project is None:
        return None
    input_dir = input_path.resolve().parent
    project_dir = project.dir.resolve()
    if not input_dir.is_relative_to(project_dir):
        logger.debug("%s is outside project %s", input_path, project.dir)
        return None
    return input_dir.relative_to(project_dir) / input_files_dir(input_path)


def _validated_result(raw: ExecuteResult | Mapping[str, object]) -> ExecuteResult:
    if isinstance(raw, ExecuteResult):
        return raw
    try:
        return ExecuteResult.model_validate(raw)
    except ValidationError as exc:
        raise InvalidResultError(f"Invalid computation result: {exc}") from exc


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
    """Use-case: render one input, reusing its frozen result when valid.

    Include files materialized from a frozen record live only until this
    call returns, unless the caller passes its own ``temp`` allocator.

    Raises
    ------
    FreezeWriteError
        If a freshly computed result cannot be persisted.
    InvalidResultError
        If the engine returns a malformed result.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    freeze = options.freeze
    caching = freeze.mode != "off"
    files_dir = _project_files_dir(project, input_path) if options.use_freezer else None

    if (
        caching
        and project is not None
        and files_dir is not None
        and not freeze_result_file(input_path, output_path).exists()
    ):
        _best_effort(copy_from_project_freezer, project, files_dir, freeze.hidden)

    with ExitStack() as stack:
        if temp is None:
            temp = stack.enter_context(TempFileAllocator())

        result = None
        record_path = None
        if caching:
            result = defrost_execute_result(
                input_path,
                output_path,
                force=freeze.mode == "force",
                temp=temp,
            )
        from_cache = result is not None

        if result is not None:
            record_path = freeze_result_file(input_path, output_path)
            logger.info("using frozen result for %s", input_path)
        else:
            result = _validated_result(engine.execute(input_path, output_path))
            if caching:
                record_path = freeze_execute_result(input_path, output_path, result)
                if project is not None and files_dir is not None:
                    _best_effort(
                        copy_to_project_freezer,
                        project,
                        files_dir,
                        freeze.hidden,
                        freeze.incremental,
                    )

        out_path = converter.convert(input_path, output_path, result)

    return RenderResult(
        output_path=out_path,
        source_path=input_path,
        result=result,
        from_cache=from_cache,
        record_path=record_path,
    )


def clean_freeze_results(input_path: Path) -> None:
    """Use-case: delete the per-input result store of ``input_path``."""
    input_path = Path(input_path)
    remove_freeze_results(input_path.parent / input_files_dir(input_path))


def prune_freezer(project: ProjectContext, hidden: bool) -> None:
    """Use-case: collapse an unused project freezer (best effort)."""
    _best_effort(prune_project_freezer, project, hidden)


def build_render_options(
    *,
    freeze: FreezeMode = "auto",
    hidden: bool = True,
    incremental: bool = False,
    use_freezer: bool = True,
) -> RenderOptions:
    """Build typed option object from API params."""
    return RenderOptions(
        freeze=FreezeOptions(mode=freeze, hidden=hidden, incremental=incremental),
        use_freezer=use_freezer,
    )


def render_options_for_project(
    project: ProjectContext,
    *,
    hidden: bool = True,
    incremental: bool = False,
) -> RenderOptions:
    """Build render options from the project's ``execute.freeze`` setting."""
    mode: FreezeMode = "auto"
    if project.config is not None:
        mode = project.config.execute.freeze_mode
    return build_render_options(freeze=mode, hidden=hidden, incremental=incremental)
