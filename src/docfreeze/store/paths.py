"""Result store locations for per-input records and their freezer mirrors."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path, PurePath

from docfreeze.constants import (
    FILES_DIR_SUFFIX,
    FREEZE_EXECUTE_RESULTS,
    OLD_FREEZE_EXECUTE_RESULTS,
    PROJECT_FREEZE_DIR,
    RECORD_SUFFIX,
)
from docfreeze.fs import remove_if_empty_dir, remove_if_exists
from docfreeze.project import ProjectContext
from docfreeze.types import StrPath


class StoreLayout(StrEnum):
    """Known names of the results subdirectory of a files directory.

    Only ``CURRENT`` is read and written. Older names are recognized so
    cleanup can remove them.
    """

    CURRENT = FREEZE_EXECUTE_RESULTS
    LEGACY = OLD_FREEZE_EXECUTE_RESULTS

    @classmethod
    def legacy(cls) -> tuple[StoreLayout, ...]:
        return tuple(layout for layout in cls if layout is not cls.CURRENT)


def input_files_dir(input_path: StrPath) -> str:
    """Name of the files directory that sits next to ``input_path``."""
    return f"{PurePath(input_path).stem}{FILES_DIR_SUFFIX}"


def output_extension(output: StrPath) -> str:
    """Extension used to name a record, e.g. ``html`` for ``doc.html``.

    A bare extension (``"html"`` or ``".html"``) is accepted as well.
    """
    suffix = PurePath(output).suffix
    if suffix:
        return suffix[1:]
    return str(output).lstrip(".")


def freeze_result_file(
    input_path: StrPath,
    output: StrPath,
    ensure_dir: bool = False,
) -> Path:
    """Return the record path for ``input_path`` rendered to ``output``.

    Parameters
    ----------
    input_path : str | PathLike
        Source document.
    output : str | PathLike
        Output file (or bare output extension).
    ensure_dir : bool, default=False
        Create the results directory if it does not exist.

    Returns
    -------
    Path
        ``<input dir>/<stem>_files/execute-results/<ext>.json``
    """
    input_path = Path(input_path)
    files_dir = input_path.parent / input_files_dir(input_path)
    freeze_dir = files_dir / StoreLayout.CURRENT
    if ensure_dir:
        freeze_dir.mkdir(parents=True, exist_ok=True)
    return freeze_dir / f"{output_extension(output)}{RECORD_SUFFIX}"


def remove_freeze_results(files_dir: StrPath) -> None:
    """Delete frozen results under ``files_dir`` (current and legacy layouts).

    ``files_dir`` itself is removed when nothing else is left in it.
    """
    files_dir = Path(files_dir)
    remove_if_exists(files_dir / StoreLayout.CURRENT)
    for layout in StoreLayout.legacy():
        remove_if_exists(files_dir / layout)
    if files_dir.exists():
        remove_if_empty_dir(files_dir)


def as_freezer_dir(files_dir: StrPath) -> str:
    """Freezer subpath for a files dir: the ``_files`` suffix is dropped."""
    text = PurePath(files_dir).as_posix()
    if text.endswith(FILES_DIR_SUFFIX):
        return text[: -len(FILES_DIR_SUFFIX)]
    return text


def _project_relative(project: ProjectContext, path: StrPath) -> PurePath:
    path = PurePath(path)
    if path.is_absolute():
        return path.relative_to(project.dir)
    return path


def freezer_freeze_file(project: ProjectContext, freeze_file: StrPath) -> Path:
    """Visible freezer location mirroring the record at ``freeze_file``."""
    freeze_file = _project_relative(project, freeze_file)
    files_dir = as_freezer_dir(freeze_file.parent.parent)
    return (
        project.dir
        / PROJECT_FREEZE_DIR
        / files_dir
        / StoreLayout.CURRENT
        / freeze_file.name
    )


def freezer_figs_dir(
    project: ProjectContext,
    files_dir: StrPath,
    figs_dir: str,
) -> Path:
    """Visible freezer location of a figures subdirectory."""
    files_dir = _project_relative(project, files_dir)
    return project.dir / PROJECT_FREEZE_DIR / as_freezer_dir(files_dir) / figs_dir
