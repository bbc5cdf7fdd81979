"""Project freezer: durable mirror of per-input result stores."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from docfreeze.constants import PROJECT_FREEZE_DIR
from docfreeze.errors import FreezerError
from docfreeze.fs import copy_minimal, remove_if_empty_dir, remove_if_exists
from docfreeze.project import ProjectContext
from docfreeze.store.paths import StoreLayout, as_freezer_dir
from docfreeze.types import StrPath

logger = logging.getLogger(__name__)


def project_freezer_dir(project_dir: Path, hidden: bool) -> Path:
    """Return the real path of the freezer root, creating it if needed.

    Parameters
    ----------
    project_dir : Path
        Project root.
    hidden : bool
        Use the project scratch area instead of ``<project>/_freeze``.
    """
    project_dir = Path(project_dir)
    if hidden:
        freeze_dir = ProjectContext(dir=project_dir).scratch_path(PROJECT_FREEZE_DIR)
    else:
        freeze_dir = project_dir / PROJECT_FREEZE_DIR
        freeze_dir.mkdir(parents=True, exist_ok=True)
    return freeze_dir.resolve()


def copy_to_project_freezer(
    project: ProjectContext,
    files_dir: StrPath,
    hidden: bool,
    incremental: bool,
) -> None:
    """Copy ``<project>/<files_dir>`` into the freezer.

    In incremental mode record files are copied one by one, so freezer
    records for other output formats are kept. Other subdirectories are
    copied wholesale in both modes.

    Raises
    ------
    FreezerError
        If the copy fails.
    """
    src_files_dir = project.dir / files_dir
    try:
        dest_files_dir = project_freezer_dir(project.dir, hidden) / as_freezer_dir(
            files_dir
        )
        if not incremental:
            copy_minimal(src_files_dir, dest_files_dir)
            return

        for entry in src_files_dir.iterdir():
            if entry.name != StoreLayout.CURRENT:
                copy_minimal(entry, dest_files_dir / entry.name)
                continue
            dest_results_dir = dest_files_dir / StoreLayout.CURRENT
            dest_results_dir.mkdir(parents=True, exist_ok=True)
            for record in entry.iterdir():
                if record.is_file():
                    shutil.copyfile(record, dest_results_dir / record.name)
    except OSError as exc:
        raise FreezerError(
            f"Unable to copy {src_files_dir} into the project freezer: {exc}"
        ) from exc
    logger.debug(
        "copied %s into freezer (incremental=%s)", src_files_dir, incremental
    )


def copy_from_project_freezer(
    project: ProjectContext,
    files_dir: StrPath,
    hidden: bool,
) -> bool:
    """Seed ``<project>/<files_dir>`` from the freezer when a mirror exists.

    Returns
    -------
    bool
        ``True`` if anything was copied.
    """
    try:
        src_files_dir = project_freezer_dir(project.dir, hidden) / as_freezer_dir(
            files_dir
        )
        if not src_files_dir.exists():
            return False
        copy_minimal(src_files_dir, project.dir / files_dir)
    except OSError as exc:
        raise FreezerError(
            f"Unable to copy {files_dir} out of the project freezer: {exc}"
        ) from exc
    logger.debug("restored %s from freezer", files_dir)
    return True


def prune_project_freezer_dir(
    project: ProjectContext,
    dir: StrPath,
    files: Iterable[str],
    hidden: bool,
) -> None:
    """Remove ``files`` from ``<freezer>/<dir>``, then ``dir`` if it is empty."""
    try:
        freezer_dir = project_freezer_dir(project.dir, hidden)
        target_dir = freezer_dir / dir
        for file in files:
            remove_if_exists(target_dir / file)
        remove_if_empty_dir(target_dir)
    except OSError as exc:
        raise FreezerError(f"Unable to prune freezer dir {dir}: {exc}") from exc


def prune_project_freezer(project: ProjectContext, hidden: bool) -> None:
    """Remove the freezer root when it holds nothing worth keeping.

    With a project ``lib-dir`` the root is removed if its only entry is that
    directory. Otherwise it is removed only when empty.
    """
    try:
        freezer_dir = project_freezer_dir(project.dir, hidden)
        lib_dir = project.lib_dir
        if not lib_dir:
            remove_if_empty_dir(freezer_dir)
            return

        remove = all(
            entry.is_dir() and entry.name == lib_dir
            for entry in freezer_dir.iterdir()
        )
        if remove:
            remove_if_exists(freezer_dir)
    except OSError as exc:
        raise FreezerError(f"Unable to prune project freezer: {exc}") from exc
