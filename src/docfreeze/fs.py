"""Filesystem helpers for the result store and the project freezer."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from uuid import uuid4

from docfreeze.hashing import digest_file


def _atomic_temp_path(target_path: Path) -> Path:
    """Create a temp path in the same directory for atomic replacement."""
    return target_path.parent / f".{target_path.name}.{uuid4().hex}.tmp"


def atomic_write_text(target_path: Path, text: str) -> Path:
    """Write ``text`` to ``target_path`` via a sibling temp file and rename.

    A failed write leaves any previous file at ``target_path`` untouched.

    Raises
    ------
    OSError
        If the temp file cannot be written or renamed into place.
    """
    temp_path = _atomic_temp_path(target_path)
    try:
        with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, target_path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    return target_path


def _same_file_state(src: Path, dest: Path) -> bool:
    try:
        src_stat = src.stat()
        dest_stat = dest.stat()
    except FileNotFoundError:
        return False
    if src_stat.st_size != dest_stat.st_size:
        return False
    return digest_file(src) == digest_file(dest)


def copy_minimal(src: Path, dest: Path) -> None:
    """Copy a file or directory tree, skipping files already up to date.

    Existing destination files are overwritten unless their contents
    already match the source. Destination entries with no source
    counterpart are left alone.
    """
    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for entry in src.iterdir():
            copy_minimal(entry, dest / entry.name)
        return

    if _same_file_state(src, dest):
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dest)


def remove_if_exists(path: Path) -> None:
    """Remove a file or directory tree if present."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()


def remove_if_empty_dir(path: Path) -> bool:
    """Remove ``path`` when it is an existing, empty directory.

    Returns
    -------
    bool
        ``True`` if the directory was removed.
    """
    if path.is_dir() and not any(path.iterdir()):
        path.rmdir()
        return True
    return False
