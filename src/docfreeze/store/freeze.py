"""Persist computation results next to their input document."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from docfreeze.constants import INCLUDE_KINDS
from docfreeze.errors import FreezeWriteError
from docfreeze.fs import atomic_write_text
from docfreeze.hashing import input_hash
from docfreeze.schemas import ExecuteResult, FrozenRecord
from docfreeze.store.paths import freeze_result_file
from docfreeze.types import StrPath

logger = logging.getLogger(__name__)


def _read_verbatim(file: str) -> str:
    with open(file, encoding="utf-8", newline="") as handle:
        return handle.read()


def _inline_includes(result: ExecuteResult) -> None:
    if not result.includes:
        return
    for kind in INCLUDE_KINDS:
        files = result.includes.get(kind)
        if not files:
            continue
        try:
            result.includes[kind] = [_read_verbatim(file) for file in files]
        except (OSError, UnicodeDecodeError) as exc:
            raise FreezeWriteError(f"Unable to read {kind} file: {exc}") from exc


def _relative_supporting(result: ExecuteResult, anchors: tuple[Path, ...]) -> None:
    relocated: list[str] = []
    for file in result.supporting:
        path = Path(file)
        anchor = next(
            (dir for dir in anchors if path.is_absolute() and path.is_relative_to(dir)),
            None,
        )
        if anchor is None:
            relocated.append(file)
        else:
            relocated.append(path.relative_to(anchor).as_posix())
    result.supporting = relocated


def freeze_execute_result(
    input_path: StrPath,
    output: StrPath,
    result: ExecuteResult,
) -> Path:
    """Write ``result`` and the current input hash to the result store.

    The caller's ``result`` is not modified. Include files are inlined and
    supporting paths under the input directory are made relative, so the
    record stays valid when the project moves.

    Parameters
    ----------
    input_path : str | PathLike
        Source document the result was computed from.
    output : str | PathLike
        Output file (or extension) the result was computed for.
    result : ExecuteResult
        Result returned by the computation engine.

    Returns
    -------
    Path
        Path of the written record.

    Raises
    ------
    FreezeWriteError
        If an include file cannot be read or the record cannot be written.
    """
    input_path = Path(input_path)
    frozen = result.model_copy(deep=True)

    _inline_includes(frozen)
    try:
        input_dir = input_path.parent.resolve(strict=True)
        digest = input_hash(input_path)
    except OSError as exc:
        raise FreezeWriteError(f"Unable to read input {input_path}: {exc}") from exc
    # supporting files may be reported under either the real or the linked dir
    _relative_supporting(frozen, (input_dir, input_path.parent.absolute()))

    record = FrozenRecord(hash=digest, result=frozen)
    payload = json.dumps(record.model_dump(mode="json"), indent=2, ensure_ascii=False)

    try:
        record_path = freeze_result_file(input_path, output, ensure_dir=True)
        atomic_write_text(record_path, payload)
    except OSError as exc:
        raise FreezeWriteError(
            f"Unable to write frozen result for {input_path}: {exc}"
        ) from exc

    logger.debug("froze %s -> %s", os.fspath(input_path), record_path)
    return record_path
