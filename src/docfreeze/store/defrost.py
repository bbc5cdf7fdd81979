"""Restore frozen computation results for an unchanged input document."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from docfreeze.constants import INCLUDE_KINDS
from docfreeze.hashing import input_hash
from docfreeze.schemas import ExecuteResult, FrozenRecord
from docfreeze.store.paths import freeze_result_file
from docfreeze.temp import TempFileAllocator, session_temp
from docfreeze.types import StrPath

logger = logging.getLogger(__name__)


def read_frozen_record(record_path: Path) -> FrozenRecord | None:
    """Parse a record file, returning ``None`` if it is missing or unusable."""
    try:
        text = record_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.warning("ignoring unreadable frozen result %s: %s", record_path, exc)
        return None
    try:
        return FrozenRecord.model_validate(json.loads(text))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
        logger.warning("ignoring corrupt frozen result %s: %s", record_path, exc)
        return None


def defrost_execute_result(
    input_path: StrPath,
    output: StrPath,
    force: bool = False,
    temp: TempFileAllocator | None = None,
) -> ExecuteResult | None:
    """Load the frozen result for ``input_path`` if it is still valid.

    Parameters
    ----------
    input_path : str | PathLike
        Source document.
    output : str | PathLike
        Output file (or extension) the result was frozen for.
    force : bool, default=False
        Use the record even when the input has changed since it was frozen.
    temp : TempFileAllocator | None, default=None
        Allocator for materialized include files. Defaults to the session
        allocator.

    Returns
    -------
    ExecuteResult | None
        The restored result, or ``None`` when there is no usable record
        and the caller has to recompute.
    """
    input_path = Path(input_path)
    record_path = freeze_result_file(input_path, output)
    record = read_frozen_record(record_path)
    if record is None:
        return None

    if not force and record.hash != input_hash(input_path):
        logger.debug("frozen result %s is stale", record_path)
        return None

    result = record.result
    input_dir = input_path.parent.resolve()
    result.supporting = [str(input_dir / file) for file in result.supporting]

    if result.includes:
        temp = temp or session_temp()
        for kind in INCLUDE_KINDS:
            contents = result.includes.get(kind)
            if contents:
                result.includes[kind] = [
                    str(temp.write_text(content)) for content in contents
                ]

    logger.debug("defrosted %s from %s", input_path, record_path)
    return result
