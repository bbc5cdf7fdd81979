"""Top-level API for the docfreeze computation-result cache."""

from __future__ import annotations

from pathlib import Path

from docfreeze.schemas import ExecuteResult, FrozenRecord
from docfreeze.temp import TempFileAllocator
from docfreeze.types import StrPath

__version__ = "0.1.0"


def freeze(input_path: StrPath, output: StrPath, result: ExecuteResult) -> Path:
    """Persist ``result`` for ``input_path`` rendered to ``output``.

    Parameters
    ----------
    input_path : str | PathLike
        Source document.
    output : str | PathLike
        Output file, or bare output extension such as ``"html"``.
    result : ExecuteResult
        Computation result to persist. It is not modified.

    Returns
    -------
    Path
        Path to the written record.
    """
    from .store.freeze import freeze_execute_result as _impl

    return _impl(input_path, output, result)


def defrost(
    input_path: StrPath,
    output: StrPath,
    force: bool = False,
    temp: TempFileAllocator | None = None,
) -> ExecuteResult | None:
    """Restore the frozen result for ``input_path`` if still valid.

    Parameters
    ----------
    input_path : str | PathLike
        Source document.
    output : str | PathLike
        Output file, or bare output extension.
    force : bool, default=False
        Ignore input changes since the result was frozen.
    temp : TempFileAllocator, optional
        Owner of materialized include files.

    Returns
    -------
    ExecuteResult | None
        ``None`` when the caller must recompute.
    """
    from .store.defrost import defrost_execute_result as _impl

    return _impl(input_path, output, force=force, temp=temp)


__all__ = [
    "ExecuteResult",
    "FrozenRecord",
    "TempFileAllocator",
    "defrost",
    "freeze",
]
