"""Shared type aliases for the freeze cache modules."""

from __future__ import annotations

from os import PathLike
from typing import Literal

type IncludeKind = Literal[
    "include-in-header",
    "include-before-body",
    "include-after-body",
]
type FreezeMode = Literal["auto", "force", "off"]

type StrPath = str | PathLike[str]
