"""Typed option objects shared across render use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from docfreeze.types import FreezeMode


@dataclass(frozen=True)
class FreezeOptions:
    """Freeze cache configuration for one render."""

    mode: FreezeMode = "auto"
    hidden: bool = True
    incremental: bool = False


@dataclass(frozen=True)
class RenderOptions:
    """Options passed through render use-cases."""

    freeze: FreezeOptions = FreezeOptions()
    use_freezer: bool = True
