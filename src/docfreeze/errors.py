"""Exception types raised by the freeze cache."""

from __future__ import annotations


class DocFreezeError(Exception):
    """Base class for all docfreeze errors."""


class FreezeWriteError(DocFreezeError):
    """Raised when a computation result cannot be persisted."""


class FreezerError(DocFreezeError):
    """Raised when copying into, out of, or pruning the project freezer fails."""


class InvalidResultError(DocFreezeError):
    """Raised when a computation engine returns a malformed result."""


class ProjectConfigError(DocFreezeError):
    """Raised when the project configuration file is invalid."""
