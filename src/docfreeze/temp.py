"""Scoped temporary files for materializing frozen include content."""

from __future__ import annotations

import atexit
from pathlib import Path
from tempfile import TemporaryDirectory
from types import TracebackType
from uuid import uuid4


class TempFileAllocator:
    """Allocate temp files under one directory removed on ``cleanup``.

    Use as a context manager to tie the files to a single render::

        with TempFileAllocator() as temp:
            result = defrost_execute_result(input, output, temp=temp)
            converter.convert(input, output, result)
    """

    def __init__(self, prefix: str = "docfreeze-") -> None:
        self._prefix = prefix
        self._tmp: TemporaryDirectory[str] | None = None

    @property
    def dir(self) -> Path:
        """Backing directory, created on first use."""
        if self._tmp is None:
            self._tmp = TemporaryDirectory(prefix=self._prefix)
        return Path(self._tmp.name)

    def temp_file(self, suffix: str = "") -> Path:
        """Return a fresh, not yet existing path inside the allocator dir."""
        return self.dir / f"{uuid4().hex}{suffix}"

    def write_text(self, content: str, suffix: str = "") -> Path:
        """Write ``content`` verbatim to a fresh temp file and return its path."""
        path = self.temp_file(suffix)
        path.write_text(content, encoding="utf-8", newline="")
        return path

    def cleanup(self) -> None:
        """Remove every file handed out so far."""
        if self._tmp is not None:
            self._tmp.cleanup()
            self._tmp = None

    def __enter__(self) -> TempFileAllocator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        del exc_type, exc, tb
        self.cleanup()


_session: TempFileAllocator | None = None


def session_temp() -> TempFileAllocator:
    """Return the process-wide allocator, cleaned up at interpreter exit."""
    global _session
    if _session is None:
        _session = TempFileAllocator(prefix="docfreeze-session-")
        atexit.register(_session.cleanup)
    return _session
