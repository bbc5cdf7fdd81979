"""Content digests used to detect stale frozen results."""

from __future__ import annotations

from hashlib import md5
from pathlib import Path


def md5_hash(data: bytes | str) -> str:
    """Compute the MD5 hex digest of a byte or text payload.

    Text is encoded as UTF-8 first, so ``md5_hash("A") == md5_hash(b"A")``.
    The digest is used for change detection only.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return md5(data, usedforsecurity=False).hexdigest()


def digest_file(path: Path, *, chunk_size: int = 1 << 20) -> str:
    """Compute the MD5 digest of a file without loading it at once."""
    hasher = md5(usedforsecurity=False)
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            hasher.update(chunk)
    return hasher.hexdigest()


def input_hash(input_path: Path) -> str:
    """Return the digest of an input document's current bytes."""
    return digest_file(Path(input_path))
