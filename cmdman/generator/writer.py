"""Persist rendered man pages to disk."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


def write_page(path: Path, payload: bytes) -> Path:
    """Create or truncate ``path`` and write ``payload`` to it.

    The handle is closed on every exit path; ``OSError`` from opening or
    writing propagates unchanged and may leave a partially written file.
    """
    with path.open("wb") as handle:
        handle.write(payload)
    return path


__all__ = ["write_page"]
