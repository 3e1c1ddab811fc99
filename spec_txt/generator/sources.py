"""Filesystem access used by the resolver and content loader.

Components receive a :class:`DocumentSource` instead of touching the
filesystem directly, so tests can serve documents from memory.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class DocumentSource(typ.Protocol):
    """Read-only view over the documents being aggregated."""

    def exists(self, path: Path) -> bool:
        """Return True when ``path`` names an existing file."""
        ...

    def read_text(self, path: Path) -> str:
        """Return the UTF-8 text stored at ``path``."""
        ...


class LocalDocumentSource:
    """Serve documents from the local filesystem."""

    def exists(self, path: Path) -> bool:
        """Return True when ``path`` is a regular file."""
        return path.is_file()

    def read_text(self, path: Path) -> str:
        """Read ``path`` as UTF-8 text."""
        return path.read_text(encoding="utf-8")


__all__ = ["DocumentSource", "LocalDocumentSource"]
