"""Resolve logical page references to concrete files."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from spec_txt._constants import DEFAULT_EXTENSIONS

if typ.TYPE_CHECKING:
    from spec_txt.navigation import PageRef

    from .sources import DocumentSource


class PathResolver:
    """Probe candidate file names for a page and return the first that exists."""

    def __init__(
        self,
        source: DocumentSource,
        *,
        extensions: cabc.Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.source = source
        self.extensions = tuple(extensions)

    def candidates(self, page: PageRef) -> cabc.Iterator[Path]:
        """Yield candidate paths lazily: each extension, then the bare path."""
        base = page.base_path
        for extension in self.extensions:
            yield Path(f"{base}{extension}")
        yield base

    def resolve(self, page: PageRef) -> Path | None:
        """Return the first existing candidate for ``page`` or ``None``."""
        return next(
            (path for path in self.candidates(page) if self.source.exists(path)), None
        )


__all__ = ["PathResolver"]
