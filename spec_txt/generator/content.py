r"""Normalize document text before aggregation.

A frontmatter block is removed only when it starts at offset zero: an opening
``---`` line, any metadata lines, and a closing ``---`` line plus the newline
that follows it. The remainder is trimmed of surrounding whitespace and is
otherwise left untouched.

Example
-------
>>> from spec_txt.generator.content import strip_frontmatter
>>> strip_frontmatter("---\ntitle: Lifecycle\n---\n\nBody text\n")
'Body text'
>>> strip_frontmatter("Body\n---\nnot: metadata\n---\n")
'Body\n---\nnot: metadata\n---'
"""

from __future__ import annotations

import re
import typing as typ

from spec_txt._constants import FRONTMATTER_MARKER

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .sources import DocumentSource

_MARKER = re.escape(FRONTMATTER_MARKER)
FRONTMATTER_PATTERN = re.compile(
    rf"\A{_MARKER}[ \t]*\r?\n(?:.*?\r?\n)??{_MARKER}[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


def strip_frontmatter(text: str) -> str:
    """Return ``text`` without a leading frontmatter block, trimmed."""
    match = FRONTMATTER_PATTERN.match(text)
    body = text[match.end() :] if match else text
    return body.strip()


class ContentLoader:
    """Read documents through a :class:`DocumentSource` and normalize them."""

    def __init__(self, source: DocumentSource) -> None:
        self.source = source

    def load(self, path: Path) -> str:
        """Return the normalized body of the document at ``path``.

        Raises
        ------
        OSError
            Propagated from the source when the file cannot be read.
        UnicodeDecodeError
            Propagated when the file is not valid UTF-8.
        """
        return strip_frontmatter(self.source.read_text(path))


__all__ = ["FRONTMATTER_PATTERN", "ContentLoader", "strip_frontmatter"]
