"""Flatten a version's page tree into ordered logical page references."""

from __future__ import annotations

import collections.abc as cabc
import posixpath
from pathlib import Path

from .models import LeafPage, PageRef, PageTreeNode, SubGroup

ROOT_MARKER = "/"


def flatten_pages(
    nodes: cabc.Iterable[PageTreeNode],
    *,
    docs_root: Path,
    spec_root: Path,
    prefix: str = "",
) -> list[PageRef]:
    """Return page references in depth-first, pre-order navigation order.

    Parameters
    ----------
    nodes : Iterable[PageTreeNode]
        Leaf pages and sub-groups of the selected version group.
    docs_root : Path
        Base directory for references relative to the docs namespace.
    spec_root : Path
        Base directory that replaces the leading ``/`` of rooted references.
    prefix : str, optional
        Path prefix joined onto relative references.

    Returns
    -------
    list[PageRef]
        One entry per leaf page; sub-group pages appear contiguously at the
        position the sub-group occupies among its siblings.
    """
    refs: list[PageRef] = []
    for node in nodes:
        match node:
            case LeafPage(reference=reference):
                refs.append(
                    _to_page_ref(
                        reference, docs_root=docs_root, spec_root=spec_root, prefix=prefix
                    )
                )
            case SubGroup(children=children):
                refs.extend(
                    flatten_pages(
                        children, docs_root=docs_root, spec_root=spec_root, prefix=prefix
                    )
                )
    return refs


def _to_page_ref(
    reference: str, *, docs_root: Path, spec_root: Path, prefix: str
) -> PageRef:
    """Map a raw navigation entry onto its root directory and logical path."""
    if reference.startswith(ROOT_MARKER):
        return PageRef(
            reference=reference,
            root=spec_root,
            logical_path=reference[len(ROOT_MARKER) :],
        )
    logical_path = posixpath.join(prefix, reference) if prefix else reference
    return PageRef(reference=reference, root=docs_root, logical_path=logical_path)


__all__ = ["ROOT_MARKER", "flatten_pages"]
