"""Dataclasses describing the navigation tree and flattened page references."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class LeafPage:
    """A single document reference as written in the navigation config."""

    reference: str


@dc.dataclass(frozen=True, slots=True)
class SubGroup:
    """A labelled, ordered collection of nested navigation nodes."""

    label: str | None
    children: tuple[PageTreeNode, ...] = ()


PageTreeNode = LeafPage | SubGroup


@dc.dataclass(frozen=True, slots=True)
class Group:
    """Named collection within a tab; versioned groups carry a date token."""

    label: str
    pages: tuple[PageTreeNode, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Tab:
    """Top-level navigation section such as ``Specification``."""

    label: str
    groups: tuple[Group, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Ordered tabs parsed from the navigation document."""

    tabs: tuple[Tab, ...] = ()

    def find_tab(self, label: str) -> Tab | None:
        """Return the first tab whose label matches ``label`` case-insensitively."""
        wanted = label.casefold()
        return next((tab for tab in self.tabs if tab.label.casefold() == wanted), None)


@dc.dataclass(frozen=True, slots=True)
class SelectedVersion:
    """The group chosen as the current specification version.

    Attributes
    ----------
    version : str
        Date token extracted from the group label.
    group : Group
        Navigation group whose pages will be aggregated.
    considered : tuple[str, ...]
        Every version token found in the tab, in authoring order.
    """

    version: str
    group: Group
    considered: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PageRef:
    """A logical page reference produced by flattening the navigation tree.

    Attributes
    ----------
    reference : str
        Raw navigation entry, used when reporting misses.
    root : Path
        Directory the logical path is relative to.
    logical_path : str
        POSIX path of the document without an extension.
    """

    reference: str
    root: Path
    logical_path: str

    @property
    def base_path(self) -> Path:
        """Return the filesystem path the candidate extensions are appended to."""
        return self.root / self.logical_path


__all__ = [
    "Group",
    "LeafPage",
    "NavigationConfig",
    "PageRef",
    "PageTreeNode",
    "SelectedVersion",
    "SubGroup",
    "Tab",
]
