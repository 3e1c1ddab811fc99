"""Decode the Mintlify-style ``docs.json`` navigation document.

The document is decoded with :mod:`msgspec` into permissive raw structs
(unknown keys are ignored) and then converted into the immutable dataclasses
in :mod:`spec_txt.navigation.models`.

Example
-------
>>> from spec_txt.navigation.loader import parse_navigation
>>> nav = parse_navigation(
...     b'{"navigation": {"tabs": [{"tab": "Specification", "groups": []}]}}'
... )
>>> nav.tabs[0].label
'Specification'
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json

from spec_txt.config import ConfigurationError

from .models import Group, LeafPage, NavigationConfig, PageTreeNode, SubGroup, Tab

if typ.TYPE_CHECKING:
    from pathlib import Path


class _RawPageGroup(msgspec.Struct):
    group: str | None = None
    pages: list[str | _RawPageGroup] = msgspec.field(default_factory=list)


class _RawGroup(msgspec.Struct):
    group: str
    pages: list[str | _RawPageGroup] = msgspec.field(default_factory=list)


class _RawTab(msgspec.Struct):
    tab: str
    groups: list[_RawGroup] = msgspec.field(default_factory=list)


class _RawNavigation(msgspec.Struct):
    tabs: list[_RawTab]


class _RawDocsConfig(msgspec.Struct):
    navigation: _RawNavigation


def parse_navigation(payload: bytes | str, *, source: str = "<memory>") -> NavigationConfig:
    """Decode a navigation document into a :class:`NavigationConfig`.

    Parameters
    ----------
    payload : bytes or str
        Raw JSON text of the navigation document.
    source : str, optional
        Label used in error messages, typically the file path.

    Returns
    -------
    NavigationConfig
        Tabs, groups, and page trees in authoring order.

    Raises
    ------
    ConfigurationError
        If the payload is not valid JSON or does not match the expected shape.
    """
    try:
        raw = msgspec_json.decode(payload, type=_RawDocsConfig)
    except msgspec.DecodeError as exc:
        msg = f"Invalid navigation config '{source}': {exc}"
        raise ConfigurationError(msg) from exc
    return NavigationConfig(tabs=tuple(_convert_tab(tab) for tab in raw.navigation.tabs))


def load_navigation(path: Path) -> NavigationConfig:
    """Read and decode the navigation document stored at ``path``."""
    try:
        payload = path.read_bytes()
    except FileNotFoundError as exc:
        msg = f"Navigation config '{path}' not found."
        raise ConfigurationError(msg) from exc
    return parse_navigation(payload, source=str(path))


def _convert_tab(raw: _RawTab) -> Tab:
    return Tab(
        label=raw.tab,
        groups=tuple(
            Group(label=group.group, pages=_convert_pages(group.pages))
            for group in raw.groups
        ),
    )


def _convert_pages(items: list[str | _RawPageGroup]) -> tuple[PageTreeNode, ...]:
    nodes: list[PageTreeNode] = []
    for item in items:
        match item:
            case str() as reference:
                nodes.append(LeafPage(reference=reference))
            case _RawPageGroup(group=label, pages=pages):
                nodes.append(SubGroup(label=label, children=_convert_pages(pages)))
    return tuple(nodes)


__all__ = ["load_navigation", "parse_navigation"]
