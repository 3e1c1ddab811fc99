"""Shared fixtures for spec_txt tests.

``MemorySource`` implements the ``DocumentSource`` protocol over a dict so the
resolver, loader, and aggregator can be exercised without touching disk. The
``spec_tree`` fixture writes a small docs tree under ``tmp_path`` for the
end-to-end tests.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class MemorySource:
    """In-memory ``DocumentSource`` keyed by POSIX path strings."""

    def __init__(self, files: cabc.Mapping[str, str] | None = None) -> None:
        self.files: dict[str, str] = dict(files or {})
        self.probed: list[str] = []
        self.errors: dict[str, Exception] = {}

    def exists(self, path: Path) -> bool:
        key = path.as_posix()
        self.probed.append(key)
        return key in self.files

    def read_text(self, path: Path) -> str:
        key = path.as_posix()
        if key in self.errors:
            raise self.errors[key]
        try:
            return self.files[key]
        except KeyError as exc:
            raise FileNotFoundError(key) from exc


def _docs_json(groups: list[dict[str, typ.Any]], *, tab: str = "Specification") -> str:
    """Return a navigation document with a single tab holding ``groups``."""
    return json.dumps({"navigation": {"tabs": [{"tab": tab, "groups": groups}]}})


@pytest.fixture
def memory_source() -> MemorySource:
    """Return an empty in-memory document source."""
    return MemorySource()


@pytest.fixture
def nav_document() -> cabc.Callable[..., str]:
    """Return a helper that renders a single-tab navigation document."""
    return _docs_json


@pytest.fixture
def spec_tree(tmp_path: Path) -> Path:
    """Write a navigation document and two spec pages; return the tree root."""
    docs = tmp_path / "docs"
    spec = docs / "specification"
    (spec / "basic").mkdir(parents=True)
    (spec / "server").mkdir(parents=True)
    (docs / "docs.json").write_text(
        _docs_json(
            [
                {
                    "group": "2025-06-18 (Latest)",
                    "pages": ["/basic/lifecycle", "/server/tools"],
                }
            ]
        ),
        encoding="utf-8",
    )
    (spec / "basic" / "lifecycle.mdx").write_text(
        "---\ntitle: Lifecycle\n---\n\nLifecycle body.\n", encoding="utf-8"
    )
    (spec / "server" / "tools.mdx").write_text(
        "---\ntitle: Tools\ndescription: Tool calls\n---\n\nTools body.\n",
        encoding="utf-8",
    )
    return tmp_path
