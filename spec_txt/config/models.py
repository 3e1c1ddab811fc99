"""Typed dataclasses describing the spec_txt build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from spec_txt._constants import (
    DEFAULT_EXTENSIONS,
    DEFAULT_FULL_OUTPUT,
    DEFAULT_LATEST_MARKERS,
    DEFAULT_OUTPUT,
    DEFAULT_SPEC_TAB,
)


class ConfigurationError(ValueError):
    """Raised when the build or navigation configuration cannot be used."""


@dc.dataclass(frozen=True, slots=True)
class SchemaArtifactConfig:
    """A supplementary schema file embedded in the full artifact.

    Attributes
    ----------
    filename : str
        File name looked up inside ``<schema_root>/<version>/``.
    language : str
        Language tag written after the opening code fence.
    """

    filename: str
    language: str


DEFAULT_SCHEMA_ARTIFACTS = (
    SchemaArtifactConfig(filename="schema.ts", language="typescript"),
    SchemaArtifactConfig(filename="schema.json", language="json"),
)


@dc.dataclass(slots=True)
class BuildConfig:
    """Fully resolved settings for a single aggregation run.

    Attributes
    ----------
    navigation : Path
        Navigation configuration document (``docs.json``).
    docs_root : Path
        Base directory for page references relative to the docs namespace.
    spec_root : Path
        Base directory for ``/``-rooted page references.
    schema_root : Path
        Directory containing one ``<version>/`` folder per spec version.
    output : Path
        Destination of the primary artifact.
    full_output : Path
        Destination of the supplementary artifact.
    spec_tab : str
        Label of the navigation tab holding the specification.
    latest_markers : tuple[str, ...]
        Tokens that mark a group as the current version.
    anchor_versions : tuple[str, ...]
        Version tokens that also mark a group as current.
    extensions : tuple[str, ...]
        Candidate document extensions, tried in order.
    schema_artifacts : tuple[SchemaArtifactConfig, ...]
        Supplementary files appended to the full artifact, in order.
    max_workers : int
        Number of threads used to resolve and load pages.
    """

    navigation: Path = Path("docs/docs.json")
    docs_root: Path = Path("docs")
    spec_root: Path = Path("docs/specification")
    schema_root: Path = Path("schema")
    output: Path = Path(DEFAULT_OUTPUT)
    full_output: Path = Path(DEFAULT_FULL_OUTPUT)
    spec_tab: str = DEFAULT_SPEC_TAB
    latest_markers: tuple[str, ...] = DEFAULT_LATEST_MARKERS
    anchor_versions: tuple[str, ...] = ()
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    schema_artifacts: tuple[SchemaArtifactConfig, ...] = DEFAULT_SCHEMA_ARTIFACTS
    max_workers: int = 1


__all__ = [
    "DEFAULT_SCHEMA_ARTIFACTS",
    "BuildConfig",
    "ConfigurationError",
    "SchemaArtifactConfig",
]
