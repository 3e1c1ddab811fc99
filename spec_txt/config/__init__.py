"""Load and validate the build configuration for spec_txt runs.

This subpackage parses an optional YAML file that points the aggregator at the
navigation document, the docs and schema trees, and the output locations. The
primary entry point is :func:`load_build_config`, which merges the file with
built-in defaults and returns a :class:`BuildConfig`.

Examples
--------
>>> from pathlib import Path
>>> from spec_txt.config import load_build_config
>>> config = load_build_config(Path("spec-txt.yaml"))  # doctest: +SKIP
>>> config.navigation  # doctest: +SKIP
PosixPath('docs/docs.json')
"""

from .loader import load_build_config
from .models import (
    DEFAULT_SCHEMA_ARTIFACTS,
    BuildConfig,
    ConfigurationError,
    SchemaArtifactConfig,
)

__all__ = [
    "DEFAULT_SCHEMA_ARTIFACTS",
    "BuildConfig",
    "ConfigurationError",
    "SchemaArtifactConfig",
    "load_build_config",
]
