"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .helpers import (
    _as_path,
    _as_str_tuple,
    _build_schema_artifacts,
    _normalize_extensions,
    _optional_str,
    _positive_int,
)
from .models import BuildConfig, ConfigurationError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_build_config(path: Path | None = None) -> BuildConfig:
    """Load the YAML file describing where navigation, docs, and outputs live.

    Parameters
    ----------
    path : Path or None, optional
        Filesystem path to the YAML build configuration. When ``None`` the
        built-in defaults are returned unchanged.

    Returns
    -------
    BuildConfig
        Defaults merged with the values present in the file.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    ConfigurationError
        If the file is not valid YAML or a value has the wrong shape (for
        example an empty extension list).

    Examples
    --------
    >>> from spec_txt.config import load_build_config
    >>> load_build_config().spec_tab
    'Specification'
    """
    base = BuildConfig()
    if path is None:
        return base
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        try:
            loaded = loader.load(handle) or {}
        except YAMLError as exc:
            msg = f"Invalid build config '{path}': {exc}"
            raise ConfigurationError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    spec_tab = _optional_str(raw.get("spec_tab")) or base.spec_tab
    latest_markers = _as_str_tuple(
        raw.get("latest_markers"), base.latest_markers, key="latest_markers"
    )
    if not latest_markers and not raw.get("anchor_versions"):
        msg = "'latest_markers' cannot be empty unless 'anchor_versions' is set."
        raise ConfigurationError(msg)

    return BuildConfig(
        navigation=_as_path(raw.get("navigation"), base.navigation),
        docs_root=_as_path(raw.get("docs_root"), base.docs_root),
        spec_root=_as_path(raw.get("spec_root"), base.spec_root),
        schema_root=_as_path(raw.get("schema_root"), base.schema_root),
        output=_as_path(raw.get("output"), base.output),
        full_output=_as_path(raw.get("full_output"), base.full_output),
        spec_tab=spec_tab,
        latest_markers=latest_markers,
        anchor_versions=_as_str_tuple(
            raw.get("anchor_versions"), base.anchor_versions, key="anchor_versions"
        ),
        extensions=_normalize_extensions(raw.get("extensions"), base.extensions),
        schema_artifacts=_build_schema_artifacts(
            raw.get("schema_artifacts"), base.schema_artifacts
        ),
        max_workers=_positive_int(
            raw.get("max_workers"), base.max_workers, key="max_workers"
        ),
    )


__all__ = ["load_build_config"]
