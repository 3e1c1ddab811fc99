"""Utility helpers shared by the spec_txt configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from .models import ConfigurationError, SchemaArtifactConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_path(value: object | None, default: Path) -> Path:
    """Return ``value`` as a Path, falling back to ``default`` when unset."""
    text = _optional_str(value)
    return Path(text) if text else default


def _as_str_tuple(
    value: object | None, default: tuple[str, ...], *, key: str
) -> tuple[str, ...]:
    """Normalize a scalar or list entry into a tuple of non-empty strings."""
    match value:
        case None:
            return default
        case str() as text:
            items = [text]
        case dt.date():
            items = [value.isoformat()]
        case list() | tuple():
            items = [
                item.isoformat() if isinstance(item, dt.date) else str(item)
                for item in value
            ]
        case _:
            msg = f"'{key}' must be a string or a list of strings."
            raise ConfigurationError(msg)
    return tuple(item.strip() for item in items if item.strip())


def _normalize_extensions(
    value: object | None, default: tuple[str, ...]
) -> tuple[str, ...]:
    """Return candidate extensions, rejecting values without a leading dot."""
    extensions = _as_str_tuple(value, default, key="extensions")
    if not extensions:
        msg = "'extensions' must list at least one candidate extension."
        raise ConfigurationError(msg)
    for extension in extensions:
        if not extension.startswith("."):
            msg = f"Extension '{extension}' must start with '.'."
            raise ConfigurationError(msg)
    return extensions


def _build_schema_artifacts(
    value: object | None, default: tuple[SchemaArtifactConfig, ...]
) -> tuple[SchemaArtifactConfig, ...]:
    """Build schema artifact entries from a list of mappings."""
    if value is None:
        return default
    if not isinstance(value, list):
        msg = "'schema_artifacts' must be a list of mappings."
        raise ConfigurationError(msg)
    artifacts: list[SchemaArtifactConfig] = []
    for payload in value:
        if not isinstance(payload, dict):
            msg = "Each 'schema_artifacts' entry must be a mapping."
            raise ConfigurationError(msg)
        entry = typ.cast("dict[str, typ.Any]", payload)
        filename = _optional_str(entry.get("filename"))
        if not filename:
            msg = "Each 'schema_artifacts' entry needs a 'filename'."
            raise ConfigurationError(msg)
        language = _optional_str(entry.get("language")) or Path(filename).suffix[1:]
        artifacts.append(SchemaArtifactConfig(filename=filename, language=language))
    return tuple(artifacts)


def _positive_int(value: object | None, default: int, *, key: str) -> int:
    """Return ``value`` as a positive integer or raise ConfigurationError."""
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"'{key}' must be a positive integer, got {value!r}."
        raise ConfigurationError(msg)
    return value


__all__ = [
    "_as_path",
    "_as_str_tuple",
    "_build_schema_artifacts",
    "_normalize_extensions",
    "_optional_str",
    "_positive_int",
]
