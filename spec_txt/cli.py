"""Cyclopts CLI entrypoint for building the aggregated specification text.

The ``spec-txt`` console script reads the navigation document, picks the
current specification version, and writes the ordered, frontmatter-free page
sections to a single text file. Passing ``--full`` also writes a second file
that embeds the version's schema sources.

Examples
--------
Build the primary artifact with the default configuration:

>>> from spec_txt.cli import main
>>> main()  # doctest: +SKIP

Build both artifacts using a custom configuration file:

>>> from spec_txt.cli import app
>>> app(["--full", "--config", "spec-txt.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ConfigurationError, load_build_config
from .generator import ArtifactWriteError, SpecAggregator

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="spec-txt", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def generate(
    *,
    full: typ.Annotated[
        bool,
        Parameter(
            name=["--full", "-f"],
            help="Also write the full artifact with embedded schema files",
            env_var="INPUT_FULL",
        ),
    ] = False,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to build config (YAML)", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Aggregate the current specification version into text artifacts.

    Parameters
    ----------
    full : bool, optional
        When ``True`` the supplementary artifact, which appends the version's
        schema files, is written in addition to the primary one.
    config : Path or None, optional
        Path to a YAML build configuration; built-in defaults are used when
        omitted (overridable via ``INPUT_CONFIG``).

    Returns
    -------
    None
        Writes the artifacts and prints the run summary.

    Raises
    ------
    SystemExit
        With status 1 when a configuration file is missing, malformed, or
        cannot produce a version to build, or when an artifact cannot be
        written.
    """
    try:
        build_config = load_build_config(config)
        report = SpecAggregator(build_config).run(include_full=full)
    except (ArtifactWriteError, ConfigurationError, OSError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for line in report.summary_lines():
        print(line)
    for path in report.written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
