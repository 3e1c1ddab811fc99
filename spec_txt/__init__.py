"""Aggregate navigation-ordered specification pages into a text artifact.

This package exposes the CLI entry points used by ``spec-txt`` to read a
Mintlify-style navigation document, select the current specification version,
and concatenate its pages (optionally with schema sources) into plain text.

Exports
-------
- ``app``: Cyclopts application entry.
- ``main``: Convenience function that configures logging and invokes ``app``.

Examples
--------
>>> from spec_txt import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
