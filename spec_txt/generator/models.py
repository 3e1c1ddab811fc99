"""Shared dataclasses produced by the aggregation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class ResolvedPage:
    """A page that was found on disk and normalized.

    Attributes
    ----------
    reference : str
        Raw navigation entry.
    logical_path : str
        Logical path produced by flattening.
    path : Path
        Concrete file that was read.
    title : str
        Logical path with the ``specification/<version>/`` prefix removed.
    content : str
        Normalized document body.
    """

    reference: str
    logical_path: str
    path: Path
    title: str
    content: str

    def render(self) -> str:
        """Return the titled section written into the artifact."""
        return f"# {self.title}\n\n{self.content}"


@dc.dataclass(frozen=True, slots=True)
class MissingPage:
    """A navigation entry with no file under any candidate name."""

    reference: str
    logical_path: str


@dc.dataclass(frozen=True, slots=True)
class UnreadablePage:
    """A page whose file exists but could not be read."""

    reference: str
    path: Path
    error: str


@dc.dataclass(frozen=True, slots=True)
class EmptyPage:
    """A page whose body is empty once frontmatter is removed."""

    reference: str
    path: Path


PageOutcome = ResolvedPage | MissingPage | UnreadablePage | EmptyPage


@dc.dataclass(frozen=True, slots=True)
class AggregateArtifact:
    """Text written by a run: the primary artifact and the optional full one."""

    content: str
    full_content: str | None = None


@dc.dataclass(slots=True)
class BuildReport:
    """Per-run summary of what was aggregated and what was skipped."""

    version: str
    versions_considered: tuple[str, ...] = ()
    top_level_items: int = 0
    pages_found: int = 0
    resolved: list[ResolvedPage] = dc.field(default_factory=list)
    missing: list[MissingPage] = dc.field(default_factory=list)
    unreadable: list[UnreadablePage] = dc.field(default_factory=list)
    empty: list[EmptyPage] = dc.field(default_factory=list)
    missing_schema_artifacts: list[str] = dc.field(default_factory=list)
    written: list[Path] = dc.field(default_factory=list)
    artifact: AggregateArtifact | None = None

    def record(self, outcome: PageOutcome) -> None:
        """File ``outcome`` under the matching bucket."""
        match outcome:
            case ResolvedPage():
                self.resolved.append(outcome)
            case MissingPage():
                self.missing.append(outcome)
            case UnreadablePage():
                self.unreadable.append(outcome)
            case EmptyPage():
                self.empty.append(outcome)

    def summary_lines(self) -> list[str]:
        """Return human-readable summary lines for console output."""
        considered = ", ".join(self.versions_considered) or "none"
        lines = [
            f"versions considered: {considered}",
            f"using specification version: {self.version}",
            f"top-level navigation items: {self.top_level_items}",
            f"pages found: {self.pages_found}",
            f"pages resolved: {len(self.resolved)}",
            f"pages missing: {len(self.missing)}",
        ]
        lines.extend(f"  missing: {page.reference}" for page in self.missing)
        if self.unreadable:
            lines.append(f"pages unreadable: {len(self.unreadable)}")
            lines.extend(
                f"  unreadable: {page.reference} ({page.error})"
                for page in self.unreadable
            )
        if self.empty:
            lines.append(f"pages empty: {len(self.empty)}")
        if self.artifact is not None:
            lines.append(f"spec size: {len(self.artifact.content)} characters")
            if self.artifact.full_content is not None:
                lines.append(
                    f"full spec size: {len(self.artifact.full_content)} characters"
                )
        lines.extend(
            f"schema artifact missing: {name}" for name in self.missing_schema_artifacts
        )
        return lines


__all__ = [
    "AggregateArtifact",
    "BuildReport",
    "EmptyPage",
    "MissingPage",
    "PageOutcome",
    "ResolvedPage",
    "UnreadablePage",
]
