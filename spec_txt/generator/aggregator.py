"""Aggregate a specification's pages into a single text artifact.

This module drives the whole pipeline: it loads the navigation document,
selects the current version, flattens that version's page tree, resolves and
normalizes each page, and joins the titled sections in navigation order. When
the full artifact is requested it also appends the version's schema files as
fenced blocks.

Example
-------
>>> from spec_txt.config import load_build_config
>>> from spec_txt.generator import SpecAggregator
>>> report = SpecAggregator(load_build_config()).run()  # doctest: +SKIP
>>> report.version  # doctest: +SKIP
'2025-06-18'
"""

from __future__ import annotations

import collections.abc as cabc
import concurrent.futures as cf
import logging
import typing as typ

from spec_txt._constants import SECTION_SEPARATOR, SPEC_VERSION_PREFIX_TEMPLATE
from spec_txt.navigation import flatten_pages, load_navigation, select_version

from .content import ContentLoader
from .models import (
    AggregateArtifact,
    BuildReport,
    EmptyPage,
    MissingPage,
    PageOutcome,
    ResolvedPage,
    UnreadablePage,
)
from .resolver import PathResolver
from .sources import LocalDocumentSource

if typ.TYPE_CHECKING:
    from pathlib import Path

    from spec_txt.config import BuildConfig
    from spec_txt.navigation import NavigationConfig, PageRef

    from .sources import DocumentSource

logger = logging.getLogger(__name__)


class ArtifactWriteError(RuntimeError):
    """Raised when an output artifact cannot be written."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"could not write {path}: {error.strerror or error}")


class SpecAggregator:
    """Build the primary (and optionally full) specification artifact."""

    def __init__(
        self,
        config: BuildConfig,
        *,
        source: DocumentSource | None = None,
        navigation: NavigationConfig | None = None,
    ) -> None:
        """Initialize the aggregator with configuration and document access.

        Parameters
        ----------
        config : BuildConfig
            Resolved build settings (paths, markers, extensions, outputs).
        source : DocumentSource, optional
            Document access used for probing and reading pages and schema
            files; defaults to the local filesystem.
        navigation : NavigationConfig, optional
            Pre-parsed navigation; when ``None`` it is read from
            ``config.navigation`` on :meth:`run`.
        """
        self.config = config
        self.source = source or LocalDocumentSource()
        self.navigation = navigation
        self.resolver = PathResolver(self.source, extensions=config.extensions)
        self.loader = ContentLoader(self.source)

    def run(self, *, include_full: bool = False) -> BuildReport:
        """Aggregate the current version and write the artifacts to disk.

        Parameters
        ----------
        include_full : bool, optional
            Also write the supplementary artifact with embedded schema files.

        Returns
        -------
        BuildReport
            Counts, misses, and the paths written.

        Raises
        ------
        ConfigurationError
            Raised when the navigation document is missing or malformed, the
            specification tab is absent, or no group qualifies as current.
        ArtifactWriteError
            Raised when an output file or its directory cannot be written.
        """
        navigation = self.navigation
        if navigation is None:
            navigation = load_navigation(self.config.navigation)
        selected = select_version(
            navigation,
            spec_tab=self.config.spec_tab,
            latest_markers=self.config.latest_markers,
            anchor_versions=self.config.anchor_versions,
        )
        logger.info("using specification version %s", selected.version)

        pages = flatten_pages(
            selected.group.pages,
            docs_root=self.config.docs_root,
            spec_root=self.config.spec_root,
        )
        report = BuildReport(
            version=selected.version,
            versions_considered=selected.considered,
            top_level_items=len(selected.group.pages),
        )
        artifact = self.aggregate(
            pages, selected.version, include_supplementary=include_full, report=report
        )

        report.written.append(_write(self.config.output, artifact.content))
        if artifact.full_content is not None:
            report.written.append(
                _write(self.config.full_output, artifact.full_content)
            )
        return report

    def aggregate(
        self,
        pages: cabc.Sequence[PageRef],
        version: str,
        *,
        include_supplementary: bool = False,
        report: BuildReport | None = None,
    ) -> AggregateArtifact:
        """Resolve, load, and join ``pages`` in the order given.

        Parameters
        ----------
        pages : Sequence[PageRef]
            Flattened page references in navigation order.
        version : str
            Selected version token, used for titles and schema lookup.
        include_supplementary : bool, optional
            Append the version's schema files after the page sections.
        report : BuildReport, optional
            Report updated with page outcomes; a fresh one is used when omitted.

        Returns
        -------
        AggregateArtifact
            The joined page sections and, when requested, the full variant.
        """
        report = report if report is not None else BuildReport(version=version)
        report.pages_found = len(pages)

        sections: list[str] = []
        for outcome in self._process_all(pages, version):
            report.record(outcome)
            if isinstance(outcome, ResolvedPage):
                sections.append(outcome.render())
        content = SECTION_SEPARATOR.join(sections)

        full_content: str | None = None
        if include_supplementary:
            full_sections = [content]
            full_sections.extend(self._schema_sections(version, report))
            full_content = SECTION_SEPARATOR.join(full_sections)

        artifact = AggregateArtifact(content=content, full_content=full_content)
        report.artifact = artifact
        return artifact

    def _process_all(
        self, pages: cabc.Sequence[PageRef], version: str
    ) -> cabc.Iterator[PageOutcome]:
        """Yield page outcomes in input order, reading in parallel if configured."""
        if self.config.max_workers <= 1 or len(pages) <= 1:
            for page in pages:
                yield self._process(page, version)
            return
        with cf.ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            yield from executor.map(lambda page: self._process(page, version), pages)

    def _process(self, page: PageRef, version: str) -> PageOutcome:
        """Resolve and load a single page, classifying the result."""
        path = self.resolver.resolve(page)
        if path is None:
            logger.warning("could not find file for: %s", page.reference)
            return MissingPage(reference=page.reference, logical_path=page.logical_path)
        try:
            content = self.loader.load(path)
        except FileNotFoundError:
            logger.warning("file vanished before it could be read: %s", path)
            return MissingPage(reference=page.reference, logical_path=page.logical_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("could not read %s: %s", path, exc)  # noqa: TRY400
            return UnreadablePage(reference=page.reference, path=path, error=str(exc))
        if not content:
            logger.warning("skipping empty page: %s", path)
            return EmptyPage(reference=page.reference, path=path)
        logger.debug("processed: %s", path)
        return ResolvedPage(
            reference=page.reference,
            logical_path=page.logical_path,
            path=path,
            title=page_title(page.logical_path, version),
            content=content,
        )

    def _schema_sections(self, version: str, report: BuildReport) -> list[str]:
        """Return fenced schema sections for ``version`` in configured order."""
        schema_dir = self.config.schema_root / version
        sections: list[str] = []
        for artifact in self.config.schema_artifacts:
            path = schema_dir / artifact.filename
            text = self._read_schema(path)
            if text is None:
                logger.warning(
                    "could not find %s for version %s", artifact.filename, version
                )
                report.missing_schema_artifacts.append(artifact.filename)
                continue
            logger.info("found %s for version %s", artifact.filename, version)
            sections.append(
                f"# {artifact.filename}\n\n```{artifact.language}\n{text}\n```"
            )
        return sections

    def _read_schema(self, path: Path) -> str | None:
        if not self.source.exists(path):
            return None
        try:
            return self.source.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("could not read %s: %s", path, exc)  # noqa: TRY400
            return None


def page_title(logical_path: str, version: str) -> str:
    """Return ``logical_path`` without its ``specification/<version>/`` segment."""
    prefix = SPEC_VERSION_PREFIX_TEMPLATE.format(version=version)
    return logical_path.replace(prefix, "", 1)


def _write(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ArtifactWriteError(path, exc) from exc
    return path


__all__ = ["ArtifactWriteError", "SpecAggregator", "page_title"]
