"""Resolve, normalize, and aggregate specification pages."""

from .aggregator import ArtifactWriteError, SpecAggregator, page_title
from .content import ContentLoader, strip_frontmatter
from .models import (
    AggregateArtifact,
    BuildReport,
    EmptyPage,
    MissingPage,
    ResolvedPage,
    UnreadablePage,
)
from .resolver import PathResolver
from .sources import DocumentSource, LocalDocumentSource

__all__ = [
    "AggregateArtifact",
    "ArtifactWriteError",
    "BuildReport",
    "ContentLoader",
    "DocumentSource",
    "EmptyPage",
    "LocalDocumentSource",
    "MissingPage",
    "PathResolver",
    "ResolvedPage",
    "SpecAggregator",
    "UnreadablePage",
    "page_title",
    "strip_frontmatter",
]
