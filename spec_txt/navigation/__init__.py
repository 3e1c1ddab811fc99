"""Navigation model, loading, version selection, and page-tree flattening."""

from .flatten import ROOT_MARKER, flatten_pages
from .loader import load_navigation, parse_navigation
from .models import (
    Group,
    LeafPage,
    NavigationConfig,
    PageRef,
    PageTreeNode,
    SelectedVersion,
    SubGroup,
    Tab,
)
from .versions import VERSION_PATTERN, extract_version, select_version

__all__ = [
    "ROOT_MARKER",
    "VERSION_PATTERN",
    "Group",
    "LeafPage",
    "NavigationConfig",
    "PageRef",
    "PageTreeNode",
    "SelectedVersion",
    "SubGroup",
    "Tab",
    "extract_version",
    "flatten_pages",
    "load_navigation",
    "parse_navigation",
    "select_version",
]
