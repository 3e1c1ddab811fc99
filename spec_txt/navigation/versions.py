"""Select the current specification version from the navigation tree.

Selection runs in two passes over the specification tab's groups:

1. The first group, in authoring order, whose label contains a "latest"
   marker or an anchor version token and also carries a date token.
2. Otherwise the group carrying the greatest date token. ``YYYY-MM-DD``
   tokens sort chronologically as plain strings; ties keep the first group.

Example
-------
>>> from spec_txt.navigation.models import Group, NavigationConfig, Tab
>>> from spec_txt.navigation.versions import select_version
>>> nav = NavigationConfig(
...     tabs=(
...         Tab(
...             label="Specification",
...             groups=(Group("2024-11-05"), Group("2025-06-18 (Latest)")),
...         ),
...     )
... )
>>> select_version(nav).version
'2025-06-18'
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import re

from spec_txt._constants import DEFAULT_LATEST_MARKERS, DEFAULT_SPEC_TAB
from spec_txt.config import ConfigurationError

from .models import Group, NavigationConfig, SelectedVersion

logger = logging.getLogger(__name__)

VERSION_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})")


def extract_version(label: str) -> str | None:
    """Return the first ``YYYY-MM-DD`` token in ``label``, if any."""
    match = VERSION_PATTERN.search(label)
    return match.group(1) if match else None


def select_version(
    navigation: NavigationConfig,
    *,
    spec_tab: str = DEFAULT_SPEC_TAB,
    latest_markers: cabc.Sequence[str] = DEFAULT_LATEST_MARKERS,
    anchor_versions: cabc.Sequence[str] = (),
) -> SelectedVersion:
    """Identify the single group that should be aggregated.

    Parameters
    ----------
    navigation : NavigationConfig
        Parsed navigation document.
    spec_tab : str, optional
        Label of the specification tab, compared case-insensitively.
    latest_markers : Sequence[str], optional
        Tokens that mark a group as current (``"Latest"`` by default).
    anchor_versions : Sequence[str], optional
        Well-known version tokens that also mark a group as current.

    Returns
    -------
    SelectedVersion
        The chosen version token, its group, and every token considered.

    Raises
    ------
    ConfigurationError
        If the tab is missing or no group carries a version token.
    """
    tab = navigation.find_tab(spec_tab)
    if tab is None:
        msg = f"Tab '{spec_tab}' not found in navigation config."
        raise ConfigurationError(msg)

    versioned = [
        (group, version)
        for group in tab.groups
        if (version := extract_version(group.label)) is not None
    ]
    considered = tuple(version for _, version in versioned)

    markers = tuple(marker for marker in (*latest_markers, *anchor_versions) if marker)
    for group, version in versioned:
        if any(marker in group.label for marker in markers):
            logger.debug("group '%s' is marked as current", group.label)
            return SelectedVersion(version=version, group=group, considered=considered)

    if not versioned:
        msg = f"No versioned groups found in tab '{tab.label}'."
        raise ConfigurationError(msg)

    group, version = _latest_by_date(versioned)
    logger.debug("no group marked as current; falling back to %s", version)
    return SelectedVersion(version=version, group=group, considered=considered)


def _latest_by_date(versioned: list[tuple[Group, str]]) -> tuple[Group, str]:
    best = versioned[0]
    for candidate in versioned[1:]:
        if candidate[1] > best[1]:
            best = candidate
    return best


__all__ = ["VERSION_PATTERN", "extract_version", "select_version"]
