"""Common literal values used across spec_txt.

These constants keep separators, markers, and default filenames centralized so
the aggregator, configuration loader, and tests can import the same values
without drifting. Intended for internal use within the spec_txt package.

Examples
--------
>>> from spec_txt import _constants
>>> _constants.SECTION_SEPARATOR
'\\n\\n---\\n\\n'
>>> _constants.DEFAULT_EXTENSIONS
('.mdx', '.md')
"""

SECTION_SEPARATOR = "\n\n---\n\n"
FRONTMATTER_MARKER = "---"
DEFAULT_EXTENSIONS = (".mdx", ".md")
DEFAULT_SPEC_TAB = "Specification"
DEFAULT_LATEST_MARKERS = ("Latest",)
DEFAULT_OUTPUT = "spec.txt"
DEFAULT_FULL_OUTPUT = "spec-full.txt"
SPEC_VERSION_PREFIX_TEMPLATE = "specification/{version}/"
