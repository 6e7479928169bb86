"""Common literal values used across interdocs_pages.

These constants keep route prefixes, sidebar names, and file suffixes
centralized so builders, templates, and tests can import the same values
without drifting. Intended for internal use within the interdocs_pages package.

Examples
--------
>>> from interdocs_pages import _constants
>>> _constants.DOCS_ROUTE_PREFIX
'/docs'
>>> _constants.DOC_SOURCE_SUFFIXES[0]
'.md'
"""

DOCS_ROUTE_PREFIX = "/docs"
DEFAULT_SIDEBAR = "docsSidebar"
DOC_SOURCE_SUFFIXES = (".md", ".mdx")
PAGE_INDEX_FILENAME = "index.html"
