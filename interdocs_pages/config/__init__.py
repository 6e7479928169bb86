"""Load and validate site configuration YAML for InterDocs builds.

This subpackage parses the project's ``site.yaml`` file, resolves the docs and
output directories relative to the file, and produces typed dataclasses
(:class:`SiteConfig`, sidebar entries) that the page builders consume. The
primary entry point is :func:`load_site_config`; the default navigation tree
lives in :data:`SIDEBARS` and is used whenever the YAML omits a ``sidebars``
block.

Examples
--------
>>> from pathlib import Path
>>> from interdocs_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.tagline  # doctest: +SKIP
'Interview-ready technical playbooks'
"""

from .helpers import with_base_url
from .loader import load_site_config
from .models import BrokenReferenceError, SiteConfig, SiteConfigError
from .sidebars import (
    SIDEBARS,
    CategoryEntry,
    CategoryLink,
    DocEntry,
    NavigationEntry,
    doc_route,
    iter_doc_ids,
    parse_sidebar,
    parse_sidebars,
)

__all__ = [
    "SIDEBARS",
    "BrokenReferenceError",
    "CategoryEntry",
    "CategoryLink",
    "DocEntry",
    "NavigationEntry",
    "SiteConfig",
    "SiteConfigError",
    "doc_route",
    "iter_doc_ids",
    "load_site_config",
    "parse_sidebar",
    "parse_sidebars",
    "with_base_url",
]
