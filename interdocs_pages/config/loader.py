"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _normalize_base_url, _optional_str, _resolve_dir
from .models import SiteConfig, SiteConfigError
from .sidebars import SIDEBARS, parse_sidebars

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the InterDocs site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration: title and tagline, base URL, resolved
        docs/output directories, and the sidebars to render.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the ``site`` block lacks a title or tagline, the ``site`` or
        ``defaults`` block is not a mapping, or the ``sidebars`` block is
        malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from interdocs_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'InterDocs'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    root = path.resolve().parent

    site = raw.get("site") or {}
    if not isinstance(site, dict):
        msg = "The 'site' block must be a mapping."
        raise SiteConfigError(msg)
    title = _optional_str(site.get("title"))
    tagline = _optional_str(site.get("tagline"))
    if not (title and tagline):
        msg = "Site configuration requires 'title' and 'tagline'."
        raise SiteConfigError(msg)

    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "The 'defaults' block must be a mapping."
        raise SiteConfigError(msg)
    sidebars_raw = raw.get("sidebars")
    if sidebars_raw is None:
        sidebars = {name: list(entries) for name, entries in SIDEBARS.items()}
    else:
        sidebars = parse_sidebars(sidebars_raw)
    default_sidebar = _optional_str(defaults.get("sidebar")) or next(
        iter(sidebars), ""
    )
    if default_sidebar not in sidebars:
        msg = f"Default sidebar '{default_sidebar}' is not defined."
        raise SiteConfigError(msg)

    config = SiteConfig(
        title=title,
        tagline=tagline,
        sidebars=sidebars,
        url=_optional_str(site.get("url")),
        base_url=_normalize_base_url(site.get("base_url")),
        docs_dir=_resolve_dir(defaults.get("docs_dir"), "docs", root),
        output_dir=_resolve_dir(defaults.get("output_dir"), "public", root),
        pygments_style=_optional_str(defaults.get("pygments_style")) or "monokai",
        footer_note=str(defaults.get("footer_note", "") or ""),
        default_sidebar=default_sidebar,
    )
    logger.debug(
        "loaded site config %s with sidebars %s", path, ", ".join(config.sidebars)
    )
    return config


__all__ = ["load_site_config"]
