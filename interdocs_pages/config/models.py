"""Typed dataclasses describing InterDocs site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from interdocs_pages._constants import DEFAULT_SIDEBAR, PAGE_INDEX_FILENAME

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .sidebars import NavigationEntry


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class BrokenReferenceError(SiteConfigError):
    """Raised when document identifiers or internal links do not resolve."""

    def __init__(self, kind: str, references: cabc.Iterable[str]) -> None:
        self.kind = kind
        self.references = tuple(references)
        listed = ", ".join(self.references)
        super().__init__(f"Unresolved {kind}: {listed}")


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide metadata, build directories, and sidebar definitions."""

    title: str
    tagline: str
    sidebars: dict[str, list[NavigationEntry]]
    url: str | None = None
    base_url: str = "/"
    docs_dir: Path = Path("docs")
    output_dir: Path = Path("public")
    pygments_style: str = "monokai"
    footer_note: str = ""
    default_sidebar: str = DEFAULT_SIDEBAR

    @property
    def homepage_output(self) -> Path:
        """Return the path the landing page is written to."""
        return self.output_dir / PAGE_INDEX_FILENAME

    def get_sidebar(self, name: str | None = None) -> list[NavigationEntry]:
        """Return the requested sidebar or fall back to the default sidebar."""
        key = name or self.default_sidebar
        try:
            return self.sidebars[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.sidebars))
            msg = f"Unknown sidebar '{key}'. Known sidebars: {available}"
            raise SiteConfigError(msg) from exc


__all__ = ["BrokenReferenceError", "SiteConfig", "SiteConfigError"]
