"""Resolve sidebar trees into documents, sidebar items, and pagination.

The sidebar definitions in :mod:`interdocs_pages.config.sidebars` only name
documents. This module ties those names to Markdown files under the docs
directory, fails the build when any of them is missing, and derives the
render-ready structures the doc page template needs: a sidebar with the
current page highlighted, and previous/next links along reading order.

Example
-------
>>> from pathlib import Path
>>> from interdocs_pages.config import SIDEBARS
>>> resolver = DocumentResolver(Path("docs"))  # doctest: +SKIP
>>> sources = resolver.resolve_all(SIDEBARS["docsSidebar"])  # doctest: +SKIP
>>> pagination(["intro", "outline"], "intro")
PageLinks(previous=None, next='outline')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from interdocs_pages._constants import DOC_SOURCE_SUFFIXES
from interdocs_pages.config import (
    BrokenReferenceError,
    CategoryEntry,
    DocEntry,
    doc_route,
    iter_doc_ids,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from interdocs_pages.config import NavigationEntry

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class SidebarItem:
    """Render-ready sidebar node for a single page build.

    Attributes
    ----------
    kind : str
        ``"doc"`` for leaves, ``"category"`` for groups.
    label : str
        Visible text.
    href : str | None
        Route of the document (or category landing doc); ``None`` for
        categories without a landing doc.
    active : bool
        True when the node points at the page being rendered.
    expanded : bool
        True for categories that contain the page being rendered.
    children : list[SidebarItem]
        Nested items of a category, in sidebar order.
    """

    kind: str
    label: str
    href: str | None = None
    active: bool = False
    expanded: bool = False
    children: list[SidebarItem] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class PageLinks:
    """Identifiers of the neighbouring documents in reading order."""

    previous: str | None
    next: str | None


class DocumentResolver:
    """Map document identifiers to Markdown sources under ``docs_dir``."""

    def __init__(self, docs_dir: Path) -> None:
        self.docs_dir = docs_dir

    def locate(self, doc_id: str) -> Path | None:
        """Return the source file for ``doc_id`` or ``None`` when absent."""
        for suffix in DOC_SOURCE_SUFFIXES:
            candidate = self.docs_dir / f"{doc_id}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    def resolve_all(self, entries: cabc.Iterable[NavigationEntry]) -> dict[str, Path]:
        """Resolve every document referenced by ``entries``.

        Parameters
        ----------
        entries : Iterable[NavigationEntry]
            Sidebar tree to resolve.

        Returns
        -------
        dict[str, Path]
            Source paths keyed by document identifier, in reading order. An
            identifier referenced more than once appears once.

        Raises
        ------
        BrokenReferenceError
            If one or more identifiers have no source file; every missing
            identifier is listed.
        """
        resolved: dict[str, Path] = {}
        missing: list[str] = []
        for doc_id in iter_doc_ids(entries):
            if doc_id in resolved or doc_id in missing:
                continue
            path = self.locate(doc_id)
            if path is None:
                missing.append(doc_id)
            else:
                resolved[doc_id] = path
        if missing:
            raise BrokenReferenceError("document ids", missing)
        logger.debug("resolved %d documents under %s", len(resolved), self.docs_dir)
        return resolved


def reading_order(entries: cabc.Iterable[NavigationEntry]) -> list[str]:
    """Return unique document identifiers in sidebar reading order."""
    return list(dict.fromkeys(iter_doc_ids(entries)))


def pagination(order: cabc.Sequence[str], doc_id: str) -> PageLinks:
    """Return the previous and next identifiers around ``doc_id``."""
    try:
        index = order.index(doc_id)
    except ValueError:
        return PageLinks(previous=None, next=None)
    previous = order[index - 1] if index > 0 else None
    following = order[index + 1] if index + 1 < len(order) else None
    return PageLinks(previous=previous, next=following)


def build_sidebar_items(
    entries: cabc.Iterable[NavigationEntry],
    current_doc_id: str | None,
    labels: cabc.Mapping[str, str],
    base_url: str = "/",
) -> list[SidebarItem]:
    """Convert a sidebar tree into render-ready items for one page.

    Parameters
    ----------
    entries : Iterable[NavigationEntry]
        Sidebar tree in declaration order.
    current_doc_id : str or None
        Identifier of the page being rendered; ``None`` renders no highlight.
    labels : Mapping[str, str]
        Sidebar labels keyed by document identifier. Missing identifiers fall
        back to the identifier itself.
    base_url : str, optional
        Site base URL applied to every route.

    Returns
    -------
    list[SidebarItem]
        One item per entry, nesting preserved.
    """
    items: list[SidebarItem] = []
    for entry in entries:
        match entry:
            case DocEntry(doc_id=doc_id):
                items.append(
                    SidebarItem(
                        kind="doc",
                        label=labels.get(doc_id, doc_id),
                        href=doc_route(doc_id, base_url),
                        active=doc_id == current_doc_id,
                    )
                )
            case CategoryEntry(label=label, items=children, link=link):
                child_items = build_sidebar_items(
                    children, current_doc_id, labels, base_url
                )
                landing_active = link is not None and link.doc_id == current_doc_id
                items.append(
                    SidebarItem(
                        kind="category",
                        label=label,
                        href=doc_route(link.doc_id, base_url) if link else None,
                        active=landing_active,
                        expanded=landing_active
                        or any(_contains_active(child) for child in child_items),
                        children=child_items,
                    )
                )
    return items


def _contains_active(item: SidebarItem) -> bool:
    """Return True when ``item`` or any descendant is the active page."""
    return item.active or any(_contains_active(child) for child in item.children)


__all__ = [
    "DocumentResolver",
    "PageLinks",
    "SidebarItem",
    "build_sidebar_items",
    "pagination",
    "reading_order",
]
