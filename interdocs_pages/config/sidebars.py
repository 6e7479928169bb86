"""Sidebar definitions for the InterDocs documentation tree.

A sidebar is an ordered list of navigation entries. Each entry is either a
bare document reference (``DocEntry``) or a category (``CategoryEntry``) with
a label, an optional landing document, and nested child entries. The module
exposes the ``SIDEBARS`` mapping consumed by the doc page generator, plus
helpers that parse the declarative mapping shape used in ``site.yaml`` and
walk a tree in reading order.

Document identifiers are not checked here; :mod:`interdocs_pages.navigation`
resolves them against the docs directory at build time.

Examples
--------
>>> from interdocs_pages.config.sidebars import SIDEBARS, iter_doc_ids
>>> list(iter_doc_ids(SIDEBARS["docsSidebar"]))[:3]
['intro', 'outline', 'dbms/outline']
>>> parse_sidebar(["intro", {"type": "doc", "id": "outline"}])
[DocEntry(doc_id='intro'), DocEntry(doc_id='outline')]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from interdocs_pages._constants import DEFAULT_SIDEBAR, DOCS_ROUTE_PREFIX

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class DocEntry:
    """Leaf entry pointing at a single document."""

    doc_id: str


@dc.dataclass(frozen=True, slots=True)
class CategoryLink:
    """Landing document opened when a category label is clicked."""

    doc_id: str


@dc.dataclass(frozen=True, slots=True)
class CategoryEntry:
    """Labelled group of entries, optionally backed by a landing document."""

    label: str
    items: tuple[NavigationEntry, ...]
    link: CategoryLink | None = None


NavigationEntry: typ.TypeAlias = DocEntry | CategoryEntry


SIDEBARS: dict[str, list[NavigationEntry]] = {
    DEFAULT_SIDEBAR: [
        DocEntry("intro"),
        DocEntry("outline"),
        CategoryEntry(
            label="Database Foundations",
            link=CategoryLink("dbms/outline"),
            items=(
                DocEntry("dbms/ch0-foundations"),
                DocEntry("dbms/ch1-introduction"),
                DocEntry("dbms/ch2-relational-design"),
                DocEntry("dbms/ch3-modeling"),
                DocEntry("dbms/ch4-sql-fundamentals"),
                DocEntry("dbms/ch5-advanced-sql"),
                DocEntry("dbms/ch6-dba-basics"),
                DocEntry("dbms/ch7-performance"),
                DocEntry("dbms/ch8-transactions"),
            ),
        ),
    ],
}


def parse_sidebars(payload: object) -> dict[str, list[NavigationEntry]]:
    """Build every named sidebar from a ``sidebars`` configuration mapping.

    Parameters
    ----------
    payload : object
        Mapping of sidebar name to a list of entries, as loaded from YAML.

    Returns
    -------
    dict[str, list[NavigationEntry]]
        Parsed sidebars keyed by name, preserving declaration order.

    Raises
    ------
    SiteConfigError
        If the payload is not a mapping or any entry is malformed.
    """
    match payload:
        case dict() as data:
            pass
        case _:
            msg = "Sidebar configuration must be a mapping of names to entries."
            raise SiteConfigError(msg)
    sidebars: dict[str, list[NavigationEntry]] = {}
    for name, items in data.items():
        if not isinstance(items, list):
            msg = f"Sidebar '{name}' must be a list of entries."
            raise SiteConfigError(msg)
        sidebars[str(name)] = parse_sidebar(items)
    return sidebars


def parse_sidebar(items: cabc.Iterable[object]) -> list[NavigationEntry]:
    """Parse declarative sidebar items into navigation entries."""
    return [_parse_entry(item) for item in items]


def _parse_entry(item: object) -> NavigationEntry:
    """Return the navigation entry described by a single sidebar item."""
    match item:
        case str() as doc_id:
            return DocEntry(_require_doc_id(doc_id))
        case {"type": "doc", "id": doc_id}:
            return DocEntry(_require_doc_id(doc_id))
        case {"type": "category", "label": label, "items": list() as children, **rest}:
            pass
        case _:
            msg = f"Unsupported sidebar entry: {item!r}"
            raise SiteConfigError(msg)
    if not label:
        msg = "Sidebar categories require a non-empty 'label'."
        raise SiteConfigError(msg)
    return CategoryEntry(
        label=str(label),
        items=tuple(parse_sidebar(children)),
        link=_parse_category_link(rest.get("link"), str(label)),
    )


def _parse_category_link(payload: object, label: str) -> CategoryLink | None:
    """Return the category landing link, if one is configured."""
    match payload:
        case None:
            return None
        case {"type": "doc", "id": doc_id}:
            return CategoryLink(_require_doc_id(doc_id))
        case _:
            msg = f"Category '{label}' link must be a doc mapping with an 'id'."
            raise SiteConfigError(msg)


def _require_doc_id(value: object) -> str:
    """Return a normalized document identifier or raise for blank values."""
    doc_id = str(value).strip().strip("/") if value is not None else ""
    if not doc_id:
        msg = "Sidebar document references require a non-empty id."
        raise SiteConfigError(msg)
    return doc_id


def iter_doc_ids(entries: cabc.Iterable[NavigationEntry]) -> cabc.Iterator[str]:
    """Yield document identifiers depth-first in sidebar reading order.

    A category's landing document is yielded before its children, matching the
    order readers meet pages when paging through the sidebar.
    """
    for entry in entries:
        match entry:
            case DocEntry(doc_id=doc_id):
                yield doc_id
            case CategoryEntry(items=items, link=link):
                if link is not None:
                    yield link.doc_id
                yield from iter_doc_ids(items)


def doc_route(doc_id: str, base_url: str = "/") -> str:
    """Return the public route for ``doc_id`` beneath ``base_url``.

    Examples
    --------
    >>> doc_route("dbms/ch1-introduction")
    '/docs/dbms/ch1-introduction'
    >>> doc_route("outline", "/interdocs/")
    '/interdocs/docs/outline'
    """
    prefix = base_url.rstrip("/")
    return f"{prefix}{DOCS_ROUTE_PREFIX}/{doc_id.strip('/')}"


__all__ = [
    "SIDEBARS",
    "CategoryEntry",
    "CategoryLink",
    "DocEntry",
    "NavigationEntry",
    "doc_route",
    "iter_doc_ids",
    "parse_sidebar",
    "parse_sidebars",
]
