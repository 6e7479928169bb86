"""Rewrite relative chapter links to their published doc routes."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from interdocs_pages._constants import DOC_SOURCE_SUFFIXES
from interdocs_pages.config import doc_route

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class DocLinkExtension(Extension):
    """Rewrite ``.md``/``.mdx`` links between chapters to doc routes.

    Authors link chapters the way they sit on disk (``./ch2-relational-design.md``
    or ``../outline.md#phases``). Registering this extension converts those
    targets into the routes pages are published under (``/docs/dbms/...``) so
    links keep working in the generated site.
    """

    def __init__(self, doc_id: str, base_url: str = "/") -> None:
        super().__init__()
        self.doc_id = doc_id
        self.base_url = base_url

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the doc-link treeprocessor on the Markdown instance."""
        processor = DocLinkTreeprocessor(md, self.doc_id, self.base_url)
        md.treeprocessors.register(processor, "interdocs_doc_links", 15)


class DocLinkTreeprocessor(Treeprocessor):
    """Rewrite relative source links inside the parsed markdown tree."""

    def __init__(self, md: Markdown, doc_id: str, base_url: str) -> None:
        super().__init__(md)
        self.base_dir = posixpath.dirname(doc_id)
        self.base_url = base_url

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree to doc routes."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the doc route for a relative source link, or None to keep it."""
        if not target or target.startswith(("#", "/")) or "://" in target:
            return None
        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc:
            return None
        stem, suffix = posixpath.splitext(parsed.path)
        if suffix not in DOC_SOURCE_SUFFIXES:
            return None
        joined = posixpath.normpath(posixpath.join(self.base_dir, stem))
        while joined.startswith("../"):
            joined = joined[3:]
        if joined in (".", "..", ""):
            return None
        url = doc_route(joined, self.base_url)
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = ["DocLinkExtension", "DocLinkTreeprocessor"]
