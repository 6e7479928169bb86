"""Render every sidebar document into a themed HTML page.

This module is the consumer of the sidebar definitions. :class:`DocPageBuilder`
resolves each document identifier in the chosen sidebar to a Markdown file,
parses its front matter, renders the body with :class:`HtmlContentRenderer`,
and writes ``<output>/docs/<doc_id>/index.html`` so the page is served at the
``/docs/<doc_id>`` route. Every page carries the sidebar with the current
document highlighted and previous/next links along reading order.

Example
-------
>>> from pathlib import Path
>>> from interdocs_pages.config import load_site_config
>>> from interdocs_pages.generator import DocPageBuilder
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> DocPageBuilder(site).run()  # doctest: +SKIP
[PosixPath('public/docs/intro/index.html'), ...]
"""

from __future__ import annotations

import logging
import typing as typ

from interdocs_pages._constants import DOCS_ROUTE_PREFIX, PAGE_INDEX_FILENAME
from interdocs_pages.config import SiteConfigError, doc_route
from interdocs_pages.generator.link_rewriter import DocLinkExtension
from interdocs_pages.generator.renderer import HtmlContentRenderer
from interdocs_pages.markdown_parser import DocumentSource, parse_document
from interdocs_pages.navigation import (
    DocumentResolver,
    build_sidebar_items,
    pagination,
    reading_order,
)
from interdocs_pages.templating import build_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from interdocs_pages.config import SiteConfig

logger = logging.getLogger(__name__)


def doc_output_path(output_dir: Path, doc_id: str) -> Path:
    """Return the file that serves the ``/docs/<doc_id>`` route."""
    return output_dir / DOCS_ROUTE_PREFIX.strip("/") / doc_id / PAGE_INDEX_FILENAME


class DocPageBuilder:
    """Resolve sidebar documents and emit one HTML page per document."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        sidebar: str | None = None,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with site configuration and template context.

        Parameters
        ----------
        site : SiteConfig
            Site configuration providing the docs directory, base URL, and
            sidebars.
        sidebar : str, optional
            Name of the sidebar to render; defaults to the site's default
            sidebar.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the HTML output directory.
        """
        self.site = site
        self.entries = site.get_sidebar(sidebar)
        self.output_dir = output_dir or site.output_dir
        self.resolver = DocumentResolver(site.docs_dir)
        self.order = reading_order(self.entries)
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("doc_page.jinja")
        self._documents: dict[str, DocumentSource] | None = None
        self._stylesheet = HtmlContentRenderer(site.pygments_style).stylesheet

    @property
    def routes(self) -> set[str]:
        """Return the routes (without base URL) of every sidebar document."""
        return {doc_route(doc_id) for doc_id in self.order}

    def load_documents(self) -> dict[str, DocumentSource]:
        """Resolve and parse every document referenced by the sidebar.

        Raises
        ------
        BrokenReferenceError
            If any identifier has no Markdown source under the docs directory.
        SiteConfigError
            If a document has malformed front matter.
        """
        if self._documents is None:
            sources = self.resolver.resolve_all(self.entries)
            self._documents = {
                doc_id: parse_document(doc_id, path.read_text(encoding="utf-8"))
                for doc_id, path in sources.items()
            }
        return self._documents

    def render(self, doc_id: str) -> str:
        """Render the page for ``doc_id`` and return its HTML."""
        documents = self.load_documents()
        try:
            document = documents[doc_id]
        except KeyError as exc:
            msg = f"Document '{doc_id}' is not part of the sidebar."
            raise SiteConfigError(msg) from exc

        base_url = self.site.base_url
        labels = {key: doc.sidebar_label for key, doc in documents.items()}
        renderer = HtmlContentRenderer(
            self.site.pygments_style,
            link_extension=DocLinkExtension(doc_id, base_url),
        )
        links = pagination(self.order, doc_id)
        context = {
            "site": self.site,
            "doc": document,
            "html_title": f"{document.title} | {self.site.title}",
            "page_description": document.description or self.site.tagline,
            "content_html": renderer.markdown(document.body),
            "sidebar": build_sidebar_items(self.entries, doc_id, labels, base_url),
            "previous": self._page_link(links.previous, documents),
            "next": self._page_link(links.next, documents),
            "pygments_css": self._stylesheet,
            "home_href": base_url,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> list[Path]:
        """Render every sidebar document into HTML files on disk.

        Returns
        -------
        list[Path]
            Paths to the generated pages, in reading order.
        """
        self.load_documents()
        written: list[Path] = []
        for doc_id in self.order:
            output_path = doc_output_path(self.output_dir, doc_id)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(self.render(doc_id), encoding="utf-8")
            logger.debug("rendered %s to %s", doc_id, output_path)
            written.append(output_path)
        return written

    def _page_link(
        self, doc_id: str | None, documents: dict[str, DocumentSource]
    ) -> dict[str, str] | None:
        """Return template data for a pagination link, or None at the ends."""
        if doc_id is None:
            return None
        return {
            "label": documents[doc_id].sidebar_label,
            "href": doc_route(doc_id, self.site.base_url),
        }


__all__ = ["DocPageBuilder", "doc_output_path"]
