"""End-to-end tests for rendering chapter pages.

This module exercises ``interdocs_pages.generator.DocPageBuilder`` against a
temporary docs tree (see ``tests/conftest.py``) and checks that the generated
``docs/<id>/index.html`` pages:

* exist for every sidebar document and nothing else,
* show the sidebar with the current page highlighted and its category open,
* link to the previous and next documents in reading order,
* rewrite relative ``.md`` links to published routes,
* keep fenced code blocks highlighted with their language recorded.

It also covers front matter parsing in ``interdocs_pages.markdown_parser``.

Run ``pytest tests/test_doc_generation.py`` to focus on this module.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from interdocs_pages.config import BrokenReferenceError, SiteConfigError, iter_doc_ids
from interdocs_pages.generator import DocPageBuilder, doc_output_path
from interdocs_pages.markdown_parser import parse_document

if typ.TYPE_CHECKING:
    from pathlib import Path

    from interdocs_pages.config import SiteConfig

    DocWriter = typ.Callable[..., Path]


def _page(builder: DocPageBuilder, doc_id: str) -> BeautifulSoup:
    return BeautifulSoup(builder.render(doc_id), "html.parser")


def test_parse_document_reads_front_matter() -> None:
    """Front matter sets the title, sidebar label, and description."""
    doc = parse_document(
        "outline",
        "---\ntitle: Roadmap\nsidebar_label: Plan\ndescription: All phases\n---\n\n"
        "# Heading stays\n\nBody.\n",
    )
    assert doc.title == "Roadmap"
    assert doc.sidebar_label == "Plan"
    assert doc.description == "All phases"
    assert doc.body.startswith("# Heading stays"), "body heading should be kept"


def test_parse_document_ignores_headings_in_code() -> None:
    """Shell comments inside fenced code are neither titles nor removed."""
    source = (
        "Intro paragraph.\n\n"
        "```bash\n# install postgres\napt install postgresql\n```\n\n"
        "~~~\n# also code\n~~~\n"
    )
    doc = parse_document("dbms/ch6-dba-basics", source)
    assert doc.title == "Ch6 Dba Basics"
    assert "# install postgres\napt install postgresql" in doc.body
    assert "# also code" in doc.body


def test_parse_document_promotes_heading_after_code() -> None:
    """A real heading following a code block is still promoted."""
    doc = parse_document(
        "dbms/ch7-performance", "```sql\n# not a title\n```\n\n# Performance\n"
    )
    assert doc.title == "Performance"
    assert "# not a title" in doc.body


def test_parse_document_promotes_first_heading() -> None:
    """Without a front matter title the first H1 becomes the title."""
    doc = parse_document("dbms/ch1-introduction", "Lead.\n\n# Chapter One\n\nText.")
    assert doc.title == "Chapter One"
    assert doc.sidebar_label == "Chapter One"
    assert "# Chapter One" not in doc.body
    assert doc.front_matter == {}


def test_parse_document_falls_back_to_identifier() -> None:
    """Untitled documents derive a title from their identifier."""
    doc = parse_document("dbms/ch6-dba-basics", "Only text.")
    assert doc.title == "Ch6 Dba Basics"


@pytest.mark.parametrize("front_matter", ["title: [unclosed", "- a list"])
def test_parse_document_rejects_bad_front_matter(front_matter: str) -> None:
    """Front matter must be a valid YAML mapping."""
    with pytest.raises(SiteConfigError, match="intro"):
        parse_document("intro", f"---\n{front_matter}\n---\nBody")


def test_run_writes_one_page_per_sidebar_document(site_config: SiteConfig) -> None:
    """Every sidebar document is written to its route directory."""
    builder = DocPageBuilder(site_config)
    written = builder.run()
    expected = [
        doc_output_path(site_config.output_dir, doc_id)
        for doc_id in iter_doc_ids(site_config.get_sidebar())
    ]
    assert written == expected
    assert all(path.exists() for path in written)
    assert written[4] == (
        site_config.output_dir / "docs/dbms/ch1-introduction/index.html"
    )


def test_sidebar_highlights_current_page(site_config: SiteConfig) -> None:
    """The active link carries aria-current and its category is expanded."""
    soup = _page(DocPageBuilder(site_config), "dbms/ch1-introduction")
    active = soup.select("[data-test='sidebar'] a[aria-current='page']")
    assert [link["href"] for link in active] == ["/docs/dbms/ch1-introduction"]
    assert active[0].get_text() == "Title of dbms/ch1-introduction"
    category = soup.select_one("[data-test='sidebar-category']")
    assert "menu__list-item--collapsed" not in category["class"]
    assert len(soup.select("[data-test='sidebar-doc']")) == 11


def test_pagination_links(site_config: SiteConfig) -> None:
    """Pages link to their neighbours; the ends omit the missing side."""
    builder = DocPageBuilder(site_config)
    middle = _page(builder, "dbms/outline")
    prev_link = middle.select_one("[data-test='pagination-prev']")
    next_link = middle.select_one("[data-test='pagination-next']")
    assert prev_link["href"] == "/docs/outline"
    assert next_link["href"] == "/docs/dbms/ch0-foundations"
    assert "Title of dbms/ch0-foundations" in next_link.get_text()

    first = _page(builder, "intro")
    assert first.select_one("[data-test='pagination-prev']") is None
    last = _page(builder, "dbms/ch8-transactions")
    assert last.select_one("[data-test='pagination-next']") is None


def test_relative_markdown_links_are_rewritten(
    site_config: SiteConfig, docs_dir: Path, doc_writer: DocWriter
) -> None:
    """Links to sibling sources become routes; external links are untouched."""
    doc_writer(
        docs_dir,
        "dbms/ch1-introduction",
        "# Chapter 1\n\n"
        "Next: [design](./ch2-relational-design.md#keys), "
        "back to the [roadmap](../outline.md), "
        "see [Postgres](https://www.postgresql.org/docs/) "
        "or [below](#summary).\n",
    )
    soup = _page(DocPageBuilder(site_config), "dbms/ch1-introduction")
    hrefs = [link["href"] for link in soup.select("article.markdown a")]
    assert hrefs == [
        "/docs/dbms/ch2-relational-design#keys",
        "/docs/outline",
        "https://www.postgresql.org/docs/",
        "#summary",
    ]


def test_code_blocks_are_highlighted(
    site_config: SiteConfig, docs_dir: Path, doc_writer: DocWriter
) -> None:
    """Fenced code keeps its language after fence metadata is stripped."""
    doc_writer(
        docs_dir,
        "dbms/ch5-advanced-sql",
        "# Advanced SQL\n\n"
        '```sql title="window.sql"\n'
        "SELECT rank() OVER (ORDER BY salary) FROM staff;\n"
        "```\n",
    )
    soup = _page(DocPageBuilder(site_config), "dbms/ch5-advanced-sql")
    block = soup.select_one("div.codehilite")
    assert block is not None, "expected a highlighted code block"
    assert block["data-language"] == "sql"
    assert soup.select_one("h1").get_text() == "Advanced SQL"


def test_missing_document_fails_before_writing(site_config: SiteConfig) -> None:
    """A broken sidebar reference fails the build without output."""
    (site_config.docs_dir / "dbms" / "ch3-modeling.md").unlink()
    builder = DocPageBuilder(site_config)
    with pytest.raises(BrokenReferenceError, match="dbms/ch3-modeling"):
        builder.run()
    assert not site_config.output_dir.exists()


def test_render_rejects_documents_outside_sidebar(site_config: SiteConfig) -> None:
    """Only sidebar documents can be rendered."""
    with pytest.raises(SiteConfigError, match="orphan"):
        DocPageBuilder(site_config).render("orphan")


def test_pages_only_reference_inline_styles(site_config: SiteConfig) -> None:
    """Doc pages carry highlighting CSS inline and link no unbuilt stylesheet."""
    soup = _page(DocPageBuilder(site_config), "intro")
    assert soup.select("link[rel='stylesheet']") == []
    style = soup.select_one("style")
    assert style is not None, "expected inline highlighting styles"
    assert ".codehilite" in style.get_text()
