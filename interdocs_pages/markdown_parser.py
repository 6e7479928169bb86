r"""Parse InterDocs chapter sources into front matter, title, and body.

Chapter files may open with a ``---`` delimited YAML front matter block that
sets ``title``, ``sidebar_label``, or ``description``. The remaining Markdown
becomes the page body. When no title is declared, the first level-one heading
outside fenced code is promoted to the page title and removed from the body so
it is not rendered twice.

Example
-------
>>> from interdocs_pages.markdown_parser import parse_document
>>> doc = parse_document("outline", "# Roadmap\nBody text")
>>> doc.title, doc.body
('Roadmap', 'Body text')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from interdocs_pages.config import SiteConfigError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)
TITLE_PATTERN = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)
FENCED_BLOCK_PATTERN = re.compile(
    r"^[ ]{0,3}(`{3,}|~{3,})[^\n]*\n.*?(?:^[ ]{0,3}\1[`~]*[ \t]*$|\Z)",
    re.MULTILINE | re.DOTALL,
)


@dc.dataclass(slots=True)
class DocumentSource:
    """Parsed chapter source.

    Attributes
    ----------
    doc_id : str
        Identifier the sidebar uses for this document.
    title : str
        Page title from front matter, the first ``#`` heading, or the id.
    sidebar_label : str
        Label shown in the sidebar; defaults to the title.
    description : str | None
        Optional summary used for the page's meta description.
    body : str
        Markdown body with front matter (and a promoted title) removed.
    front_matter : dict[str, typ.Any]
        Raw front matter mapping.
    """

    doc_id: str
    title: str
    sidebar_label: str
    description: str | None
    body: str
    front_matter: dict[str, typ.Any] = dc.field(default_factory=dict)


def _split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front matter mapping and the remaining markdown."""
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    try:
        loaded = loader.load(match.group(1)) or {}
    except YAMLError as exc:
        msg = f"Invalid front matter: {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded), text[match.end() :]


def _clean_heading(text: str) -> str:
    """Return a cleaned heading, removing escapes and whitespace."""
    return text.replace("\\", "").strip()


def _find_title_heading(body: str) -> re.Match[str] | None:
    """Return the first ``#`` heading that sits outside fenced code."""
    fenced = [block.span() for block in FENCED_BLOCK_PATTERN.finditer(body)]
    for heading in TITLE_PATTERN.finditer(body):
        if not any(start <= heading.start() < end for start, end in fenced):
            return heading
    return None


def _fallback_title(doc_id: str) -> str:
    name = doc_id.rsplit("/", 1)[-1]
    return name.replace("-", " ").replace("_", " ").strip().title() or doc_id


def parse_document(doc_id: str, text: str) -> DocumentSource:
    """Split a chapter source into metadata and Markdown body.

    Parameters
    ----------
    doc_id : str
        Sidebar identifier of the document (used for fallbacks and errors).
    text : str
        Raw file contents.

    Returns
    -------
    DocumentSource
        Parsed metadata and body.

    Raises
    ------
    SiteConfigError
        If the front matter is present but is not a valid YAML mapping.
    """
    try:
        front_matter, body = _split_front_matter(text)
    except SiteConfigError as exc:
        msg = f"Document '{doc_id}': {exc}"
        raise SiteConfigError(msg) from exc

    title = str(front_matter.get("title") or "").strip()
    if not title:
        heading = _find_title_heading(body)
        if heading:
            title = _clean_heading(heading.group(1))
            body = body[: heading.start()] + body[heading.end() :]
    title = title or _fallback_title(doc_id)
    sidebar_label = str(front_matter.get("sidebar_label") or "").strip() or title
    description = front_matter.get("description")
    return DocumentSource(
        doc_id=doc_id,
        title=title,
        sidebar_label=sidebar_label,
        description=str(description).strip() if description else None,
        body=body.strip(),
        front_matter=front_matter,
    )


__all__ = ["DocumentSource", "parse_document"]
