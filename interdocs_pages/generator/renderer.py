"""Render chapter Markdown into highlighted HTML.

Chapters are authored in the Docusaurus dialect: fenced code may carry
metadata after the language (``title="query.sql"``, ``{1,3}``) and callouts
are written as ``:::note Title`` ... ``:::`` blocks. Before conversion the
source is rewritten into plain Python-Markdown: fence metadata is dropped and
callouts become ``!!! note "Title"`` admonitions with an indented body.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_OPEN_PATTERN = re.compile(
    r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[ \t]*"
    r"(?P<lang>[A-Za-z0-9_+#.-]+(?![^ \t,]))?[^\r\n]*$"
)
ADMONITION_OPEN_PATTERN = re.compile(
    r"^[ ]{0,3}:{3,}[ \t]*(?P<kind>[A-Za-z]+)"
    r"(?:\[(?P<bracketed>[^\]]*)\]|[ \t]+(?P<title>[^\r\n]*?))?[ \t]*$"
)
ADMONITION_CLOSE_PATTERN = re.compile(r"^[ ]{0,3}:{3,}[ \t]*$")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "admonition",
)
ADMONITION_INDENT = "    "


@dc.dataclass(frozen=True, slots=True)
class NormalizedMarkdown:
    """Chapter source rewritten for Python-Markdown.

    ``languages`` lists the language of each top-level fenced block in source
    order; blocks without a language are recorded as ``"text"``.
    """

    text: str
    languages: tuple[str, ...]


def _closes_fence(line: str, fence: str) -> bool:
    stripped = line.strip()
    return (
        len(line) - len(line.lstrip(" ")) <= 3
        and len(stripped) >= len(fence)
        and set(stripped) == {fence[0]}
    )


def _admonition_header(match: re.Match[str]) -> str:
    title = match.group("bracketed") or match.group("title")
    header = f"!!! {match.group('kind').lower()}"
    if title:
        header += ' "{}"'.format(title.strip().replace('"', "'"))
    return header


def normalize_markdown(text: str) -> NormalizedMarkdown:
    """Rewrite Docusaurus-flavoured Markdown into Python-Markdown input.

    Fence openers lose their leading indent and any metadata after the
    language. ``:::kind [title]`` callouts become admonitions whose body is
    indented one level per nesting depth. Lines inside fenced code are copied
    unchanged apart from that indent.

    Examples
    --------
    >>> normalize_markdown(":::tip Remember\\nIndex it.\\n:::\\n").text
    '\\n!!! tip "Remember"\\n    Index it.\\n\\n'
    >>> normalize_markdown('``` sql title="q.sql"\\nSELECT 1;\\n```').languages
    ('sql',)
    """
    lines: list[str] = []
    languages: list[str] = []
    fence: str | None = None
    depth = 0
    for line in text.splitlines():
        indent = ADMONITION_INDENT * depth
        if fence is not None:
            if _closes_fence(line, fence):
                lines.append(f"{indent}{fence}")
                fence = None
            else:
                lines.append(f"{indent}{line}" if line.strip() else "")
            continue
        if opener := FENCE_OPEN_PATTERN.match(line):
            fence = opener.group("fence")
            language = opener.group("lang") or ""
            # Python-Markdown only fences code at the top level.
            if depth == 0:
                languages.append(language or "text")
            lines.append(f"{indent}{fence}{language}")
        elif callout := ADMONITION_OPEN_PATTERN.match(line):
            lines.extend(["", f"{indent}{_admonition_header(callout)}"])
            depth += 1
        elif depth and ADMONITION_CLOSE_PATTERN.match(line):
            depth -= 1
            lines.append("")
        else:
            lines.append(f"{indent}{line}" if line.strip() else "")
    return NormalizedMarkdown("\n".join(lines) + "\n", tuple(languages))


class HtmlContentRenderer:
    """Render chapter markdown with Pygments highlighting and link rewriting."""

    def __init__(
        self, pygments_style: str = "monokai", link_extension: Extension | None = None
    ) -> None:
        """Initialize a renderer with a pygments style and optional link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension that rewrites links between chapters; pass
            ``None`` to leave links untouched.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render chapter markdown into HTML."""
        source = normalize_markdown(text)
        if not source.text.strip():
            return ""
        extensions: list[Extension | str] = list(MARKDOWN_EXTENSIONS)
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return self._label_code_blocks(md.convert(source.text), source.languages)

    @staticmethod
    def _label_code_blocks(html: str, languages: tuple[str, ...]) -> str:
        """Record each block's language as ``data-language`` on its wrapper."""
        if not languages:
            return html
        remaining = iter(languages)

        def _repl(_match: re.Match[str]) -> str:
            language = escape(next(remaining, "text"), quote=True)
            return f'<div class="codehilite" data-language="{language}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["HtmlContentRenderer", "NormalizedMarkdown", "normalize_markdown"]
