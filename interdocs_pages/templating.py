"""Shared Jinja environment used by every InterDocs page builder."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment rooted at ``templates_dir``.

    Autoescaping is enabled for HTML templates, and block tags are trimmed so
    rendered pages stay free of stray blank lines. ``keep_trailing_newline``
    lets builders write files that end with a newline.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment"]
