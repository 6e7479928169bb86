"""Shared fixtures for the InterDocs test suite.

The fixtures build a throwaway docs tree containing one Markdown file per
document in the built-in sidebar, plus a ``SiteConfig`` and an on-disk
``site.yaml`` pointing at it. Tests that need a broken tree delete files from
``docs_dir`` after the fixture runs.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from interdocs_pages.config import SIDEBARS, SiteConfig, iter_doc_ids

SITE_TITLE = "InterDocs"
SITE_TAGLINE = "Interview-ready technical playbooks"


def write_doc(docs_dir: Path, doc_id: str, body: str | None = None) -> Path:
    """Write a Markdown source for ``doc_id`` and return its path."""
    path = docs_dir / f"{doc_id}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    text = body if body is not None else f"# Title of {doc_id}\n\nBody of {doc_id}.\n"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def doc_writer() -> typ.Callable[..., Path]:
    """Return the helper that writes a Markdown source into a docs tree."""
    return write_doc


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Return a docs directory holding every document in the default sidebar."""
    root = tmp_path / "docs"
    for doc_id in iter_doc_ids(SIDEBARS["docsSidebar"]):
        write_doc(root, doc_id)
    return root


@pytest.fixture
def site_config(tmp_path: Path, docs_dir: Path) -> SiteConfig:
    """Build a SiteConfig that renders the default sidebar into ``public``."""
    return SiteConfig(
        title=SITE_TITLE,
        tagline=SITE_TAGLINE,
        sidebars={name: list(entries) for name, entries in SIDEBARS.items()},
        docs_dir=docs_dir,
        output_dir=tmp_path / "public",
    )


@pytest.fixture
def config_file(tmp_path: Path, docs_dir: Path) -> Path:
    """Write a ``site.yaml`` that relies on the built-in sidebar."""
    path = tmp_path / "site.yaml"
    path.write_text(
        f"""
site:
  title: {SITE_TITLE}
  tagline: {SITE_TAGLINE}
defaults:
  docs_dir: {docs_dir.name}
  output_dir: public
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return path
