"""Utilities for parsing, rendering, and generating InterDocs chapter pages."""

from .link_rewriter import DocLinkExtension
from .page_generator import DocPageBuilder, doc_output_path
from .renderer import HtmlContentRenderer

__all__ = [
    "DocLinkExtension",
    "DocPageBuilder",
    "HtmlContentRenderer",
    "doc_output_path",
]
