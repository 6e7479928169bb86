"""Utilities for generating the InterDocs study site.

This package renders the database-fundamentals curriculum into static HTML:
sidebar-driven chapter pages under ``/docs`` and the marketing landing page.
The CLI entry points are used by ``uv run pages`` locally and in CI.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from interdocs_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
