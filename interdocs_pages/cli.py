"""Cyclopts CLI entrypoint for building the InterDocs static site.

The ``pages`` console script defined here renders every chapter listed in the
sidebar plus the landing page, and can check that every sidebar entry and
landing-page link resolves before anything is written. Typical usage runs
``pages check`` in CI and ``pages generate`` to produce ``public/``.

Examples
--------
Generate the site for the default configuration:

>>> from interdocs_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a scratch directory with debug logging:

>>> from interdocs_pages.cli import app
>>> app(["generate", "--output-dir", "dist", "--verbose"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import iter_doc_ids, load_site_config
from .generator import DocPageBuilder
from .homepage import QUICK_LINKS, HomePageBuilder, check_quick_links

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Route module loggers to stderr; debug output only when ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render the sidebar documents and the landing page to HTML.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    sidebar: typ.Annotated[
        str | None, Parameter(help="Sidebar to render", env_var="INPUT_SIDEBAR")
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate the documentation pages and landing page.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    sidebar : str or None, optional
        Sidebar whose documents are rendered; defaults to the configured
        default sidebar.
    output_dir : Path or None, optional
        Write the site here instead of the configured output directory.
    verbose : bool, optional
        Emit debug logs for each resolved and rendered document.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    BrokenReferenceError
        If a sidebar document has no source, or a landing-page link does not
        point at a rendered document. Nothing is written in that case.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config = dc.replace(site_config, output_dir=output_dir)

    docs_builder = DocPageBuilder(site_config, sidebar=sidebar)
    docs_builder.load_documents()
    check_quick_links(QUICK_LINKS, known_routes=docs_builder.routes)

    for path in docs_builder.run():
        print(f"wrote {_format_path(path)}")
    homepage_path = HomePageBuilder(
        site_config, known_routes=docs_builder.routes
    ).run()
    print(f"wrote {_format_path(homepage_path)}")


@app.command(help="Check that sidebar documents and landing-page links resolve.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Validate every sidebar and the landing-page links without writing files.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    verbose : bool, optional
        Emit debug logs while resolving documents.

    Raises
    ------
    BrokenReferenceError
        On the first sidebar with unresolved documents, or when landing-page
        links do not match a document in the default sidebar.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    for name in site_config.sidebars:
        builder = DocPageBuilder(site_config, sidebar=name)
        documents = builder.load_documents()
        print(f"{name}: {len(documents)} documents resolved")
        if name == site_config.default_sidebar:
            check_quick_links(QUICK_LINKS, known_routes=builder.routes)
            print(f"{name}: landing page links resolved")
    unique = {
        doc_id
        for entries in site_config.sidebars.values()
        for doc_id in iter_doc_ids(entries)
    }
    count = len(site_config.sidebars)
    print(f"checked {len(unique)} documents across {count} sidebars")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
