"""Behaviour tests for the ``pages generate`` and ``pages check`` commands.

These scenarios drive the CLI command functions against a temporary docs tree
and ``site.yaml`` built by the shared fixtures in ``tests/conftest.py``. They
verify that a complete tree renders every sidebar document plus the landing
page, and that a missing chapter aborts the build before anything is written.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` or as part of ``pytest``.
The scenarios live in ``features/site_build.feature``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from interdocs_pages.cli import check, generate
from interdocs_pages.config import SIDEBARS, BrokenReferenceError, iter_doc_ids

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(str(FEATURE_FILE))

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a site config with every sidebar document present")
def given_site_config(config_file: Path, scenario_state: ScenarioState) -> None:
    """Record the config path and the directory it builds into."""
    scenario_state["config_path"] = config_file
    scenario_state["docs_dir"] = config_file.parent / "docs"
    scenario_state["public"] = config_file.parent / "public"


@given(parsers.parse('the chapter "{doc_id}" is missing'))
def given_missing_chapter(doc_id: str, scenario_state: ScenarioState) -> None:
    """Delete the source file for ``doc_id``."""
    docs_dir: Path = scenario_state["docs_dir"]
    (docs_dir / f"{doc_id}.md").unlink()


@when("I run the pages generate command")
def when_generate(
    scenario_state: ScenarioState, capsys: pytest.CaptureFixture[str]
) -> None:
    """Run ``pages generate`` and capture its report."""
    generate(config=scenario_state["config_path"])
    scenario_state["stdout"] = capsys.readouterr().out


@when("I run the pages generate command expecting a failure")
def when_generate_fails(scenario_state: ScenarioState) -> None:
    """Run ``pages generate`` and keep the raised error."""
    with pytest.raises(BrokenReferenceError) as excinfo:
        generate(config=scenario_state["config_path"])
    scenario_state["error"] = excinfo.value


@when("I run the pages check command")
def when_check(
    scenario_state: ScenarioState, capsys: pytest.CaptureFixture[str]
) -> None:
    """Run ``pages check`` and capture its report."""
    check(config=scenario_state["config_path"])
    scenario_state["stdout"] = capsys.readouterr().out


@then("every sidebar document has a rendered page")
def then_every_doc_rendered(scenario_state: ScenarioState) -> None:
    """Each sidebar identifier has an index.html under its route."""
    public: Path = scenario_state["public"]
    for doc_id in iter_doc_ids(SIDEBARS["docsSidebar"]):
        page = public / "docs" / doc_id / "index.html"
        assert page.exists(), f"expected a rendered page for {doc_id}"


@then("the landing page links to the roadmap and chapter one")
def then_landing_page_ctas(scenario_state: ScenarioState) -> None:
    """The hero buttons target the roadmap and the first chapter."""
    index_path: Path = scenario_state["public"] / "index.html"
    soup = BeautifulSoup(index_path.read_text(encoding="utf-8"), "html.parser")
    hrefs = [link["href"] for link in soup.select("[data-test='hero-cta']")]
    assert hrefs == ["/docs/outline", "/docs/dbms/ch1-introduction"], (
        f"unexpected hero CTA targets: {hrefs!r}"
    )


@then("each written file is reported")
def then_files_reported(scenario_state: ScenarioState) -> None:
    """One ``wrote`` line per chapter plus the landing page."""
    stdout: str = scenario_state["stdout"]
    lines = [line for line in stdout.splitlines() if line.startswith("wrote ")]
    assert len(lines) == 13, f"expected 13 reported files, got {len(lines)}"
    assert lines[-1].endswith("index.html")


@then(parsers.parse('the failure names "{doc_id}"'))
def then_failure_names(doc_id: str, scenario_state: ScenarioState) -> None:
    """The error lists the missing identifier."""
    error: BrokenReferenceError = scenario_state["error"]
    assert error.references == (doc_id,), (
        f"unexpected references: {error.references!r}"
    )


@then("no landing page is written")
def then_no_landing_page(scenario_state: ScenarioState) -> None:
    """Nothing is published when references are broken."""
    public: Path = scenario_state["public"]
    assert not (public / "index.html").exists()
    assert not (public / "docs").exists()


@then(parsers.parse("the check reports {count:d} resolved documents"))
def then_check_count(count: int, scenario_state: ScenarioState) -> None:
    """The summary line counts every unique sidebar document."""
    stdout: str = scenario_state["stdout"]
    assert f"docsSidebar: {count} documents resolved" in stdout
    assert "docsSidebar: landing page links resolved" in stdout
    assert f"checked {count} documents across 1 sidebars" in stdout
