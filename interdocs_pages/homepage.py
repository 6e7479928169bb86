"""InterDocs landing page rendering pipeline.

This module turns the fixed landing-page copy into the static
``public/index.html`` artefact. The page is a hero banner (title, a subtitle
built from the site tagline, two call-to-action buttons, and a footnote), the
feature grid from :mod:`interdocs_pages.features`, and a quick-start section
of cards linking into the curriculum. Only the site title and tagline come
from configuration; every link target is a literal so the hero and cards keep
pointing at the same chapters whatever the YAML says.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from interdocs_pages.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP

Rendering has no time-dependent inputs: calling :meth:`HomePageBuilder.render`
twice with the same configuration returns identical markup.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from collections import Counter

from interdocs_pages.config import BrokenReferenceError, with_base_url
from interdocs_pages.features import FEATURE_LIST, FeatureRecord, render_features
from interdocs_pages.templating import build_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from interdocs_pages.config import SiteConfig

logger = logging.getLogger(__name__)

HERO_TITLE = "Own your interview prep."
HERO_BLURB = (
    "InterDocs curates dense topics into deliberate learning tracks so you know "
    "what to read, what to recall, and what to rehearse next."
)
HERO_FOOTNOTE = (
    "Built for solo study sprints, mock interview clubs, and spaced repetition "
    "refreshers."
)
PAGE_DESCRIPTION = (
    "InterDocs delivers interview-ready technical playbooks with structured "
    "roadmaps, long-form explanations, and practical checkpoints."
)
QUICK_START_HEADING = "Pick your next move"
QUICK_START_SUBTITLE = (
    "Every InterDocs module pairs deep context with repeatable prompts so you can "
    "teach it back under pressure."
)
CARD_CTA_LABEL = "Open module →"


@dc.dataclass(frozen=True, slots=True)
class CallToAction:
    """Hero button linking into the docs."""

    label: str
    href: str
    variant: str


@dc.dataclass(frozen=True, slots=True)
class QuickLinkRecord:
    """Quick-start card pointing at a curriculum page."""

    title: str
    description: str
    href: str


HERO_CTAS: tuple[CallToAction, ...] = (
    CallToAction(label="Browse the Roadmap", href="/docs/outline", variant="primary"),
    CallToAction(
        label="Start Chapter 1",
        href="/docs/dbms/ch1-introduction",
        variant="secondary",
    ),
)

QUICK_LINKS: tuple[QuickLinkRecord, ...] = (
    QuickLinkRecord(
        title="Database Curriculum Roadmap",
        description=(
            "See the entire sequence at a glance and choose the modules that match "
            "your timeline."
        ),
        href="/docs/outline",
    ),
    QuickLinkRecord(
        title="Chapter 1 · Foundations",
        description=(
            "Reset the fundamentals around data, databases, and the DIKW ladder "
            "before diving deeper."
        ),
        href="/docs/dbms/ch1-introduction",
    ),
    QuickLinkRecord(
        title="Chapter 5 · Advanced SQL",
        description=(
            "Master window functions, CTEs, and performance-focused patterns that "
            "keep interviewers engaged."
        ),
        href="/docs/dbms/ch5-advanced-sql",
    ),
)


def check_quick_links(
    quick_links: cabc.Sequence[QuickLinkRecord] = QUICK_LINKS,
    *,
    ctas: cabc.Sequence[CallToAction] = HERO_CTAS,
    known_routes: cabc.Collection[str] | None = None,
) -> None:
    """Validate landing-page link targets before rendering.

    Parameters
    ----------
    quick_links : Sequence[QuickLinkRecord], optional
        Cards to validate; card hrefs double as render keys so they must be
        unique.
    ctas : Sequence[CallToAction], optional
        Hero buttons whose targets must also resolve.
    known_routes : Collection[str] or None, optional
        Routes (without base URL) of every published doc. When ``None`` only
        uniqueness is checked.

    Raises
    ------
    BrokenReferenceError
        If card hrefs repeat, or any href is missing from ``known_routes``.
    """
    counts = Counter(card.href for card in quick_links)
    duplicates = [href for href, count in counts.items() if count > 1]
    if duplicates:
        raise BrokenReferenceError("duplicate quick-link hrefs", duplicates)
    if known_routes is None:
        return
    targets = [cta.href for cta in ctas] + [card.href for card in quick_links]
    missing = [href for href in dict.fromkeys(targets) if href not in known_routes]
    if missing:
        raise BrokenReferenceError("landing page links", missing)


class HomePageBuilder:
    """Render the landing page from site metadata and the fixed page copy."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        features: cabc.Sequence[FeatureRecord] = FEATURE_LIST,
        quick_links: cabc.Sequence[QuickLinkRecord] = QUICK_LINKS,
        known_routes: cabc.Collection[str] | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration; provides the title, tagline, base URL,
            footer note, and output directory.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``interdocs_pages/templates``.
        features : Sequence[FeatureRecord], optional
            Feature records rendered beneath the hero.
        quick_links : Sequence[QuickLinkRecord], optional
            Cards rendered in the quick-start section.
        known_routes : Collection[str], optional
            Published doc routes; when given, :meth:`render` refuses to link
            to anything outside this set.
        """
        self.site = site
        self.features = features
        self.quick_links = quick_links
        self.known_routes = known_routes
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("home_page.jinja")

    def render(self) -> str:
        """Return the landing page HTML.

        Raises
        ------
        BrokenReferenceError
            If quick-link hrefs repeat or a link target is not a known route.
        """
        check_quick_links(
            self.quick_links, ctas=HERO_CTAS, known_routes=self.known_routes
        )
        base_url = self.site.base_url
        context = {
            "site": self.site,
            "html_title": f"{self.site.title} · {self.site.tagline}",
            "page_description": PAGE_DESCRIPTION,
            "hero": {
                "title": HERO_TITLE,
                "subtitle": f"{self.site.tagline}. {HERO_BLURB}",
                "footnote": HERO_FOOTNOTE,
                "ctas": [
                    {
                        "label": cta.label,
                        "href": with_base_url(cta.href, base_url),
                        "variant": cta.variant,
                    }
                    for cta in HERO_CTAS
                ],
            },
            "features_html": render_features(
                self.features, base_url=base_url, env=self.env
            ),
            "quick_start": {
                "heading": QUICK_START_HEADING,
                "subtitle": QUICK_START_SUBTITLE,
                "cta_label": CARD_CTA_LABEL,
                "cards": [
                    {
                        "key": card.href,
                        "title": card.title,
                        "description": card.description,
                        "href": with_base_url(card.href, base_url),
                    }
                    for card in self.quick_links
                ],
            },
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the landing page HTML, returning the output path.

        Notes
        -----
        Parent directories are created as needed and the file is written as
        UTF-8. Filesystem errors propagate to the caller.
        """
        output_path = self.site.homepage_output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        logger.debug("wrote landing page to %s", output_path)
        return output_path


__all__ = [
    "CARD_CTA_LABEL",
    "HERO_CTAS",
    "QUICK_LINKS",
    "CallToAction",
    "HomePageBuilder",
    "QuickLinkRecord",
    "check_quick_links",
]
