"""Homepage feature highlights and their three-column renderer.

``FEATURE_LIST`` holds the fixed records shown beneath the landing-page hero.
:func:`render_features` turns any ordered sequence of records into one block
per record (illustration, heading, description) inside a single grid row. The
output depends only on its inputs, so repeated renders are byte-identical.

Examples
--------
>>> from interdocs_pages.features import FEATURE_LIST, render_features
>>> [feature.title for feature in FEATURE_LIST][0]
'Structured Roadmaps'
>>> html = render_features(FEATURE_LIST)  # doctest: +SKIP
>>> html.count('data-test="feature-block"')  # doctest: +SKIP
3
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from interdocs_pages.config import with_base_url
from interdocs_pages.templating import build_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment


@dc.dataclass(frozen=True, slots=True)
class FeatureRecord:
    """A single feature highlight.

    Attributes
    ----------
    title : str
        Heading shown under the illustration.
    icon : str
        Static asset path of the illustration, relative to the site root.
    description : Markup
        Pre-sanitized rich text rendered beneath the heading.
    """

    title: str
    icon: str
    description: Markup


FEATURE_LIST: tuple[FeatureRecord, ...] = (
    FeatureRecord(
        title="Structured Roadmaps",
        icon="img/undraw_docusaurus_mountain.svg",
        description=Markup(
            "Each topic starts with a macro outline so you always know what comes "
            "next and which sections to fast-track for the interview in front of you."
        ),
    ),
    FeatureRecord(
        title="Interview-Level Depth",
        icon="img/undraw_docusaurus_tree.svg",
        description=Markup(
            "Long-form explanations, tables, and callouts give you the language and "
            "mental models to walk an interviewer through complex trade-offs with "
            "ease."
        ),
    ),
    FeatureRecord(
        title="Retention Built In",
        icon="img/undraw_docusaurus_react.svg",
        description=Markup(
            "Each chapter ends with reflection prompts and troubleshooting heuristics "
            "so you can teach the material back under pressure and keep it fresh."
        ),
    ),
)


def render_features(
    features: cabc.Sequence[FeatureRecord] = FEATURE_LIST,
    *,
    base_url: str = "/",
    env: Environment | None = None,
) -> Markup:
    """Render ``features`` into the homepage feature grid.

    Parameters
    ----------
    features : Sequence[FeatureRecord], optional
        Records to render, in display order. Defaults to ``FEATURE_LIST``.
    base_url : str, optional
        Site base URL used to resolve illustration paths.
    env : Environment, optional
        Jinja environment to load the partial from; a default environment is
        built when omitted.

    Returns
    -------
    Markup
        Safe HTML for the ``<section>`` holding one block per record.
    """
    environment = env or build_environment()
    template = environment.get_template("_features.jinja")
    blocks = [
        {
            "title": feature.title,
            "icon_src": with_base_url("/" + feature.icon.lstrip("/"), base_url),
            "description": feature.description,
        }
        for feature in features
    ]
    return Markup(template.render(features=blocks).strip())


__all__ = ["FEATURE_LIST", "FeatureRecord", "render_features"]
