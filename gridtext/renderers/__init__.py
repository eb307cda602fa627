"""Renderers for every supported output format."""

from __future__ import annotations

from gridtext.logutils import logger

from .base import Renderer, TableView
from .box import render_ascii, render_unicode
from .csv_renderer import render_csv
from .html import render_html
from .json_renderer import render_json
from .latex import render_latex
from .markdown import render_markdown
from .mediawiki import render_mediawiki

RENDERERS: dict[str, Renderer] = {
    "text": render_ascii,
    "ascii": render_ascii,
    "unicode": render_unicode,
    "csv": render_csv,
    "json": render_json,
    "html": render_html,
    "latex": render_latex,
    "mediawiki": render_mediawiki,
    "markdown": render_markdown,
}

DEFAULT_RENDERER: Renderer = render_ascii


def get_renderer(fmt: str | None) -> Renderer:
    """Return the renderer for ``fmt``, falling back to ASCII."""

    key = (fmt or "").strip().lower()
    renderer = RENDERERS.get(key)
    if renderer is None:
        logger.debug(f"unknown format {fmt!r}, rendering as ascii")
        return DEFAULT_RENDERER
    return renderer


def render(view: TableView, fmt: str | None = None) -> str:
    return get_renderer(fmt)(view)


__all__ = [
    "DEFAULT_RENDERER",
    "RENDERERS",
    "Renderer",
    "TableView",
    "get_renderer",
    "render",
    "render_ascii",
    "render_csv",
    "render_html",
    "render_json",
    "render_latex",
    "render_markdown",
    "render_mediawiki",
    "render_unicode",
]
