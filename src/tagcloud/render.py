"""Rendering a tag cloud to an output document."""

import html
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .cloud import TagCloud
from .models import CloudDocument

# Shared course stylesheet first, then a local override next to the output
DEFAULT_STYLESHEETS = (
    "https://cse22x1.engineering.osu.edu/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)


def _header(title: str, stylesheets: Sequence[str]) -> list[str]:
    title = html.escape(title)
    lines = ["<html>", "<head>", f"<title>{title}</title>"]
    for href in stylesheets:
        lines.append(f'<link href="{html.escape(href)}" rel="stylesheet" type="text/css">')
    lines += [
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    return lines


def _footer() -> list[str]:
    return ["</p>", "</div>", "</body>", "</html>"]


def render_html(cloud: TagCloud, stylesheets: Sequence[str] = DEFAULT_STYLESHEETS) -> str:
    """Render the cloud as an HTML page.

    Each tag is a span whose ``f<size>`` class sets the font size and whose
    tooltip shows the count.
    """
    lines = _header(cloud.title, stylesheets)
    for record in cloud.records:
        lines.append(
            f'<span style="cursor:default" class="f{record.size_class}" '
            f'title="count: {record.count}">{html.escape(record.word)}</span>'
        )
    lines += _footer()
    return "\n".join(lines) + "\n"


def render_json(cloud: TagCloud, **_options: Any) -> str:
    """Render the cloud as a JSON document."""
    return CloudDocument.from_cloud(cloud).model_dump_json(indent=2) + "\n"


RENDERERS: dict[str, Callable[..., str]] = {
    "html": render_html,
    "json": render_json,
}


def render(cloud: TagCloud, fmt: str = "html", **options: Any) -> str:
    """Render ``cloud`` with the renderer registered for ``fmt``."""
    try:
        renderer = RENDERERS[fmt]
    except KeyError:
        raise ValueError(
            f"Unknown output format: {fmt}. Expected one of {', '.join(RENDERERS)}"
        ) from None
    return renderer(cloud, **options)


def write_output(text: str, path: Path) -> None:
    """Write a rendered document, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
