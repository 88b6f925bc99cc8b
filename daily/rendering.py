"""Markdown to HTML for entry bodies.

Entries may embed raw HTML, but only ``<source src=...>`` survives. Everything
else that Markdown itself did not produce is stripped. The allow-list is handed
to bleach on every call instead of relying on its defaults.
"""

from __future__ import annotations

import bleach
import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

# What Python-Markdown (with the extensions above) emits on its own.
MARKDOWN_TAGS = frozenset(
    {
        "a", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4", "h5",
        "h6", "hr", "img", "li", "ol", "p", "pre", "strong", "table", "tbody",
        "td", "th", "thead", "tr", "ul",
    }
)
MARKDOWN_ATTRIBUTES = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "ol": ["start"],
}

ALLOWED_TAGS = MARKDOWN_TAGS | {"source"}
ALLOWED_ATTRIBUTES = {**MARKDOWN_ATTRIBUTES, "source": ["src"]}


def render_markdown(text: str) -> str:
    html = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")
    return bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        strip=True,
    )
