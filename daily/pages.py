"""HTML pages for the daily thoughts section.

Both builders sort the dates they are given, so callers can pass the content
lister's output straight through.
"""

from __future__ import annotations

from typing import Iterable

from django.conf import settings
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from .nav import display_order, neighbors
from .rendering import render_markdown


def site_context() -> dict:
    profile = dict(settings.SITE_PROFILE)
    return {"site": profile}


def _page(template: str, title: str, **ctx) -> str:
    context = site_context()
    context["title"] = title
    context.update(ctx)
    return render_to_string(template, context)


def build_list_page(dates: Iterable[str]) -> str:
    return _page("daily/list.html", "Daily Thoughts", dates=display_order(dates))


def build_single_page(date: str, md: str, dates: Iterable[str]) -> str:
    body = mark_safe(render_markdown(md))
    nav = neighbors(date, display_order(dates))
    return _page(
        "daily/single.html",
        f"Daily Thought - {date}",
        date=date,
        body=body,
        previous=nav.previous,
        next=nav.next,
    )
