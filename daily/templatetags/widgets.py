from __future__ import annotations

from urllib.parse import quote

from django import template
from django.urls import reverse

register = template.Library()

SUBSCRIBE_SUBJECT = "I'd like to subscribe to your daily thoughts!"
SUBSCRIBE_BODY = "Hey {first_name}, please send me email every single day."


def mailto_url(name: str, email: str, subject: str = "", body: str = "") -> str:
    url = "mailto:" + quote(f"{name} <{email}>", safe="")
    if subject or body:
        url += f"?subject={quote(subject, safe='')}&body={quote(body, safe='')}"
    return url


def _first_name(site: dict) -> str:
    return (site.get("author") or "").split(" ")[0]


@register.inclusion_tag("daily/widgets/link.html")
def thought_link(date: str, label: str | None = None):
    """Link to a single daily thought, labelled with its date by default."""
    return {"url": reverse("daily:thought", args=[date]), "label": label or date}


@register.inclusion_tag("daily/widgets/link.html", takes_context=True)
def email_link(context, label: str, subject: str = "", body: str = ""):
    site = context.get("site", {}) or {}
    return {
        "url": mailto_url(site.get("author", ""), site.get("email", ""), subject, body),
        "label": label,
    }


@register.inclusion_tag("daily/widgets/explainer.html", takes_context=True)
def explainer_widget(context):
    """Intro paragraph on top of the list page."""
    site = context.get("site", {}) or {}
    return {"site": site, "first_name": _first_name(site)}


@register.inclusion_tag("daily/widgets/subscribe.html", takes_context=True)
def subscribe_widget(context):
    site = context.get("site", {}) or {}
    return {
        "site": site,
        "subject": SUBSCRIBE_SUBJECT,
        "body": SUBSCRIBE_BODY.format(first_name=_first_name(site)),
    }
