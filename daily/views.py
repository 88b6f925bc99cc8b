from __future__ import annotations

from django.conf import settings
from django.http import Http404
from django.urls import reverse
from django.views.static import serve

from . import content, responses
from .pages import build_list_page, build_single_page


def _redirect(request, url: str):
    return responses.HttpResponseTemporaryRedirect(request.build_absolute_uri(url))


def home(request):
    return _redirect(request, reverse("daily:list"))


def daily_list_slash(request):
    return _redirect(request, reverse("daily:list"))


def daily_list(request):
    dates = content.list_daily_thoughts()
    return responses.page(build_list_page(dates))


def daily_thought_slash(request, date: str):
    return _redirect(request, reverse("daily:thought", args=[date]))


def daily_thought(request, date: str):
    try:
        md = content.read_daily_thought(date)
    except content.DailyThoughtNotFound:
        raise Http404("Daily thought not found")

    dates = content.list_daily_thoughts()
    return responses.page(build_single_page(date, md, dates))


def static_fallback(request, req_path: str):
    return serve(request, req_path, document_root=settings.SITE_STATIC_ROOT)


def not_found(request, exception=None):
    return responses.plain("not found", status=404)


def server_error(request):
    return responses.plain("internal server error", status=500)
