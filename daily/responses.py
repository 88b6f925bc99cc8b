from __future__ import annotations

from django.http import HttpResponse
from django.http.response import HttpResponseRedirectBase


class HttpResponseTemporaryRedirect(HttpResponseRedirectBase):
    status_code = 307


class HttpResponsePermanentRedirect308(HttpResponseRedirectBase):
    status_code = 308


def page(html: str, status: int = 200) -> HttpResponse:
    return HttpResponse(html, status=status, content_type="text/html; charset=utf-8")


def plain(text: str, status: int) -> HttpResponse:
    return HttpResponse(text, status=status, content_type="text/plain; charset=utf-8")
