"""
Unit tests for the request middleware, without going through URL resolution.
"""

from django.http import HttpResponse
from django.test import RequestFactory

from daily.content import ContentStoreUnavailable
from daily.middleware import CanonicalDomainMiddleware, ContentStoreErrorMiddleware


def ok(request):
    return HttpResponse("ok")


def test_passes_through_other_hosts(rf: RequestFactory):
    middleware = CanonicalDomainMiddleware(ok)

    response = middleware(rf.get("/daily", HTTP_HOST="www.crosscut.cc"))

    assert response.content == b"ok"


def test_canonical_origin_is_configurable(rf: RequestFactory, settings):
    settings.LEGACY_HOSTS = {"old.example"}
    settings.ALLOWED_HOSTS = ["old.example"]
    settings.CANONICAL_ORIGIN = "https://new.example/"
    middleware = CanonicalDomainMiddleware(ok)

    response = middleware(rf.get("/anything", HTTP_HOST="old.example"))

    assert response.status_code == 308
    assert response["Location"] == "https://new.example/"


def test_store_errors_become_500(rf: RequestFactory):
    middleware = ContentStoreErrorMiddleware(ok)

    response = middleware.process_exception(rf.get("/daily"), ContentStoreUnavailable("disk on fire"))

    assert response.status_code == 500
    assert response.content == b"internal server error"


def test_other_errors_are_left_alone(rf: RequestFactory):
    middleware = ContentStoreErrorMiddleware(ok)

    assert middleware.process_exception(rf.get("/daily"), ValueError("boom")) is None
