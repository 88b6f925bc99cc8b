from __future__ import annotations

import logging

from django.conf import settings
from django.http.request import split_domain_port

from .content import ContentStoreUnavailable
from .responses import HttpResponsePermanentRedirect308, plain

logger = logging.getLogger(__name__)


class CanonicalDomainMiddleware:
    """Send every request on a legacy host to the canonical origin.

    Runs before URL resolution, so the path is ignored. Legacy hosts are
    matched on the raw Host header and need not be in ALLOWED_HOSTS.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        host, _ = split_domain_port(request.META.get("HTTP_HOST") or request.META.get("SERVER_NAME", ""))
        if host in settings.LEGACY_HOSTS:
            logger.debug("redirecting legacy host %s", host)
            return HttpResponsePermanentRedirect308(settings.CANONICAL_ORIGIN)
        return self.get_response(request)


class ContentStoreErrorMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, ContentStoreUnavailable):
            return None
        logger.error("content store unavailable for %s", request.path, exc_info=exception)
        return plain("internal server error", status=500)
