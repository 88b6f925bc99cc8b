"""Django settings for the Crosscut website.

Everything deployment-specific comes from the environment; the defaults are
good enough for running the site locally with ``manage.py runserver``.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.environ.get(name)
    if not value:
        return default
    return [p.strip() for p in value.split(",") if p.strip()]


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = _env_bool("DJANGO_DEBUG")

# Hosts that only exist to forward visitors to the canonical origin.
CANONICAL_ORIGIN = os.environ.get("CANONICAL_ORIGIN", "https://www.crosscut.cc/")
LEGACY_HOSTS = frozenset(
    _env_list("LEGACY_HOSTS", ["crosscut.deno.dev", "capi.hannobraun.com", "crosscut.cc"])
)

ALLOWED_HOSTS = [
    *_env_list("DJANGO_ALLOWED_HOSTS", ["www.crosscut.cc", "localhost", "127.0.0.1"]),
    *sorted(LEGACY_HOSTS),
]

INSTALLED_APPS = [
    "daily",
]

MIDDLEWARE = [
    "daily.middleware.CanonicalDomainMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "daily.middleware.ContentStoreErrorMiddleware",
]

ROOT_URLCONF = "crosscut.urls"
WSGI_APPLICATION = "crosscut.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

# No database: the content store is a directory of markdown files.
DATABASES = {}

# Slash handling is spelled out in daily/urls.py.
APPEND_SLASH = False

LANGUAGE_CODE = "en"
USE_I18N = False
USE_TZ = True
TIME_ZONE = "UTC"

DAILY_CONTENT_ROOT = Path(
    os.environ.get("CROSSCUT_CONTENT_ROOT", BASE_DIR / "content" / "daily")
)
SITE_STATIC_ROOT = Path(os.environ.get("CROSSCUT_STATIC_ROOT", BASE_DIR / "static"))

SITE_PROFILE = {
    "name": "Crosscut",
    "author": "Hanno Braun",
    "email": "hello@hannobraun.com",
    "address": [
        "Hanno Braun",
        "Untere Pfarrgasse 19",
        "64720 Michelstadt",
        "Germany",
    ],
    "project_url": "https://github.com/hannobraun/crosscut",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "daily": {
            "handlers": ["console"],
            "level": os.environ.get("DJANGO_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
