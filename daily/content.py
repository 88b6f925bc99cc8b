"""Filesystem-backed content store for daily thoughts.

One markdown file per entry, named after its date: ``2024-01-31.md``.
Nothing is cached; every call goes back to the directory.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from django.conf import settings

logger = logging.getLogger(__name__)

DAILY_FILE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})\.md$")


class ContentStoreUnavailable(Exception):
    """The content directory or an entry file could not be read."""


class DailyThoughtNotFound(LookupError):
    """No entry file exists for the requested date."""


def content_root() -> Path:
    return Path(settings.DAILY_CONTENT_ROOT)


def list_daily_thoughts() -> list[str]:
    """Return the dates of all entries in the content store.

    The order is whatever the directory yields; callers that display the list
    sort it themselves (see ``daily.nav.display_order``).
    """
    root = content_root()
    try:
        names = [p.name for p in root.iterdir()]
    except OSError as exc:
        raise ContentStoreUnavailable(f"cannot list {root}: {exc}") from exc

    dates: list[str] = []
    for name in names:
        m = DAILY_FILE_RE.match(name)
        if m:
            dates.append(m.group(1))

    logger.debug("found %d daily thoughts in %s", len(dates), root)
    return dates


def read_daily_thought(date: str) -> str:
    root = content_root()
    if not root.is_dir():
        raise ContentStoreUnavailable(f"content directory {root} is missing")

    path = root / f"{date}.md"
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DailyThoughtNotFound(date) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentStoreUnavailable(f"cannot read {path}: {exc}") from exc
