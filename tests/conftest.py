"""
pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


class DailyStore:
    """A throwaway content directory the app is pointed at."""

    def __init__(self, root: Path):
        self.root = root

    def add(self, date: str, text: str = "") -> Path:
        path = self.root / f"{date}.md"
        path.write_text(text or f"Thought for {date}.", encoding="utf-8")
        return path


@pytest.fixture
def daily_store(tmp_path: Path, settings) -> DailyStore:
    """Empty content store wired into settings."""
    root = tmp_path / "daily"
    root.mkdir()
    settings.DAILY_CONTENT_ROOT = root
    return DailyStore(root)


@pytest.fixture
def three_thoughts(daily_store: DailyStore) -> DailyStore:
    """The store from the navigation examples: three consecutive days."""
    for date in ("2024-01-01", "2024-01-02", "2024-01-03"):
        daily_store.add(date, f"# Notes\n\nThis is the thought for **{date}**.")
    return daily_store


@pytest.fixture
def static_root(tmp_path: Path, settings) -> Path:
    root = tmp_path / "static"
    root.mkdir()
    settings.SITE_STATIC_ROOT = root
    return root

