from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Neighbors:
    previous: Optional[str] = None
    next: Optional[str] = None


def display_order(dates: Iterable[str]) -> list[str]:
    """Most recent first. ``YYYY-MM-DD`` sorts chronologically as a string."""
    return sorted(dates, reverse=True)


def neighbors(date: str, dates: list[str]) -> Neighbors:
    """Find the entries around ``date`` in a list already in display order.

    ``previous`` is the chronologically earlier entry, ``next`` the later one.
    A date that isn't in the list has neither.
    """
    try:
        index = dates.index(date)
    except ValueError:
        return Neighbors()

    previous = dates[index + 1] if index + 1 < len(dates) else None
    next_ = dates[index - 1] if index > 0 else None
    return Neighbors(previous=previous, next=next_)
