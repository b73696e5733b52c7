"""
Core types and constants for GitWrap.

This module provides:
- ActivityWindow, the inclusive UTC calendar-year range used to filter activity
- Fixed provider limits (page size, fan-out cap, ranking depth)
- Login and year checks applied before any provider call
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone

# GitHub returns at most 100 items per page; only the first page is read.
PAGE_SIZE = 100

# Repositories whose commits are fetched, in provider order.
MAX_COMMIT_REPOS = 10

# Entries kept in the language and repository rankings.
TOP_N = 5

# GitHub launched in 2008; nothing earlier can have activity.
MIN_YEAR = 2008

# Current year + 1, so a new year's card works around New Year in any timezone.
MAX_YEAR_OFFSET = 1

# GitHub logins: alphanumerics and hyphens, not starting with a hyphen, at most 39 chars.
LOGIN_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$")


def is_valid_login(username: str) -> bool:
    return LOGIN_PATTERN.fullmatch(username) is not None


def is_valid_year(year: int) -> bool:
    max_year = datetime.now(tz=timezone.utc).year + MAX_YEAR_OFFSET
    return MIN_YEAR <= year <= max_year


@dataclass(frozen=True)
class ActivityWindow:
    """
    Inclusive [start, end] range in UTC.

    Both bounds are inclusive, so a timestamp equal to either end is inside
    the window.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("ActivityWindow bounds must be timezone-aware")
        if self.start > self.end:
            raise ValueError(f"ActivityWindow start {self.start} is after end {self.end}")

    @classmethod
    def for_year(cls, year: int) -> "ActivityWindow":
        """Window covering Jan 1 00:00:00Z through Dec 31 23:59:59Z of ``year``."""
        return cls(
            start=datetime(year, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
            end=datetime(year, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        )

    @property
    def year(self) -> int:
        return self.start.year

    def contains(self, moment: datetime | None) -> bool:
        if moment is None:
            return False
        return self.start <= moment <= self.end

    @property
    def since(self) -> str:
        """Start bound in the ISO form the commits endpoint expects."""
        return _isoformat_z(self.start)

    @property
    def until(self) -> str:
        return _isoformat_z(self.end)

    @property
    def search_range(self) -> str:
        """Date range qualifier for the search API, e.g. ``2025-01-01..2025-12-31``."""
        return f"{self.start.date().isoformat()}..{self.end.date().isoformat()}"


def _isoformat_z(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp (``2025-03-01T12:00:00Z``) to an aware datetime."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
