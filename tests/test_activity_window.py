"""
Tests for ActivityWindow and timestamp parsing.
"""

from datetime import datetime, timedelta, timezone

import pytest

from gitwrap.core.types import ActivityWindow, is_valid_login, is_valid_year, parse_timestamp


class TestActivityWindow:
    def test_year_bounds(self):
        window = ActivityWindow.for_year(2025)
        assert window.start == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2025, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
        assert window.year == 2025

    def test_bounds_are_inclusive(self):
        window = ActivityWindow.for_year(2025)
        assert window.contains(window.start)
        assert window.contains(window.end)

    def test_one_second_outside_is_excluded(self):
        window = ActivityWindow.for_year(2025)
        assert not window.contains(window.start - timedelta(seconds=1))
        assert not window.contains(window.end + timedelta(seconds=1))

    def test_none_is_never_contained(self):
        assert not ActivityWindow.for_year(2025).contains(None)

    def test_query_strings(self):
        window = ActivityWindow.for_year(2024)
        assert window.since == "2024-01-01T00:00:00Z"
        assert window.until == "2024-12-31T23:59:59Z"
        assert window.search_range == "2024-01-01..2024-12-31"

    def test_start_after_end_rejected(self):
        start = datetime(2025, 2, 1, tzinfo=timezone.utc)
        with pytest.raises(ValueError):
            ActivityWindow(start=start, end=start - timedelta(days=1))

    def test_naive_bounds_rejected(self):
        with pytest.raises(ValueError):
            ActivityWindow(start=datetime(2025, 1, 1), end=datetime(2025, 12, 31))

    def test_window_is_immutable(self):
        window = ActivityWindow.for_year(2025)
        with pytest.raises(AttributeError):
            window.start = datetime(2020, 1, 1, tzinfo=timezone.utc)


class TestParseTimestamp:
    def test_zulu_suffix(self):
        assert parse_timestamp("2025-01-01T00:00:00Z") == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_offset_is_normalized_for_comparison(self):
        parsed = parse_timestamp("2025-01-01T01:00:00+01:00")
        assert parsed == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_empty_values(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None


class TestRequestChecks:
    @pytest.mark.parametrize("login", ["octocat", "mona-lisa", "a", "A1", "a" * 39])
    def test_valid_logins(self, login):
        assert is_valid_login(login)

    @pytest.mark.parametrize("login", ["", "-a", "a" * 40, "../meta", "a/b", "a b", "a:b", "a_b"])
    def test_invalid_logins(self, login):
        assert not is_valid_login(login)

    def test_year_bounds(self):
        next_year = datetime.now(tz=timezone.utc).year + 1
        assert is_valid_year(2008)
        assert is_valid_year(next_year)
        assert not is_valid_year(2007)
        assert not is_valid_year(next_year + 1)
        assert not is_valid_year(0)
