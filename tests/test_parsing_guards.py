"""Tests for type guards and validity predicates."""

from datetime import datetime

import pytest

from laxdate.parsing import (
    is_date,
    is_date_in_range,
    is_time,
    is_valid_datetime,
    is_valid_time,
    parse_date,
    parse_time,
)


class TestTypeGuards:
    """TypeIs guards narrow parse results."""

    def test_valid_datetime(self, now: datetime) -> None:
        result, _ = parse_date("2024-01-28", now=now)
        assert is_valid_datetime(result)
        assert result.year == 2024

    def test_invalid_datetime(self, now: datetime) -> None:
        result, _ = parse_date("not a date", now=now)
        assert not is_valid_datetime(result)

    def test_valid_time(self) -> None:
        result = parse_time("1:30pm")
        assert is_valid_time(result)
        assert result.hour == 13

    def test_invalid_time(self) -> None:
        assert not is_valid_time(parse_time("25:00"))


class TestPredicates:
    """Boolean validity predicates."""

    @pytest.mark.parametrize(("text", "expected"), [
        ("5 jan 99", True),
        ("tomorrow", True),
        ("not a date", False),
        ("", False),
    ])
    def test_is_date(self, text: str, expected: bool, now: datetime) -> None:
        assert is_date(text, now=now) is expected

    @pytest.mark.parametrize(("text", "expected"), [
        ("132pm", True),
        ("now", True),
        ("25:00", False),
        ("soon", False),
    ])
    def test_is_time(self, text: str, expected: bool, now: datetime) -> None:
        assert is_time(text, now=now) is expected


class TestIsDateInRange:
    """Test is_date_in_range() past/future windows."""

    def test_past_accepts_earlier(self, now: datetime) -> None:
        assert is_date_in_range(datetime(2020, 1, 1), "past", now=now)

    def test_past_accepts_now(self, now: datetime) -> None:
        assert is_date_in_range(now, "past", now=now)

    def test_past_rejects_later(self, now: datetime) -> None:
        assert not is_date_in_range(datetime(2024, 6, 15, 10), "past", now=now)

    def test_future_accepts_later(self, now: datetime) -> None:
        assert is_date_in_range(datetime(2030, 1, 1), "future", now=now)

    def test_future_accepts_earlier_today(self, now: datetime) -> None:
        """Today counts as future even before the current time."""
        assert is_date_in_range(datetime(2024, 6, 15), "future", now=now)

    def test_future_rejects_yesterday(self, now: datetime) -> None:
        assert not is_date_in_range(datetime(2024, 6, 14, 23, 59), "future", now=now)

    def test_unknown_range_accepts_everything(self, now: datetime) -> None:
        assert is_date_in_range(datetime(1900, 1, 1), "whenever", now=now)
        assert is_date_in_range(datetime(2100, 1, 1), "", now=now)
