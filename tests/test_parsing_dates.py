"""Tests for free-text date parsing.

- parse_date() returns tuple[datetime | None, tuple[DateParseError, ...]]
- Never raises for string input: errors come back in the tuple
"""

from datetime import date, datetime

import pytest
from hypothesis import given

from laxdate.constants import MAX_INPUT_LENGTH
from laxdate.diagnostics import (
    DateParseError,
    DiagnosticCode,
    InvalidDateError,
    InvalidMonthNameError,
)
from laxdate.parsing import parse_date
from laxdate.parsing.dates import assemble_datetime
from laxdate.parsing.disambiguator import DateParts
from laxdate.parsing.times import TimeParts
from tests.strategies import spelled_dates


class TestParseDate:
    """Test parse_date() results."""

    @pytest.mark.parametrize(("text", "expected"), [
        ("2022-01-01", datetime(2022, 1, 1)),
        ("3 30 05", datetime(2005, 3, 30)),
        ("3 05 30", datetime(2030, 3, 5)),
        ("jan/5/30", datetime(2030, 1, 5)),
        ("5 Jan 99", datetime(1999, 1, 5)),
        ("02-03", datetime(2024, 2, 3)),
        ("20010203", datetime(2001, 2, 3)),
        ("010203", datetime(2001, 2, 3)),
        ("Friday, January 5th 2024", datetime(2024, 1, 5)),
        ("5 févr. 2024", datetime(2024, 2, 5)),
        ("mardi 5 mars 2024", datetime(2024, 3, 5)),
        ("March 5, 2024", datetime(2024, 3, 5)),
        ("2024.03.05", datetime(2024, 3, 5)),
    ])
    def test_dates(self, text: str, expected: datetime, now: datetime) -> None:
        result, errors = parse_date(text, now=now)
        assert errors == ()
        assert result == expected

    @pytest.mark.parametrize(("text", "expected"), [
        ("jan 5 2024 1:30pm", datetime(2024, 1, 5, 13, 30)),
        ("3/4/2024 10:15:30", datetime(2024, 3, 4, 10, 15, 30)),
        ("2024-03-04 12:05 am", datetime(2024, 3, 4, 0, 5)),
    ])
    def test_date_with_time(self, text: str, expected: datetime, now: datetime) -> None:
        result, errors = parse_date(text, now=now)
        assert errors == ()
        assert result == expected

    def test_time_only_is_today(self, now: datetime) -> None:
        result, errors = parse_date("1:30pm", now=now)
        assert errors == ()
        assert result == datetime(2024, 6, 15, 13, 30)

    def test_relative_words(self, now: datetime) -> None:
        assert parse_date("today", now=now) == (datetime(2024, 6, 15), ())
        assert parse_date("now", now=now) == (datetime(2024, 6, 15), ())
        assert parse_date("Tomorrow", now=now) == (datetime(2024, 6, 16), ())

    def test_day_overflow_rolls_into_next_month(self, now: datetime) -> None:
        result, _ = parse_date("1999-02-29", now=now)
        assert result == datetime(1999, 3, 1)

    def test_day_31_in_30_day_month(self, now: datetime) -> None:
        result, _ = parse_date("2024-04-31", now=now)
        assert result == datetime(2024, 5, 1)

    def test_leap_day(self, now: datetime) -> None:
        result, _ = parse_date("2024-02-29", now=now)
        assert result == datetime(2024, 2, 29)

    def test_result_has_no_microseconds(self) -> None:
        result, _ = parse_date("2:00pm", now=datetime(2024, 6, 15, 9, 45, 30, 123456))
        assert result is not None
        assert result.microsecond == 0

    def test_datetime_passthrough(self) -> None:
        value = datetime(2020, 5, 6, 7, 8, 9, 10)
        assert parse_date(value) == (value, ())

    def test_date_becomes_midnight(self) -> None:
        assert parse_date(date(2020, 5, 6)) == (datetime(2020, 5, 6), ())


class TestParseDateErrors:
    """Invalid input returns (None, errors)."""

    @pytest.mark.parametrize("text", [
        "not a date",
        "",
        "jan 2024",
        "1 2 3 4 5 6 7",
        "5 jan ?",
        "2020 2021 2022",
    ])
    def test_invalid(self, text: str, now: datetime) -> None:
        result, errors = parse_date(text, now=now)
        assert result is None
        assert len(errors) == 1
        assert isinstance(errors[0], InvalidDateError)
        assert errors[0].parse_type == "date"
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_DATE_FAILED

    def test_unknown_month_word(self, now: datetime) -> None:
        result, errors = parse_date("5 foo 2024", now=now)
        assert result is None
        assert isinstance(errors[0], InvalidMonthNameError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_MONTH_NAME_INVALID
        assert errors[0].input_value == "foo"

    def test_year_out_of_range(self, now: datetime) -> None:
        result, errors = parse_date("5 jan 99999", now=now)
        assert result is None
        assert isinstance(errors[0], InvalidDateError)

    def test_input_too_long(self, now: datetime) -> None:
        text = "1" * (MAX_INPUT_LENGTH + 1)
        result, errors = parse_date(text, now=now)
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code == DiagnosticCode.PARSE_INPUT_TOO_LONG

    def test_non_string_input(self) -> None:
        result, errors = parse_date(12345)  # type: ignore[arg-type]
        assert result is None
        assert isinstance(errors[0], DateParseError)
        assert "Expected string" in str(errors[0])

    def test_errors_are_not_raised(self, now: datetime) -> None:
        """Error objects are returned, so the caller decides whether to raise."""
        _, errors = parse_date("not a date", now=now)
        with pytest.raises(InvalidDateError):
            raise errors[0]


class TestAssembleDatetime:
    """Test assemble_datetime()."""

    def test_midnight_default(self) -> None:
        assert assemble_datetime(DateParts(2024, 3, 5)) == datetime(2024, 3, 5)

    def test_with_time(self) -> None:
        result = assemble_datetime(DateParts(2024, 3, 5), TimeParts(13, 30, 15))
        assert result == datetime(2024, 3, 5, 13, 30, 15)

    def test_incomplete_parts_raise(self) -> None:
        with pytest.raises(InvalidDateError, match="incomplete"):
            assemble_datetime(DateParts(2024, None, 5))

    def test_month_out_of_range_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            assemble_datetime(DateParts(2024, 13, 5))

    def test_day_overflow_rolls_over_year_end(self) -> None:
        assert assemble_datetime(DateParts(2024, 12, 32)) == datetime(2025, 1, 1)


class TestParseDateProperties:
    """Property tests for parse_date()."""

    @given(case=spelled_dates())
    def test_spelled_dates_resolve_exactly(self, case: tuple[str, date]) -> None:
        text, expected = case
        result, errors = parse_date(text, now=datetime(2024, 6, 15))
        assert errors == ()
        assert result == datetime.combine(expected, datetime.min.time())
