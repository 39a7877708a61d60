"""Tests for year/month/day disambiguation."""

from datetime import datetime

import pytest

from laxdate.diagnostics import DiagnosticCode, InvalidDateError, InvalidMonthNameError
from laxdate.parsing.disambiguator import (
    DatePart,
    DateParts,
    guess_date_part,
    guess_date_parts,
)


class TestGuessDatePart:
    """Test guess_date_part() candidate meanings."""

    @pytest.mark.parametrize(("number", "expected"), [
        (0, (DatePart.YEAR,)),
        (32, (DatePart.YEAR,)),
        (99, (DatePart.YEAR,)),
        (13, (DatePart.DAY, DatePart.YEAR)),
        (31, (DatePart.DAY, DatePart.YEAR)),
        (1, (DatePart.MONTH, DatePart.DAY, DatePart.YEAR)),
        (12, (DatePart.MONTH, DatePart.DAY, DatePart.YEAR)),
    ])
    def test_candidates(self, number: int, expected: tuple[DatePart, ...]) -> None:
        assert guess_date_part(number) == expected

    def test_known_parts_are_excluded(self) -> None:
        known = frozenset({DatePart.MONTH, DatePart.YEAR})
        assert guess_date_part(5, known) == (DatePart.DAY,)

    def test_everything_known(self) -> None:
        assert guess_date_part(5, frozenset(DatePart)) == ()


class TestDateParts:
    """Test the DateParts candidate."""

    def test_empty(self) -> None:
        parts = DateParts()
        assert not parts.is_complete
        assert parts.known() == frozenset()

    def test_partial(self) -> None:
        parts = DateParts(year=2024, day=5)
        assert not parts.is_complete
        assert parts.known() == frozenset({DatePart.YEAR, DatePart.DAY})

    def test_complete(self) -> None:
        assert DateParts(2024, 1, 5).is_complete


class TestGuessDateParts:
    """Test guess_date_parts() resolution order."""

    @pytest.mark.parametrize(("text", "expected"), [
        ("3 30 05", DateParts(2005, 3, 30)),
        ("3 05 30", DateParts(2030, 3, 5)),
        ("jan/5/30", DateParts(2030, 1, 5)),
        ("5 jan 99", DateParts(1999, 1, 5)),
        ("2022-01-01", DateParts(2022, 1, 1)),
        ("2024-13-01", DateParts(2024, 1, 13)),
        ("31/12/2024", DateParts(2024, 12, 31)),
        ("12/31/2024", DateParts(2024, 12, 31)),
        ("1/2/2024", DateParts(2024, 1, 2)),
        ("5 '99 jan", DateParts(1999, 1, 5)),
        ("1999-02-29", DateParts(1999, 2, 29)),
        ("5th mar 2024", DateParts(2024, 3, 5)),
    ])
    def test_resolves(self, text: str, expected: DateParts, now: datetime) -> None:
        assert guess_date_parts(text, now=now) == expected

    def test_two_tokens_use_current_year(self, now: datetime) -> None:
        assert guess_date_parts("02-03", now=now) == DateParts(2024, 2, 3)

    def test_two_tokens_with_four_digit_number_fail(self, now: datetime) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            guess_date_parts("jan 2024", now=now)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_DATE_FAILED

    def test_seven_tokens_always_fail(self, now: datetime) -> None:
        with pytest.raises(InvalidDateError):
            guess_date_parts("1 2 3 4 5 6 7", now=now)

    def test_unresolvable_fails(self, now: datetime) -> None:
        """Three years compete for one slot until the visit budget runs out."""
        with pytest.raises(InvalidDateError):
            guess_date_parts("2020 2021 2022", now=now)

    def test_non_numeric_token_fails(self, now: datetime) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            guess_date_parts("5 jan ?", now=now)
        assert exc_info.value.input_value == "?"

    def test_unknown_month_word_fails(self, now: datetime) -> None:
        with pytest.raises(InvalidMonthNameError) as exc_info:
            guess_date_parts("5 foo 2024", now=now)
        assert exc_info.value.token == "foo"

    def test_empty_text_fails(self, now: datetime) -> None:
        with pytest.raises(InvalidDateError):
            guess_date_parts("", now=now)
