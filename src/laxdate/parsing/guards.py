"""Type guards and validity predicates over parse results.

parse_date() returns tuple[datetime | None, errors] and parse_time() returns
TimeParts | None. The TypeIs guards narrow those results for mypy; the
boolean predicates are what a form-validation layer calls per input.

Note: All guards accept None and return False, so
``if is_valid_datetime(result)`` is enough without checking errors first.

Python 3.13+ with TypeIs support (PEP 742).
"""

from datetime import datetime
from typing import Literal, TypeIs

from .dates import parse_date
from .times import TimeParts, parse_time

__all__ = [
    "is_date",
    "is_date_in_range",
    "is_time",
    "is_valid_datetime",
    "is_valid_time",
]


def is_valid_datetime(value: datetime | None) -> TypeIs[datetime]:
    """Type guard: Check if a parse_date() result is a datetime (not None).

    Example:
        >>> result, errors = parse_date("2025-01-28")
        >>> if is_valid_datetime(result):
        ...     year = result.year
    """
    return value is not None


def is_valid_time(value: TimeParts | None) -> TypeIs[TimeParts]:
    """Type guard: Check if a parse_time() result is TimeParts (not None)."""
    return value is not None


def is_date(value: str | datetime, *, now: datetime | None = None) -> bool:
    """True if value parses as a date."""
    result, _ = parse_date(value, now=now)
    return is_valid_datetime(result)


def is_time(value: str, *, now: datetime | None = None) -> bool:
    """True if value parses as a clock time."""
    return is_valid_time(parse_time(value, now=now))


def is_date_in_range(
    value: datetime,
    date_range: Literal["past", "future"] | str,
    *,
    now: datetime | None = None,
) -> bool:
    """Check a parsed date against a named range.

    "past" rejects anything later than now. "future" rejects anything before
    the start of today, so today itself counts as future. Unknown range
    names accept every date.

    Args:
        value: Parsed datetime
        date_range: "past" or "future"
        now: Reference time (default: wall clock)

    Returns:
        False if value falls outside the range, True otherwise
    """
    reference = now if now is not None else datetime.now()
    if date_range == "past" and value > reference:
        return False
    start_of_today = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    return not (date_range == "future" and value < start_of_today)
