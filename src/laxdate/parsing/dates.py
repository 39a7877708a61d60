"""Free-text date parsing.

- parse_date() returns tuple[datetime | None, tuple[DateParseError, ...]]
- Never raises for string input: failures come back in the error tuple
- "Now" is an explicit keyword argument; when omitted the wall clock is read
  once here and passed down, so every step of one call sees the same instant

Day-of-month overflow rolls into the following month ("1999-02-29" is
1999-03-01), the way calendar constructors normalize out-of-range days.

Thread-safe. No shared mutable state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta

from laxdate.constants import DEFAULT_MONTH_LOCALES, MAX_INPUT_LENGTH
from laxdate.diagnostics import (
    DateParseError,
    ErrorTemplate,
    InvalidDateError,
    InvalidMonthNameError,
)

from .disambiguator import DateParts, guess_date_parts
from .normalizer import normalize
from .times import TimeParts

__all__ = ["assemble_datetime", "parse_date"]

logger = logging.getLogger(__name__)


def parse_date(
    value: str | datetime | date,
    *,
    now: datetime | None = None,
    month_locales: tuple[str, ...] = DEFAULT_MONTH_LOCALES,
) -> tuple[datetime | None, tuple[DateParseError, ...]]:
    """Parse loosely formatted date (and optional time) text.

    Args:
        value: Free text such as "5 Jan 99", "jan/5/30", "20010203",
            "tomorrow" or "3/4 1:30pm". A datetime is returned unchanged;
            a date becomes midnight of that day.
        now: Reference time for relative words, implicit years and the
            two-digit year pivot (default: wall clock)
        month_locales: Locales whose CLDR month names are recognized

    Returns:
        Tuple of (result, errors):
        - result: Parsed naive datetime, or None if parsing failed
        - errors: Tuple of DateParseError (empty tuple on success). The
          error's input_value is the fragment that could not be resolved.

    Examples:
        >>> result, errors = parse_date("3 30 05", now=datetime(2024, 1, 1))
        >>> result
        datetime.datetime(2005, 3, 30, 0, 0)
        >>> errors
        ()

        >>> result, errors = parse_date("not a date")
        >>> result is None
        True
        >>> len(errors)
        1
    """
    if isinstance(value, datetime):
        return (value, ())
    if isinstance(value, date):
        return (datetime.combine(value, time()), ())

    # Runtime defense for untyped callers
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_date_failed(  # type: ignore[unreachable]
            str(value), f"Expected string, got {type(value).__name__}"
        )
        return (None, (DateParseError(diagnostic, input_value=str(value), parse_type="date"),))

    if len(value) > MAX_INPUT_LENGTH:
        diagnostic = ErrorTemplate.input_too_long(value, MAX_INPUT_LENGTH)
        return (None, (DateParseError(diagnostic, input_value=value, parse_type="date"),))

    reference = now if now is not None else datetime.now()

    normalized = normalize(value, now=reference)
    if normalized.early is not None:
        return (normalized.early, ())

    try:
        parts = guess_date_parts(normalized.text, now=reference, month_locales=month_locales)
        result = assemble_datetime(parts, normalized.time)
    except (InvalidDateError, InvalidMonthNameError) as e:
        logger.debug("Invalid date %r: %s", value, e)
        return (None, (e,))

    return (result, ())


def assemble_datetime(parts: DateParts, clock: TimeParts | None = None) -> datetime:
    """Combine resolved date parts with a time (midnight if None).

    Args:
        parts: Complete DateParts (1-based month)
        clock: Time of day

    Returns:
        Naive datetime with microsecond 0

    Raises:
        InvalidDateError: If parts are incomplete or the year is out of range
    """
    if parts.year is None or parts.month is None or parts.day is None:
        raise InvalidDateError(
            ErrorTemplate.parse_date_failed(str(parts), "date parts are incomplete"),
            parse_type="date",
        )

    clock = clock or TimeParts(0, 0, 0)
    try:
        first_of_month = datetime(
            parts.year, parts.month, 1, clock.hour, clock.minute, clock.second
        )
        return first_of_month + timedelta(days=parts.day - 1)
    except (ValueError, OverflowError) as e:
        text = f"{parts.year}-{parts.month}-{parts.day}"
        raise InvalidDateError(
            ErrorTemplate.parse_date_failed(text, str(e)),
            input_value=text,
            parse_type="date",
        ) from e
