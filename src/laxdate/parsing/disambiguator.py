"""Year/month/day assignment for ambiguous date tokens.

The guesser walks the token list repeatedly, giving each token the only
meaning it can still have:

    token              possible meanings
    -----------------  ------------------------------
    word               month (resolved by name)
    'DD, 3-5 digits    year
    0 or > 31          year
    13..31             day, year
    1..12              month, day, year

Meanings already taken by an earlier token are struck off. A token that is
still ambiguous after more than FORCE_ASSIGN_AFTER_VISITS visits is pushed
into the first free slot it fits, in month > day > year order. So for
numeric-only input the first ambiguous token becomes the month, the next
the day:

    "3 30 05"  -> month 3, day 30 (13..31 cannot be a month), year 2005
    "3 05 30"  -> month 3, day 5, year 2030

The visit counter is checked against MAX_TOKEN_VISITS after every full
pass, which bounds the work on any input.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from laxdate.constants import (
    DEFAULT_MONTH_LOCALES,
    FORCE_ASSIGN_AFTER_VISITS,
    MAX_TOKEN_VISITS,
)
from laxdate.diagnostics import ErrorTemplate, InvalidDateError
from laxdate.scanning import Cursor, is_ascii_digit, leading_int

from .months import month_to_number
from .normalizer import tokenize
from .years import year_to_full

__all__ = ["DatePart", "DateParts", "guess_date_part", "guess_date_parts"]

logger = logging.getLogger(__name__)

_MIN_TOKENS = 3
_YEAR_DIGITS = 4


class DatePart(StrEnum):
    """Role a token can play, in forced-assignment priority order."""

    MONTH = "month"
    DAY = "day"
    YEAR = "year"


@dataclass(slots=True)
class DateParts:
    """Mutable year/month/day candidate.

    Attributes:
        year: Four-digit year, or None while unresolved
        month: 1-based month, or None while unresolved
        day: 1-based day of month, or None while unresolved
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None and self.day is not None

    def known(self) -> frozenset[DatePart]:
        """Parts that already have a value."""
        return frozenset(part for part in DatePart if getattr(self, part.value) is not None)


def guess_date_part(number: int, known: frozenset[DatePart] = frozenset()) -> tuple[DatePart, ...]:
    """Possible meanings of a number, minus the parts already known.

    Example:
        >>> guess_date_part(30)
        (<DatePart.DAY: 'day'>, <DatePart.YEAR: 'year'>)
        >>> guess_date_part(5, frozenset({DatePart.MONTH}))
        (<DatePart.DAY: 'day'>, <DatePart.YEAR: 'year'>)
    """
    if number == 0 or number > 31:
        candidates: tuple[DatePart, ...] = (DatePart.YEAR,)
    elif number > 12:
        candidates = (DatePart.DAY, DatePart.YEAR)
    else:
        candidates = (DatePart.MONTH, DatePart.DAY, DatePart.YEAR)
    return tuple(part for part in candidates if part not in known)


def guess_date_parts(
    text: str,
    *,
    now: datetime,
    month_locales: tuple[str, ...] = DEFAULT_MONTH_LOCALES,
) -> DateParts:
    """Resolve residual date text into year, month and day.

    Day-of-month is not checked against the month length; that is left to
    the datetime assembly step.

    Args:
        text: Normalized date text (see normalizer.normalize)
        now: Reference time; supplies the year when only two tokens are given
            and the pivot for two-digit years
        month_locales: Locales whose month names are recognized

    Returns:
        Fully resolved DateParts (month is 1-based)

    Raises:
        InvalidDateError: If the tokens cannot be resolved
        InvalidMonthNameError: If a word token names no month
    """
    tokens = tokenize(text)

    if len(tokens) < _MIN_TOKENS:
        if _has_digit_run(text, _YEAR_DIGITS):
            raise InvalidDateError(
                ErrorTemplate.parse_date_failed(text, "too few parts next to a four-digit number"),
                input_value=text,
                parse_type="date",
            )
        tokens.insert(0, str(now.year))

    parts = DateParts()
    visits = 0
    while not parts.is_complete:
        for token in tokens:
            visits += 1
            _visit(token, parts, visits, now=now, month_locales=month_locales)

        if visits > MAX_TOKEN_VISITS:
            logger.debug("Gave up on %r after %d token visits: %s", text, visits, parts)
            raise InvalidDateError(
                ErrorTemplate.parse_date_failed(text, "could not tell year, month and day apart"),
                input_value=text,
                parse_type="date",
            )

    return parts


def _visit(
    token: str,
    parts: DateParts,
    visits: int,
    *,
    now: datetime,
    month_locales: tuple[str, ...],
) -> None:
    """Assign token to a part of the candidate if its meaning is settled."""
    if token.isalpha():
        if parts.month is None:
            parts.month = month_to_number(token, locales=month_locales) + 1
        return

    if _is_year_token(token):
        if parts.year is None:
            parts.year = year_to_full(token, now=now)
        return

    number = leading_int(token)
    if number is None:
        raise InvalidDateError(
            ErrorTemplate.parse_date_failed(token, f"token '{token}' is not a number"),
            input_value=token,
            parse_type="date",
        )

    meanings = guess_date_part(number, parts.known())
    if len(meanings) == 1:
        _assign(parts, meanings[0], number, now=now)
        return

    if visits > FORCE_ASSIGN_AFTER_VISITS and meanings:
        logger.debug("Forcing %r into %s after %d visits", token, meanings[0], visits)
        _assign(parts, meanings[0], number, now=now)


def _assign(parts: DateParts, part: DatePart, number: int, *, now: datetime) -> None:
    match part:
        case DatePart.MONTH:
            parts.month = number
        case DatePart.DAY:
            parts.day = number
        case DatePart.YEAR:
            parts.year = year_to_full(number, now=now)


def _is_year_token(token: str) -> bool:
    """'DD (quoted two-digit year) or a bare run of 3 to 5 digits."""
    if token.startswith("'"):
        rest = token[1:]
        return len(rest) == 2 and all(is_ascii_digit(ch) for ch in rest)
    return 3 <= len(token) <= 5 and all(is_ascii_digit(ch) for ch in token)


def _has_digit_run(text: str, length: int) -> bool:
    cursor = Cursor(text)
    while not cursor.is_eof:
        end = cursor.skip_while(is_ascii_digit)
        if end.pos - cursor.pos >= length:
            return True
        cursor = end.advance() if end.pos == cursor.pos else end
    return False
