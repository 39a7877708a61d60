"""Moment-style template formatting.

Template vocabulary:

    token   output                                  2024-03-05 14:07:09.250 (Tue)
    ------  --------------------------------------  -----------------------------
    YYYY    four-digit year                         2024
    YY      two-digit year                          24
    M MM    month, plain / zero-padded              3  03
    MMM     first three letters of month name       Mar
    MMMM    month name                              March
    D DD    day of month, plain / zero-padded       5  05
    d       weekday number, Sunday == 0             2
    dd      first two letters of weekday name       Tu
    ddd     first three letters of weekday name     Tue
    dddd    weekday name                            Tuesday
    H HH    24-hour clock, plain / zero-padded      14  14
    h hh    12-hour clock, plain / zero-padded      2  02
    m mm    minute, plain / zero-padded             7  07
    s ss    second, plain / zero-padded             9  09
    SSS     milliseconds                            250
    A a     AM/PM, upper / lower case               PM  pm

Runs of a token letter are taken longest-first up to the family's maximum
("MMMMM" is "MMMM" then "M"). A run with no entry above ("Y", "YYY") is
copied to the output unchanged, as is every other character. Text in
square brackets is copied without the brackets ("[at] h:mm" -> "at 2:07").

Month and weekday names come from Babel CLDR wide names of the requested
locale.

Python 3.13+. Uses Babel for month and weekday names.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import cache

from babel import UnknownLocaleError

from laxdate.constants import DEFAULT_DATE_TEMPLATE, DEFAULT_FORMAT_LOCALE
from laxdate.locale_utils import get_babel_locale
from laxdate.parsing.dates import parse_date
from laxdate.scanning import Cursor

__all__ = ["TOKEN_FAMILIES", "format_datetime", "tokenize_template"]

logger = logging.getLogger(__name__)

# Letter -> longest run that can form a token
TOKEN_FAMILIES: dict[str, int] = {
    "Y": 4,
    "M": 4,
    "D": 2,
    "d": 4,
    "H": 2,
    "h": 2,
    "m": 2,
    "s": 2,
}

_MILLIS_TOKEN = "SSS"
_MERIDIEM_TOKENS = "Aa"


@dataclass(frozen=True, slots=True)
class _Names:
    """Month names (index 0 == January) and weekday names (index 0 == Sunday)."""

    months: tuple[str, ...]
    weekdays: tuple[str, ...]


type _Renderer = Callable[[datetime, _Names], str]


def _hour12(value: datetime) -> int:
    return value.hour % 12 or 12


def _weekday(value: datetime) -> int:
    # datetime.weekday() counts from Monday
    return (value.weekday() + 1) % 7


_RENDERERS: dict[str, _Renderer] = {
    "YYYY": lambda v, _: f"{v.year:04d}",
    "YY": lambda v, _: f"{v.year % 100:02d}",
    "M": lambda v, _: str(v.month),
    "MM": lambda v, _: f"{v.month:02d}",
    "MMM": lambda v, n: n.months[v.month - 1][:3],
    "MMMM": lambda v, n: n.months[v.month - 1],
    "D": lambda v, _: str(v.day),
    "DD": lambda v, _: f"{v.day:02d}",
    "d": lambda v, _: str(_weekday(v)),
    "dd": lambda v, n: n.weekdays[_weekday(v)][:2],
    "ddd": lambda v, n: n.weekdays[_weekday(v)][:3],
    "dddd": lambda v, n: n.weekdays[_weekday(v)],
    "H": lambda v, _: str(v.hour),
    "HH": lambda v, _: f"{v.hour:02d}",
    "h": lambda v, _: str(_hour12(v)),
    "hh": lambda v, _: f"{_hour12(v):02d}",
    "m": lambda v, _: str(v.minute),
    "mm": lambda v, _: f"{v.minute:02d}",
    "s": lambda v, _: str(v.second),
    "ss": lambda v, _: f"{v.second:02d}",
    "SSS": lambda v, _: f"{v.microsecond // 1000:03d}",
    "A": lambda v, _: "PM" if v.hour >= 12 else "AM",
    "a": lambda v, _: "pm" if v.hour >= 12 else "am",
}


def format_datetime(
    value: datetime | str | None,
    template: str | None = DEFAULT_DATE_TEMPLATE,
    *,
    now: datetime | None = None,
    locale_code: str = DEFAULT_FORMAT_LOCALE,
) -> str:
    """Render a datetime through a moment-style template.

    Args:
        value: datetime, or date text parsed with parse_date()
        template: Template (default: "YYYY-MM-DD"; None also selects it)
        now: Reference time when value is text (default: wall clock)
        locale_code: Locale for month and weekday names (BCP-47 or POSIX)

    Returns:
        Formatted string, or "" if value is missing or not a valid date

    Examples:
        >>> format_datetime(datetime(2024, 3, 5, 14, 7), "ddd, MMM D [at] h:mm a")
        'Tue, Mar 5 at 2:07 pm'
        >>> format_datetime("not a date")
        ''
    """
    if value is None:
        return ""
    if isinstance(value, str):
        parsed, errors = parse_date(value, now=now)
        if parsed is None:
            logger.debug("Cannot format %r: %s", value, errors[0] if errors else "invalid")
            return ""
        value = parsed

    names = _names_for(locale_code)
    parts: list[str] = []
    for token, is_literal in tokenize_template(template or DEFAULT_DATE_TEMPLATE):
        parts.append(token if is_literal else _RENDERERS[token](value, names))
    return "".join(parts)


def tokenize_template(template: str) -> list[tuple[str, bool]]:
    """Split a template into (text, is_literal) pieces.

    Adjacent literal characters are merged into one piece.

    Example:
        >>> tokenize_template("YYYY-MM [at] Y")
        [('YYYY', False), ('-', True), ('MM', False), (' at Y', True)]
    """
    pieces: list[tuple[str, bool]] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            pieces.append(("".join(literal), True))
            literal.clear()

    cursor = Cursor(template)
    while not cursor.is_eof:
        char = cursor.current

        if char == "[":
            close = template.find("]", cursor.pos + 1)
            if close > cursor.pos + 1:
                literal.append(template[cursor.pos + 1 : close])
                cursor = Cursor(template, close + 1)
                continue

        elif char in TOKEN_FAMILIES:
            longest = TOKEN_FAMILIES[char]
            end = cursor
            while end.pos - cursor.pos < longest and end.peek() == char:
                end = end.advance()
            run = cursor.slice_to(end.pos)
            if run in _RENDERERS:
                flush()
                pieces.append((run, False))
            else:
                literal.append(run)
            cursor = end
            continue

        elif template.startswith(_MILLIS_TOKEN, cursor.pos):
            flush()
            pieces.append((_MILLIS_TOKEN, False))
            cursor = cursor.advance(len(_MILLIS_TOKEN))
            continue

        elif char in _MERIDIEM_TOKENS:
            flush()
            pieces.append((char, False))
            cursor = cursor.advance()
            continue

        literal.append(char)
        cursor = cursor.advance()

    flush()
    return pieces


@cache
def _names_for(locale_code: str) -> _Names:
    """Wide month and weekday names for a locale, English if it is unknown."""
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown format locale '%s': %s. Using '%s'", locale_code, e, DEFAULT_FORMAT_LOCALE
        )
        locale = get_babel_locale(DEFAULT_FORMAT_LOCALE)

    months = locale.months["format"]["wide"]
    days = locale.days["format"]["wide"]
    # Babel numbers weekdays from Monday == 0
    return _Names(
        months=tuple(months[month] for month in range(1, 13)),
        weekdays=tuple(days[(day + 6) % 7] for day in range(7)),
    )
