"""Month token resolution.

Resolution order for a word token:
    1. Babel CLDR month names (wide and abbreviated, format and stand-alone
       contexts) of each configured locale, compared case-insensitively
       with trailing periods ignored ("sept." == "sept").
    2. English three-letter stems: any word of three or more letters whose
       first three letters spell an English abbreviated month ("janu",
       "decem").
    3. A short prefix table for English/French/Spanish spellings that CLDR
       abbreviations miss. The table is ordered and the first matching
       prefix wins, so it is a tuple, not a dict.

Thread-safe. Name tables are built once per locale tuple and cached.

Python 3.13+.
"""

from __future__ import annotations

import logging
from functools import cache

from babel import UnknownLocaleError

from laxdate.constants import DEFAULT_MONTH_LOCALES
from laxdate.diagnostics import ErrorTemplate, InvalidMonthNameError
from laxdate.locale_utils import get_babel_locale
from laxdate.scanning import leading_int

__all__ = ["MONTH_PREFIXES", "month_to_number"]

logger = logging.getLogger(__name__)

# (prefix, zero-based month). Order is significant: first match wins.
MONTH_PREFIXES: tuple[tuple[str, int], ...] = (
    ("ja", 0),
    ("en", 0),
    ("fe", 1),
    ("fé", 1),
    ("ap", 3),
    ("ab", 3),
    ("av", 3),
    ("mai", 4),
    ("juin", 5),
    ("juil", 6),
    ("au", 7),
    ("ag", 7),
    ("ao", 7),
    ("se", 8),
    ("o", 9),
    ("n", 10),
    ("d", 11),
)

_CONTEXTS: tuple[str, ...] = ("format", "stand-alone")
_WIDTHS: tuple[str, ...] = ("wide", "abbreviated")


def month_to_number(
    token: int | str,
    *,
    locales: tuple[str, ...] = DEFAULT_MONTH_LOCALES,
) -> int:
    """Convert a month token to a zero-based month index.

    Numeric tokens are not range checked: the caller decides whether 13
    is acceptable.

    Args:
        token: Month number (1-based) or month name
        locales: Locales whose CLDR month names are recognized

    Returns:
        Zero-based month index (January == 0)

    Raises:
        InvalidMonthNameError: If the token names no month

    Example:
        >>> month_to_number("3")
        2
        >>> month_to_number("January")
        0
        >>> month_to_number("févr.")
        1
        >>> month_to_number("juil")
        6
    """
    if isinstance(token, int):
        return token - 1

    number = leading_int(token)
    if number is not None:
        return number - 1

    word = token.strip().lower().rstrip(".")
    if word:
        names = _month_name_table(locales)
        if word in names:
            return names[word]

        if len(word) >= 3:
            stems = _english_stems()
            if word[:3] in stems:
                return stems[word[:3]]

        for prefix, month in MONTH_PREFIXES:
            if word.startswith(prefix):
                return month

    logger.debug("No month matches token %r", token)
    raise InvalidMonthNameError(ErrorTemplate.month_name_invalid(token), token=token)


@cache
def _month_name_table(locales: tuple[str, ...]) -> dict[str, int]:
    """Map lowercased CLDR month names of the given locales to zero-based months.

    Unknown locales are skipped with a warning. Earlier locales win when two
    locales spell different months the same way.
    """
    table: dict[str, int] = {}
    for locale_code in locales:
        try:
            locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning("Unknown month locale '%s': %s. Skipping", locale_code, e)
            continue
        for context in _CONTEXTS:
            for width in _WIDTHS:
                for month, name in locale.months[context][width].items():
                    table.setdefault(name.lower().rstrip("."), month - 1)
    return table


@cache
def _english_stems() -> dict[str, int]:
    """Three-letter English month stems from CLDR ("jan" -> 0 ... "dec" -> 11)."""
    abbreviated = get_babel_locale("en").months["format"]["abbreviated"]
    return {name[:3].lower(): month - 1 for month, name in abbreviated.items()}
