"""Input normalization and tokenizing.

normalize() turns raw text into the residual date text the disambiguator
works on, peeling off the parts that need no guessing:

    1. lowercase and trim
    2. pull out an embedded clock time ("jan 5 1:30pm" -> "jan 5" + 13:30)
    3. time-only input becomes today at that time (early result)
    4. drop weekday words ("fri", "mardi", "sunday.")
    5. now / today / tomorrow become midnight of that day (early result)
    6. undelimited YYYYMMDD / YYMMDD blobs get separators

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from laxdate.scanning import Cursor, is_ascii_digit, is_word_char

from .times import TimeParts, find_embedded_time, parse_time
from .years import year_to_full

__all__ = [
    "DATE_SEPARATORS",
    "WEEKDAY_STEMS",
    "NormalizedInput",
    "normalize",
    "strip_weekdays",
    "tokenize",
]

logger = logging.getLogger(__name__)

DATE_SEPARATORS: str = "-/:.,"

# English, French and Spanish weekday stems. "mard" rather than "mar" keeps
# March intact; words need three or more letters to count.
WEEKDAY_STEMS: tuple[str, ...] = (
    "mo", "tu", "we", "th", "fr", "sa", "su",
    "lu", "mard", "mer", "jeu", "ve", "dom",
)

_MIN_WEEKDAY_LETTERS = 3
_TIME_ONLY_RESIDUE = 2


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """Result of normalize().

    Attributes:
        text: Residual date text for the disambiguator
        time: Clock time extracted from the input, if any parsed
        early: Final datetime when no disambiguation is needed
    """

    text: str
    time: TimeParts | None = None
    early: datetime | None = None


def normalize(value: str, *, now: datetime) -> NormalizedInput:
    """Normalize raw date text.

    Args:
        value: Raw input
        now: Reference time for relative words and time-only input

    Returns:
        NormalizedInput with either ``early`` set or ``text`` ready to tokenize
    """
    text = value.strip().lower()
    time: TimeParts | None = None

    span = find_embedded_time(text)
    if span is not None:
        start, end = span
        time_text = text[start:end]
        text = (text[:start] + text[end:]).strip()
        time = parse_time(time_text, now=now)
        if len(text) <= _TIME_ONLY_RESIDUE:
            clock = time or TimeParts(0, 0, 0)
            early = now.replace(
                hour=clock.hour, minute=clock.minute, second=clock.second, microsecond=0
            )
            logger.debug("Time-only input %r -> %s", value, early)
            return NormalizedInput(text=text, time=time, early=early)

    text = strip_weekdays(text).strip()

    tokens = tokenize(text)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if "now" in tokens or "today" in tokens:
        return NormalizedInput(text=text, time=time, early=midnight)
    if "tomorrow" in tokens:
        return NormalizedInput(text=text, time=time, early=midnight + timedelta(days=1))

    if _all_digits(text, 8):
        text = f"{text[:4]}-{text[4:6]}-{text[6:]}"
    elif _all_digits(text, 6):
        text = f"{year_to_full(text[:2], now=now)}-{text[2:4]}-{text[4:]}"

    return NormalizedInput(text=text, time=time)


def tokenize(text: str) -> list[str]:
    """Split on whitespace and date separators, dropping empty tokens.

    Example:
        >>> tokenize("jan/5, '99")
        ['jan', '5', "'99"]
    """
    tokens: list[str] = []
    cursor = Cursor(text)
    while not cursor.is_eof:
        cursor = cursor.skip_while(_is_separator)
        end = cursor.skip_while(lambda ch: not _is_separator(ch))
        if end.pos > cursor.pos:
            tokens.append(cursor.slice_to(end.pos))
        cursor = end
    return tokens


def strip_weekdays(text: str) -> str:
    """Remove weekday words, each with one optional trailing period.

    A word starts at a word boundary and runs over letters, digits and
    underscores. It is a weekday when it begins with a stem from
    WEEKDAY_STEMS and has at least three leading letters.

    Example:
        >>> strip_weekdays("fri. jan 5")
        ' jan 5'
        >>> strip_weekdays("mar 5")
        'mar 5'
    """
    kept: list[str] = []
    cursor = Cursor(text)
    while not cursor.is_eof:
        if cursor.current.isalpha() and cursor.at_word_start():
            end = cursor.skip_while(is_word_char)
            word = cursor.slice_to(end.pos)
            if _is_weekday(word):
                cursor = end.expect(".") or end
                continue
            kept.append(word)
            cursor = end
            continue
        kept.append(cursor.current)
        cursor = cursor.advance()
    return "".join(kept)


def _is_weekday(word: str) -> bool:
    letters = Cursor(word).skip_while(str.isalpha).pos
    return letters >= _MIN_WEEKDAY_LETTERS and word.startswith(WEEKDAY_STEMS)


def _is_separator(char: str) -> bool:
    return char.isspace() or char in DATE_SEPARATORS


def _all_digits(text: str, length: int) -> bool:
    return len(text) == length and all(is_ascii_digit(ch) for ch in text)
