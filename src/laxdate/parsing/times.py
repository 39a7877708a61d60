"""Clock-time parsing.

Accepted shapes (case-insensitive, surrounding whitespace ignored):
    now             current wall-clock time of the injected ``now``
    132, 1332       three/four digit runs read as H:MM / HH:MM
    1, 1pm, 1:5 a   short form, minutes default to 00
    1:32:05 pm      canonical H:MM[:SS] with optional meridiem

Meridiem is a single a/p optionally followed by m. Shapes are matched by
the cursor-based scanners in this module, not by regular expressions.

parse_time() never raises: anything unrecognized or out of range is None.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from laxdate.scanning import Cursor, is_ascii_digit, is_word_char

__all__ = ["ClockMatch", "TimeParts", "find_embedded_time", "parse_time"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimeParts:
    """Validated wall-clock time.

    Attributes:
        hour: 0..23
        minute: 0..59
        second: 0..59
    """

    hour: int
    minute: int
    second: int = 0

    def __post_init__(self) -> None:
        """Validate ranges.

        Raises:
            ValueError: If any component is out of range
        """
        if not 0 <= self.hour <= 23:
            msg = f"TimeParts.hour must be 0..23, got {self.hour}"
            raise ValueError(msg)
        if not 0 <= self.minute <= 59:
            msg = f"TimeParts.minute must be 0..59, got {self.minute}"
            raise ValueError(msg)
        if not 0 <= self.second <= 59:
            msg = f"TimeParts.second must be 0..59, got {self.second}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ClockMatch:
    """Raw digits and meridiem captured by a clock scanner."""

    hour: str
    minute: str | None
    second: str | None
    meridiem: str | None


def parse_time(value: str, *, now: datetime | None = None) -> TimeParts | None:
    """Parse a clock time.

    Args:
        value: Time-like text (e.g. "1:30pm", "132pm", "13:05:09", "now")
        now: Reference time for "now" (default: wall clock)

    Returns:
        TimeParts, or None if the text is not a valid time

    Example:
        >>> parse_time("132pm")
        TimeParts(hour=13, minute=32, second=0)
        >>> parse_time("12:15 am")
        TimeParts(hour=0, minute=15, second=0)
        >>> parse_time("25:00") is None
        True
    """
    text = value.strip().lower()
    if text == "now":
        reference = now if now is not None else datetime.now()
        return TimeParts(reference.hour, reference.minute, reference.second)

    text = _insert_colon(text)

    short = _match_whole(text, require_minutes=False, allow_seconds=False)
    if short is not None:
        text = f"{short.hour}:{short.minute or '00'}{short.meridiem or ''}"

    clock = _match_whole(text, require_minutes=True, allow_seconds=True)
    if clock is None or clock.minute is None:
        logger.debug("Unrecognized time shape: %r", value)
        return None

    hour = int(clock.hour)
    minute = int(clock.minute)
    second = int(clock.second) if clock.second is not None else 0

    if clock.meridiem == "p" and hour < 12:
        hour += 12
    elif clock.meridiem == "a" and hour == 12:
        hour = 0

    if hour > 23 or minute > 59 or second > 59:
        logger.debug("Time out of range: %r -> %02d:%02d:%02d", value, hour, minute, second)
        return None

    return TimeParts(hour, minute, second)


def find_embedded_time(text: str) -> tuple[int, int] | None:
    """Locate the leftmost H:MM[:SS][ ][a|p[m]] substring.

    Hours take one or two digits, minutes and seconds exactly two. One
    whitespace character may sit before the meridiem. A meridiem letter
    directly followed by another word character ("10:30 aug") is not a
    meridiem, so month names survive extraction.

    Args:
        text: Lowercased input

    Returns:
        (start, end) slice bounds of the match, or None
    """
    cursor = Cursor(text)
    while not cursor.is_eof:
        end = _scan_embedded_at(cursor)
        if end is not None:
            return cursor.pos, end
        cursor = cursor.advance()
    return None


def _scan_embedded_at(start: Cursor) -> int | None:
    taken = start.take_digits(1, 2)
    if taken is None:
        return None
    _, c = taken
    after_colon = c.expect(":")
    if after_colon is None:
        return None
    minutes = after_colon.take_digits(2, 2)
    if minutes is None:
        return None
    _, c = minutes

    seconds_colon = c.expect(":")
    if seconds_colon is not None:
        seconds = seconds_colon.take_digits(2, 2)
        if seconds is not None:
            _, c = seconds

    if not c.is_eof and c.current.isspace():
        c = c.advance()

    meridiem = _scan_meridiem(c)
    if meridiem is not None:
        _, c = meridiem
    return c.pos


def _scan_meridiem(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Match a|p with an optional trailing m, not followed by a word character."""
    after_letter = cursor.expect_any("ap")
    if after_letter is None:
        return None
    letter = cursor.current
    end = after_letter.expect("m") or after_letter
    if not end.is_eof and is_word_char(end.current):
        return None
    return letter, end


def _match_whole(text: str, *, require_minutes: bool, allow_seconds: bool) -> ClockMatch | None:
    """Full-string match of H{1,2}[:M{1,2}[:S{1,2}]] whitespace* [a|p[m]]."""
    taken = Cursor(text).take_digits(1, 2)
    if taken is None:
        return None
    hour, c = taken

    minute: str | None = None
    second: str | None = None
    after_colon = c.expect(":")
    if after_colon is not None:
        minutes = after_colon.take_digits(1, 2)
        if minutes is None:
            return None
        minute, c = minutes
        if allow_seconds and (seconds_colon := c.expect(":")) is not None:
            seconds = seconds_colon.take_digits(1, 2)
            if seconds is None:
                return None
            second, c = seconds
    elif require_minutes:
        return None

    c = c.skip_spaces()
    meridiem: str | None = None
    scanned = _scan_meridiem(c)
    if scanned is not None:
        meridiem, c = scanned

    if not c.is_eof:
        return None
    return ClockMatch(hour=hour, minute=minute, second=second, meridiem=meridiem)


def _insert_colon(text: str) -> str:
    """Rewrite the first run of 3+ digits: 132 -> 1:32, 1332 -> 13:32.

    Only the first four digits of a longer run take part.
    """
    cursor = Cursor(text)
    while not cursor.is_eof:
        if is_ascii_digit(cursor.current):
            run_end = cursor.skip_while(is_ascii_digit)
            if run_end.pos - cursor.pos >= 3:
                digits = text[cursor.pos : min(run_end.pos, cursor.pos + 4)]
                split = 1 if len(digits) == 3 else 2
                replacement = f"{digits[:split]}:{digits[-2:]}"
                return text[: cursor.pos] + replacement + text[cursor.pos + len(digits) :]
            cursor = run_end
        else:
            cursor = cursor.advance()
    return text
