"""Immutable cursor for hand-written shape matchers.

Every shape the engine recognizes (clock times, template tokens, weekday
words) is matched by a small function walking a Cursor instead of a regular
expression. Each matcher states its character classes explicitly and can be
tested on its own.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor, so a matcher that forgets to
      reassign simply stops making progress instead of looping forever

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import dataclass

from laxdate.diagnostics import ErrorTemplate

__all__ = ["Cursor", "is_ascii_digit", "is_word_char", "leading_int"]


def is_ascii_digit(char: str) -> bool:
    """True for 0-9 only (str.isdigit also accepts superscripts and other scripts)."""
    return "0" <= char <= "9"


def is_word_char(char: str) -> bool:
    """Letters, ASCII digits and underscore."""
    return char.isalpha() or is_ascii_digit(char) or char == "_"


def leading_int(text: str) -> int | None:
    """Integer value of the digits at the start of text.

    An optional sign is accepted and anything after the digits is ignored,
    so ordinals such as "5th" read as 5.

    Example:
        >>> leading_int("5th")
        5
        >>> leading_int("-07")
        -7
        >>> leading_int("th5") is None
        True
    """
    cursor = Cursor(text.strip())
    sign = 1
    after_sign = cursor.expect_any("+-")
    if after_sign is not None:
        sign = -1 if cursor.current == "-" else 1
        cursor = after_sign
    taken = cursor.take_digits(1, len(cursor.source))
    if taken is None:
        return None
    return sign * int(taken[0])


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("1:30pm", 0)
        >>> cursor.current
        '1'
        >>> digits, after = cursor.take_digits(1, 2)
        >>> digits
        '1'
        >>> after.current
        ':'
        >>> cursor.current  # Original unchanged
        '1'
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond either end."""
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Source substring from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def expect(self, char: str) -> "Cursor | None":
        """Consume char if it is the current character, None otherwise."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def expect_any(self, chars: str) -> "Cursor | None":
        """Consume one character if it is any of chars, None otherwise."""
        if not self.is_eof and self.current in chars:
            return self.advance()
        return None

    def skip_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Advance past every consecutive character matching predicate."""
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return c

    def skip_spaces(self) -> "Cursor":
        """Skip any Unicode whitespace."""
        return self.skip_while(str.isspace)

    def take_digits(self, min_count: int, max_count: int) -> "tuple[str, Cursor] | None":
        """Greedily consume between min_count and max_count ASCII digits.

        Stops at max_count even when more digits follow, which is how a
        bounded ``\\d{m,n}`` behaves at the start of a match.

        Returns:
            (digits, cursor after digits), or None if fewer than min_count
        """
        c = self
        while c.pos - self.pos < max_count and not c.is_eof and is_ascii_digit(c.current):
            c = c.advance()
        if c.pos - self.pos < min_count:
            return None
        return self.slice_to(c.pos), c

    def at_word_start(self) -> bool:
        """True when the previous character is not a word character."""
        previous = self.peek(-1)
        return previous is None or not is_word_char(previous)
