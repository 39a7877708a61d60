"""Character-level scanning primitives shared by parsing and formatting.

Python 3.13+.
"""

from .cursor import Cursor, is_ascii_digit, is_word_char, leading_int

__all__ = ["Cursor", "is_ascii_digit", "is_word_char", "leading_int"]
