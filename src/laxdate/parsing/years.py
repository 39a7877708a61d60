"""Two-digit year expansion.

Python 3.13+.
"""

from datetime import datetime

from laxdate.constants import YEAR_PIVOT_OFFSET
from laxdate.scanning import is_ascii_digit

__all__ = ["year_to_full"]


def year_to_full(value: int | str, *, now: datetime | None = None) -> int:
    """Expand a one- or two-digit year to four digits.

    Years up to YEAR_PIVOT_OFFSET years ahead of ``now`` land in the 21st
    century; the rest of the two-digit range lands in the 20th. Values above
    99 are returned unchanged.

    Args:
        value: Year as an int, or a string such as "'99" (non-digits are ignored)
        now: Reference time for the pivot (default: wall clock)

    Returns:
        Four-digit year

    Raises:
        ValueError: If a string value contains no digits

    Example:
        >>> year_to_full(22, now=datetime(2024, 6, 1))
        2022
        >>> year_to_full("'87", now=datetime(2024, 6, 1))
        1987
        >>> year_to_full(2000)
        2000
    """
    if isinstance(value, str):
        digits = "".join(ch for ch in value if is_ascii_digit(ch))
        if not digits:
            msg = f"No digits in year value '{value}'"
            raise ValueError(msg)
        value = int(digits)

    if value > 99:
        return value

    reference = now if now is not None else datetime.now()
    if value < (reference.year + YEAR_PIVOT_OFFSET) % 100:
        return value + 2000
    return value + 1900
