"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization so that CLDR lookups and cache keys agree
whatever form the caller used ("en-US" or "en_US").

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "fr-CA")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "fr_CA")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("fr")  # Already normalized
        'fr'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=64)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
