"""Shared constants for laxdate.

Single source of truth for the engine's tunables. Placing them here keeps
the parsing and formatting packages free of circular imports.

Constants are grouped by domain:
- Input limits: bound the work done per call
- Disambiguation: token-visit budget for the date-part guesser
- Year pivot: two-digit year expansion window
- Locales: calendar data used for month and weekday names
- Templates: default format templates

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_INPUT_LENGTH",
    # Disambiguation
    "MAX_TOKEN_VISITS",
    "FORCE_ASSIGN_AFTER_VISITS",
    # Year pivot
    "YEAR_PIVOT_OFFSET",
    # Locales
    "DEFAULT_MONTH_LOCALES",
    "DEFAULT_FORMAT_LOCALE",
    # Templates
    "DEFAULT_DATE_TEMPLATE",
    "DEFAULT_DATE_STRING_TEMPLATE",
    "DEFAULT_TIME_STRING_TEMPLATE",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Form input values are short; anything longer is rejected before tokenizing.
MAX_INPUT_LENGTH: int = 256

# ============================================================================
# DISAMBIGUATION
# ============================================================================

# Total token visits allowed across all passes. Checked after each full pass,
# so an input with more than this many tokens can never resolve.
MAX_TOKEN_VISITS: int = 6

# Once more than this many visits have happened, an ambiguous numeric token
# is forced into the first free slot it fits (month, then day, then year).
FORCE_ASSIGN_AFTER_VISITS: int = 3

# ============================================================================
# YEAR PIVOT
# ============================================================================

# Two-digit years below (current_year + offset) % 100 land in the 2000s.
YEAR_PIVOT_OFFSET: int = 20

# ============================================================================
# LOCALES
# ============================================================================

# Locales whose CLDR month names are recognized when resolving month tokens.
DEFAULT_MONTH_LOCALES: tuple[str, ...] = ("en", "fr")

# Locale for month and weekday names in formatted output.
DEFAULT_FORMAT_LOCALE: str = "en"

# ============================================================================
# TEMPLATES
# ============================================================================

DEFAULT_DATE_TEMPLATE: str = "YYYY-MM-DD"
DEFAULT_DATE_STRING_TEMPLATE: str = "YYYY-MMM-DD"
DEFAULT_TIME_STRING_TEMPLATE: str = "h:mm A"
