"""laxdate - Forgiving date and time parsing with moment-style formatting.

Reads dates the way people type them into form fields ("5 Jan 99",
"jan/5/30", "3 30 05", "tomorrow", "132pm"), works out which token is the
year, the month and the day, and renders the result through moment-style
templates.

Public API:
    parse_date - Date text -> (datetime | None, errors)
    parse_time - Time text -> TimeParts | None
    format_datetime - datetime (or date text) -> string via template
    parse_date_to_string - Date text -> formatted string ("" on failure)
    parse_time_to_string - Time text -> formatted string ("" on failure)
    month_to_number - Month name or number -> zero-based month
    year_to_full - Two-digit year -> four-digit year
    moment_to_fp_format - Moment template -> flatpickr format codes
    is_date, is_time, is_date_in_range - Validation predicates

Exceptions:
    LaxDateError - Base exception class
    DateParseError - Parse failure (returned in parse_date error tuples)
    InvalidDateError - Tokens could not be resolved into a date
    InvalidMonthNameError - Word token names no month

Submodules:
    laxdate.parsing - Normalizer, disambiguator, time parser, guards
    laxdate.formatting - Template formatter and flatpickr translation
    laxdate.diagnostics - Diagnostic codes, templates and formatter
    laxdate.scanning - Immutable cursor used by the shape matchers
"""

from .diagnostics import (
    DateParseError,
    InvalidDateError,
    InvalidMonthNameError,
    LaxDateError,
)
from .formatting import (
    format_datetime,
    moment_to_fp_format,
    parse_date_to_string,
    parse_time_to_string,
)
from .parsing import (
    TimeParts,
    is_date,
    is_date_in_range,
    is_time,
    is_valid_datetime,
    is_valid_time,
    month_to_number,
    parse_date,
    parse_time,
    year_to_full,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("laxdate")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateParseError",
    "InvalidDateError",
    "InvalidMonthNameError",
    "LaxDateError",
    "TimeParts",
    "__version__",
    "format_datetime",
    "is_date",
    "is_date_in_range",
    "is_time",
    "is_valid_datetime",
    "is_valid_time",
    "moment_to_fp_format",
    "month_to_number",
    "parse_date",
    "parse_date_to_string",
    "parse_time",
    "parse_time_to_string",
    "year_to_full",
]
