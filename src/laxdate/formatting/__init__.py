"""Template formatting.

Public API:
    format_datetime - Render a datetime (or date text) through a moment-style template
    parse_date_to_string - parse_date() then format_datetime(), "" on failure
    parse_time_to_string - parse_time() on today's date then format, "" on failure
    moment_to_fp_format - Moment-style template to flatpickr format codes

Python 3.13+. Uses Babel CLDR for month and weekday names.
"""

from .flatpickr import FLATPICKR_REPLACEMENTS, moment_to_fp_format
from .functions import parse_date_to_string, parse_time_to_string
from .templates import TOKEN_FAMILIES, format_datetime, tokenize_template

__all__ = [
    "FLATPICKR_REPLACEMENTS",
    "TOKEN_FAMILIES",
    "format_datetime",
    "moment_to_fp_format",
    "parse_date_to_string",
    "parse_time_to_string",
    "tokenize_template",
]
