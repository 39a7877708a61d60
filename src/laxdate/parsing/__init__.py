"""Free-text date and time parsing.

- parse_date() never raises for string input: errors come back in a tuple
- parse_time() returns None for anything that is not a valid clock time
- month_to_number() raises InvalidMonthNameError for unknown month words

Pipeline (leaves first):
    normalizer     lowercase, embedded time, weekdays, now/today/tomorrow,
                   undelimited digit blobs, tokenizing
    months         month words -> zero-based month (Babel CLDR + prefixes)
    years          two-digit years -> four digits around a moving pivot
    disambiguator  year/month/day assignment for ambiguous tokens
    times          clock-time shapes -> TimeParts
    dates          assembly into a naive datetime

Public API:
    Parsing Functions:
        parse_date - Returns tuple[datetime | None, tuple[DateParseError, ...]]
        parse_time - Returns TimeParts | None
        month_to_number - Returns zero-based month index
        year_to_full - Returns four-digit year

    Type Guards and Predicates:
        is_valid_datetime, is_valid_time, is_date, is_time, is_date_in_range

Python 3.13+. Uses Babel CLDR month names + stdlib for all parsing.
"""

from .dates import parse_date
from .disambiguator import DateParts
from .guards import (
    is_date,
    is_date_in_range,
    is_time,
    is_valid_datetime,
    is_valid_time,
)
from .months import month_to_number
from .times import TimeParts, parse_time
from .years import year_to_full

__all__ = [
    # Types
    "DateParts",
    "TimeParts",
    # Type guards and predicates
    "is_date",
    "is_date_in_range",
    "is_time",
    "is_valid_datetime",
    "is_valid_time",
    # Parsing functions
    "month_to_number",
    "parse_date",
    "parse_time",
    "year_to_full",
]
