"""Parse-then-format helpers for form inputs.

A free-text input field typically echoes what it understood back to the
user in a fixed shape: "5 jan 99" is shown as "1999-Jan-05", "132pm" as
"1:32 PM". These helpers chain the parser and the formatter and collapse
any failure to "".

Python 3.13+.
"""

import logging
from datetime import datetime

from laxdate.constants import (
    DEFAULT_DATE_STRING_TEMPLATE,
    DEFAULT_FORMAT_LOCALE,
    DEFAULT_TIME_STRING_TEMPLATE,
)
from laxdate.parsing.dates import parse_date
from laxdate.parsing.times import parse_time

from .templates import format_datetime

__all__ = ["parse_date_to_string", "parse_time_to_string"]

logger = logging.getLogger(__name__)


def parse_date_to_string(
    value: str | datetime,
    template: str | None = None,
    *,
    now: datetime | None = None,
    locale_code: str = DEFAULT_FORMAT_LOCALE,
) -> str:
    """Parse date text and render it.

    Args:
        value: Date text (or a datetime, formatted as is)
        template: Output template; None or "" selects "YYYY-MMM-DD"
        now: Reference time (default: wall clock)
        locale_code: Locale for month and weekday names

    Returns:
        Formatted date, or "" if value is not a valid date

    Example:
        >>> parse_date_to_string("5 jan 99", now=datetime(2024, 6, 15))
        '1999-Jan-05'
    """
    result, errors = parse_date(value, now=now)
    if result is None:
        logger.debug("parse_date_to_string(%r) failed: %s", value, errors[0] if errors else "")
        return ""
    return format_datetime(
        result, template or DEFAULT_DATE_STRING_TEMPLATE, locale_code=locale_code
    )


def parse_time_to_string(
    value: str,
    template: str | None = DEFAULT_TIME_STRING_TEMPLATE,
    *,
    now: datetime | None = None,
    locale_code: str = DEFAULT_FORMAT_LOCALE,
) -> str:
    """Parse time text and render it on today's date.

    Args:
        value: Time text such as "132pm" or "13:05"
        template: Output template (default: "h:mm A")
        now: Reference time; supplies the date and resolves "now"
            (default: wall clock)
        locale_code: Locale for month and weekday names

    Returns:
        Formatted time, or "" if value is not a valid time

    Example:
        >>> parse_time_to_string("132pm")
        '1:32 PM'
    """
    reference = now if now is not None else datetime.now()
    clock = parse_time(value, now=reference)
    if clock is None:
        return ""
    moment = reference.replace(
        hour=clock.hour, minute=clock.minute, second=clock.second, microsecond=0
    )
    return format_datetime(
        moment, template or DEFAULT_TIME_STRING_TEMPLATE, locale_code=locale_code
    )
