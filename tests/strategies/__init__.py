"""Hypothesis strategies for laxdate property-based testing.

- dates: typed-in date/time text with expected values, template strings

Usage:
    from tests.strategies import spelled_dates, clock_times
    from tests.strategies.dates import MONTH_NAMES
"""

from .dates import (
    MONTH_NAMES,
    TEMPLATE_TOKENS,
    clock_times,
    form_input_text,
    four_digit_dates,
    moment_templates,
    spelled_dates,
)

__all__ = [
    "MONTH_NAMES",
    "TEMPLATE_TOKENS",
    "clock_times",
    "form_input_text",
    "four_digit_dates",
    "moment_templates",
    "spelled_dates",
]
