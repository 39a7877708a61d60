"""Diagnostic system for laxdate errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DateParseError,
    InvalidDateError,
    InvalidMonthNameError,
    LaxDateError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DateParseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidDateError",
    "InvalidMonthNameError",
    "LaxDateError",
    "OutputFormat",
]
