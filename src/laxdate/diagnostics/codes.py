"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Scanner errors (cursor misuse)
        4000-4999: Parsing errors (date, time and month-name parsing)
    """

    # Scanner errors (3000-3999)
    UNEXPECTED_EOF = 3001

    # Parsing errors (4000-4999)
    PARSE_DATE_FAILED = 4003
    PARSE_TIME_FAILED = 4011
    PARSE_MONTH_NAME_INVALID = 4012
    PARSE_INPUT_TOO_LONG = 4013


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The input that triggered the diagnostic (may be empty)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str = ""
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[PARSE_MONTH_NAME_INVALID]: Invalid month name: 'foo'
              = input: foo
              = help: Use a month name or a number between 1 and 12

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
