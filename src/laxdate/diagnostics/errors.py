"""laxdate exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateParseError",
    "InvalidDateError",
    "InvalidMonthNameError",
    "LaxDateError",
]


class LaxDateError(Exception):
    """Base exception for all laxdate errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LaxDateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateParseError(LaxDateError):
    """Error while turning free text into a date or time.

    Returned (not raised) in the error tuple of parse_date(), consistent
    with the never-raise parsing API.

    Attributes:
        input_value: The string that failed to parse
        parse_type: Type of parsing attempted ('date', 'time', 'month')

    Example:
        >>> result, errors = parse_date("not a date")
        >>> for error in errors:
        ...     print(f"Parse failed: {error.input_value} ({error.parse_type})")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            parse_type: Type of parsing ('date', 'time', 'month')
        """
        super().__init__(message)
        self.input_value = input_value
        self.parse_type = parse_type


class InvalidDateError(DateParseError):
    """Tokens could not be resolved into year, month and day.

    Raised by the date-part disambiguator when a token is not numeric, when
    too few tokens remain next to a four-digit number, or when the visit
    budget runs out. Also raised when the resolved parts fall outside the
    datetime range.
    """


class InvalidMonthNameError(DateParseError):
    """A word token matched no month name.

    Attributes:
        token: The offending token
    """

    def __init__(self, message: str | Diagnostic, *, token: str) -> None:
        """Initialize InvalidMonthNameError.

        Args:
            message: Error message string OR Diagnostic object
            token: The token that matched no month name
        """
        super().__init__(message, input_value=token, parse_type="month")
        self.token = token
