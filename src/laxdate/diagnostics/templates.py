"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every failure case in one place.
    """

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of its source.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before reading cursor.current",
        )

    @staticmethod
    def parse_date_failed(value: str, reason: str) -> Diagnostic:
        """Date parsing failed.

        Args:
            value: The input string that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_DATE_FAILED
        """
        msg = f"Failed to parse date '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATE_FAILED,
            message=msg,
            hint="Use YYYY-MM-DD or spell the month out to avoid ambiguity",
            input_value=value,
        )

    @staticmethod
    def parse_time_failed(value: str, reason: str) -> Diagnostic:
        """Time parsing failed.

        Args:
            value: The input string that failed to parse
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_TIME_FAILED
        """
        msg = f"Failed to parse time '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_TIME_FAILED,
            message=msg,
            hint="Use H:MM with an optional am/pm suffix",
            input_value=value,
        )

    @staticmethod
    def month_name_invalid(token: str) -> Diagnostic:
        """Month token matched neither calendar names nor known prefixes.

        Args:
            token: The word that was expected to name a month

        Returns:
            Diagnostic for PARSE_MONTH_NAME_INVALID
        """
        msg = f"Invalid month name: '{token}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MONTH_NAME_INVALID,
            message=msg,
            hint="Use a month name or a number between 1 and 12",
            input_value=token,
        )

    @staticmethod
    def input_too_long(value: str, limit: int) -> Diagnostic:
        """Input exceeds MAX_INPUT_LENGTH.

        Args:
            value: The rejected input
            limit: The configured maximum length

        Returns:
            Diagnostic for PARSE_INPUT_TOO_LONG
        """
        msg = f"Input of {len(value)} characters exceeds the {limit} character limit"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TOO_LONG,
            message=msg,
            hint="Date and time inputs are expected to be short form values",
            input_value=value[:limit],
        )
