"""Moment-style template to flatpickr format string translation.

Date-picker widgets configured with flatpickr take single-character format
codes ("Y-m-d") while the rest of the engine speaks moment-style templates
("YYYY-MM-DD"). The translation is a fixed, ordered list of literal
replacements applied to the whole string. Codes that would be rewritten
again by a later step pass through a "{n}" placeholder first:

    "YYYY-MM-DD" -> "Y-MM-DD" -> "Y-{2}-DD" -> "Y-{2}-{5}" -> "Y-m-d"

Literal text is not protected; every letter that is also a token is
translated.

Python 3.13+.
"""

__all__ = ["FLATPICKR_REPLACEMENTS", "moment_to_fp_format"]

# (moment token, flatpickr code). Applied in order; the order is significant.
FLATPICKR_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("YYYY", "Y"),
    ("YY", "y"),
    ("MMMM", "F"),
    ("MMM", "{3}"),
    ("MM", "{2}"),
    ("M", "n"),
    ("DD", "{5}"),
    ("D", "j"),
    ("dddd", "l"),
    ("ddd", "D"),
    ("dd", "D"),
    ("d", "w"),
    ("HH", "{6}"),
    ("H", "G"),
    ("hh", "h"),
    ("mm", "i"),
    ("m", "i"),
    ("ss", "S"),
    ("s", "s"),
    ("A", "K"),
    ("a", "K"),
    ("{3}", "M"),
    ("{2}", "m"),
    ("{5}", "d"),
    ("{6}", "H"),
)


def moment_to_fp_format(template: str) -> str:
    """Translate a moment-style template into a flatpickr format string.

    Args:
        template: Moment-style template

    Returns:
        flatpickr format string

    Example:
        >>> moment_to_fp_format("YYYY-MM-DD")
        'Y-m-d'
        >>> moment_to_fp_format("ddd, MMM D h:mm A")
        'D, M j h:i K'
    """
    result = template
    for token, code in FLATPICKR_REPLACEMENTS:
        result = result.replace(token, code)
    return result
