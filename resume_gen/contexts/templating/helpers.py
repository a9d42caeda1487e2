"""
Template helper functions.

Plain functions exposed to every template as Jinja globals:
- format_date: ISO-ish date string -> "Month YYYY" (or "Present")
- join: list of strings -> separator-joined string
- contact_icon: contact method -> glyph (suppressed in ATS mode)

They are installed on an Environment by `install_helpers`, which only assigns
dictionary entries and can safely run any number of times.
"""

import re
from datetime import date
from typing import Any, Dict

from jinja2 import Environment

# Fixed English month names so output never depends on the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PRESENT = "Present"
DEFAULT_SEPARATOR = ", "

# YYYY, YYYY-MM or YYYY-MM-DD, optionally followed by a time component
DATE_PATTERN = re.compile(r"^\s*(?P<year>\d{4})(?:-(?P<month>\d{1,2})(?:-(?P<day>\d{1,2}))?)?(?:[T ].*)?\s*$")

CONTACT_ICONS: Dict[str, str] = {
    "email": "📧",
    "phone": "📞",
    "location": "📍",
    "url": "🌐",
}


def format_date(value: Any) -> str:
    """
    Format a resume date as "Month YYYY".

    Args:
        value: Date string (YYYY, YYYY-MM, YYYY-MM-DD) or a date object

    Returns:
        "Month YYYY", "Present" for empty values, or the input unchanged
        when it cannot be read as a date

    Examples:
        >>> format_date("2020-03-15")
        'March 2020'
        >>> format_date("")
        'Present'
    """
    if not value:
        return PRESENT

    if isinstance(value, date):
        return f"{MONTH_NAMES[value.month - 1]} {value.year:04d}"

    text = str(value)
    match = DATE_PATTERN.match(text)
    if not match:
        return text

    month = int(match.group("month") or 1)
    if not 1 <= month <= 12:
        return text

    return f"{MONTH_NAMES[month - 1]} {match.group('year')}"


def join(value: Any, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Join a list of strings, tolerating missing or malformed values.

    Examples:
        >>> join(["Go", "Rust"], " | ")
        'Go | Rust'
        >>> join(None)
        ''
    """
    if not isinstance(value, (list, tuple)):
        return ""
    return separator.join(str(item) for item in value)


def contact_icon(kind: str, ats_mode: bool = False) -> str:
    """Glyph for a contact method; always empty in ATS mode."""
    if ats_mode:
        return ""
    return CONTACT_ICONS.get(kind, "")


TEMPLATE_HELPERS = {
    "format_date": format_date,
    "join": join,
    "contact_icon": contact_icon,
}


def install_helpers(env: Environment) -> Environment:
    """Expose the template helpers as globals on `env` and return it."""
    env.globals.update(TEMPLATE_HELPERS)
    return env
