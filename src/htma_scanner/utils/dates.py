"""Parsing of the Hebrew date and time strings used on the box office pages."""

import re
from datetime import date, time

from htma_scanner.exceptions import ParseError

HEBREW_MONTHS = {
    "ינואר": 1,
    "פברואר": 2,
    "מרץ": 3,
    "מרס": 3,
    "אפריל": 4,
    "מאי": 5,
    "יוני": 6,
    "יולי": 7,
    "אוגוסט": 8,
    "ספטמבר": 9,
    "אוקטובר": 10,
    "נובמבר": 11,
    "דצמבר": 12,
}

# "15 בינואר 2025", "15 ינואר, 2025", "15 ב-ינואר 2025"
_NAMED_DATE_RE = re.compile(r"(?<!\d)(\d{1,2})\s+(?:ב-?)?([א-ת\"']+)\s*,?\s*(\d{4})\b")
# "15/01/2025", "15.1.25"
_NUMERIC_DATE_RE = re.compile(r"\b(\d{1,2})[./](\d{1,2})[./](\d{4}|\d{2})\b")
# "20:30", "בשעה 20:30"
_TIME_RE = re.compile(r"(?<![\d:])(\d{1,2}):(\d{2})(?!\d)")


def _build_date(year: int, month: int, day: int, text: str) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ParseError(f"Invalid date {text!r}: {e}") from e


def parse_hebrew_date(text: str) -> date:
    """
    Parse a date as rendered on the box office pages.

    Handles a Hebrew month name ("יום ד', 15 בינואר 2025") or the numeric
    day/month/year form ("15/01/2025"). Anything before the day, such as
    the weekday, is ignored.

    Args:
        text: Raw date text

    Returns:
        The calendar date

    Raises:
        ParseError: if no layout matches, the month name is unknown or the
            date does not exist
    """
    m = _NAMED_DATE_RE.search(text)
    if m:
        day, month_name, year = int(m.group(1)), m.group(2), int(m.group(3))
        month = HEBREW_MONTHS.get(month_name)
        if month is None:
            raise ParseError(f"Unknown month {month_name!r} in {text!r}")
        return _build_date(year, month, day, text)

    m = _NUMERIC_DATE_RE.search(text)
    if m:
        day, month, year = int(m.group(1)), int(m.group(2)), int(m.group(3))
        if year < 100:
            year += 2000
        return _build_date(year, month, day, text)

    raise ParseError(f"Unrecognised date format: {text!r}")


def parse_show_time(text: str) -> time:
    """Parse a 24-hour "HH:MM" time, e.g. "בשעה 20:30"."""
    m = _TIME_RE.search(text)
    if not m:
        raise ParseError(f"Unrecognised time format: {text!r}")
    try:
        return time(int(m.group(1)), int(m.group(2)))
    except ValueError as e:
        raise ParseError(f"Invalid time {text!r}: {e}") from e


def parse_show_datetime(date_text: str, time_text: str | None = None) -> tuple[date, time]:
    """
    Normalise a show's date and time strings.

    When time_text is None the time is looked up in date_text, for pages
    that render both in a single string.
    """
    show_date = parse_hebrew_date(date_text)
    show_time = parse_show_time(date_text if time_text is None else time_text)
    return show_date, show_time
