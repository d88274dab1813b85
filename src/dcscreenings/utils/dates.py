"""Listing date parsing: free-text dates to YYYY-MM-DD."""

import re
from datetime import date

MONTH_MAP = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

ISO_DATE_PATTERN = re.compile(r"^\s*(\d{4})-(\d{2})-(\d{2})(?:$|[T\s])")

# "Dec 27", "December 22, 2025", "Sat, Dec 27", "Opens on Jan 9", "Dec. 27th"
MONTH_DAY_PATTERN = re.compile(
    r"\b(?P<month>[A-Za-z]+)\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?\b"
    r"(?:,?\s+(?P<year>\d{4})\b)?"
)


def infer_year(month: int, reference_date: date) -> int:
    """
    Pick the year for a listing date printed without one.

    Months earlier than the reference month belong to next year, so a
    "Jan 2" listing seen in December resolves to the following January.
    """
    if month < reference_date.month:
        return reference_date.year + 1
    return reference_date.year


def parse_date(raw: str | None, reference_date: date) -> str | None:
    """
    Parse a listing date into ISO YYYY-MM-DD.

    Supports ISO dates (passed through), "MonthName Day[, Year]" with full or
    abbreviated month names and an optional weekday prefix, and
    "Opens on MonthName Day".

    Args:
        raw: Date text as scraped
        reference_date: Date the listing was fetched; used to infer a missing year

    Returns:
        ISO date string, or None if no recognizable date was found
    """
    if not raw:
        return None

    iso_match = ISO_DATE_PATTERN.match(raw)
    if iso_match:
        year, month, day = (int(part) for part in iso_match.groups())
        return _safe_isoformat(year, month, day)

    # Weekday names ("Sat", "Saturday") and words like "on" are skipped
    # because they are not in the month table.
    for match in MONTH_DAY_PATTERN.finditer(raw):
        month = MONTH_MAP.get(match.group("month").lower())
        if not month:
            continue

        day = int(match.group("day"))
        if match.group("year"):
            year = int(match.group("year"))
        else:
            year = infer_year(month, reference_date)

        return _safe_isoformat(year, month, day)

    return None


def _safe_isoformat(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None
