"""Text utilities for screening titles."""

import re

MAX_TITLE_LENGTH = 100


def clean_title(title: str | None) -> str:
    """
    Tidy a scraped title for display.

    Collapses runs of whitespace (including newlines picked up from nested
    markup) into single spaces and trims the ends. Wording is left alone so
    the title still reads the way the venue prints it.
    """
    if not title:
        return ""
    return re.sub(r"\s+", " ", title).strip()


def is_plausible_title(title: str) -> bool:
    """Reject empty titles and titles long enough to be a whole container's text."""
    return 0 < len(title) <= MAX_TITLE_LENGTH


def extract_year(title: str) -> str | None:
    """
    Pull a release year out of a title such as "Near Dark (1987)".

    Returns:
        Four-digit year string, or None if the title carries no year
    """
    match = re.search(r"\((\d{4})\)\s*$", title.strip())
    if match:
        return match.group(1)
    return None


def normalise_title(title: str) -> str:
    """
    Normalize a film title for searching TMDb.

    Removes common variations to improve matching accuracy:
    - Year suffixes: "Film (2024)" → "Film"
    - Dash suffixes: "Film — Restoration", "Film - 4K" → "Film"
    - Prefixes: "Preview: Film" → "Film"
    - Format indicators: "Film [35mm]" → "Film"
    - Extra whitespace

    Args:
        title: Raw film title

    Returns:
        Normalized title suitable for searching
    """
    title = title.strip()

    # Dash suffixes go before the year strip so "Film (1929) — Restoration"
    # becomes "Film (1929)" first. Requires surrounding whitespace to keep
    # hyphenated titles like "Spider-Man" intact.
    title = re.sub(r"\s+[-–—]\s+\S.*$", "", title)

    # Year suffixes: "Title (2024)" or "Title (2024-25)"
    title = re.sub(r"\s*\(\d{4}(?:-\d{2,4})?\)\s*$", "", title)

    # Square bracket tags: "Title [35mm]", "Title [Q&A]"
    title = re.sub(r"\s*\[[^\]]+\]\s*", " ", title)

    # Trailing parenthetical notes without digits: "Title (Director's Cut)"
    title = re.sub(r"\s*\([^)]*(?<!\d)\)\s*$", "", title)

    prefixes = [
        r"^Preview:\s+",
        r"^Sneak Preview:\s+",
        r"^Advance Screening:\s+",
        r"^Special Screening:\s+",
        r"^Members? Screening:\s+",
        r"^Q&A:\s+",
        r"^Opening Night:\s+",
        r"^Closing Night:\s+",
        r"^Film Series:\s+",
        r"^Weird Wednesday:\s+",
        r"^Terror Tuesday:\s+",
        r"^Movie Party:\s+",
        r"^Sensory Friendly:\s+",
    ]
    for prefix in prefixes:
        title = re.sub(prefix, "", title, flags=re.IGNORECASE)

    title = re.sub(r"\s+", " ", title)

    return title.strip()
