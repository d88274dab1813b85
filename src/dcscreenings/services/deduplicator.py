"""Collapse repeated listings of the same showing."""

from dcscreenings.schemas.screening import Screening


def screening_key(screening: Screening) -> str:
    """Identity of a showing: title, venue, date and time."""
    return f"{screening.title}|{screening.venue}|{screening.date}|{screening.time}"


def dedupe(screenings: list[Screening]) -> list[Screening]:
    """
    Drop screenings whose key has already been seen.

    The first occurrence wins even if a later one has a poster or ticket
    link the first lacks. Order of first occurrences is preserved and the
    input list is not modified.
    """
    seen: set[str] = set()
    unique: list[Screening] = []
    for screening in screenings:
        key = screening_key(screening)
        if key in seen:
            continue
        seen.add(key)
        unique.append(screening)
    return unique
