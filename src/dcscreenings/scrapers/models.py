"""Data models for scrapers."""

from dataclasses import dataclass

from dcscreenings.utils.times import AmPmConvention


@dataclass
class RawCandidate:
    """
    Raw screening candidate from a venue adapter.

    This is the output format that all adapters must return.
    Nothing here is validated yet; the normalizer parses the date and time
    text and drops anything it cannot make sense of.
    """

    title: str  # Title as it appears on the venue website
    venue_id: str
    raw_date: str  # e.g. "Sat, Dec 27", "December 22, 2025", "2025-12-27"
    raw_time: str  # e.g. "7:00 pm", "2:00 p.m. – 3:45 p.m.", "7:30", ""
    poster_url: str | None = None
    ticket_url: str | None = None


@dataclass(frozen=True)
class VenuePolicy:
    """Per-venue normalization settings."""

    venue_id: str
    venue_name: str
    am_pm_convention: AmPmConvention
