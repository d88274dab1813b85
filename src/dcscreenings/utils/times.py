"""Showtime parsing: free-text times to 24-hour HH:MM."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

# "7:05", "19:30", "7:05 PM", "7:05pm", "2:00 p.m." (first match wins)
TIME_PATTERN = re.compile(
    r"(?<!\d)(?P<hour>\d{1,2}):(?P<minute>\d{2})(?!\d)"
    r"(?:\s*(?P<meridiem>[ap])\.?\s?m\b\.?)?",
    re.IGNORECASE,
)


def format_clock(hour: int, minute: int) -> str | None:
    """Zero-padded HH:MM, or None when the clock value is impossible."""
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return f"{hour:02d}:{minute:02d}"


class AmPmConvention(ABC):
    """
    How a venue's times without an AM/PM marker should be read.

    Some venues only print "7:30" for evening-only programming, others
    print a marker on every time. The convention is chosen per venue.
    """

    @abstractmethod
    def resolve(self, hour: int | None, minute: int | None) -> str | None:
        """
        Resolve a time that carries no meridiem marker.

        Args:
            hour: Hour digits from the text, or None if no H:MM was found
            minute: Minute digits from the text, or None if no H:MM was found

        Returns:
            HH:MM string, or None if the time should be rejected
        """


@dataclass(frozen=True)
class AssumeEveningBelowTen(AmPmConvention):
    """1-9 are evening shows, 10-11 are morning matinees."""

    def resolve(self, hour: int | None, minute: int | None) -> str | None:
        if hour is None or minute is None:
            return None
        if 1 <= hour <= 9:
            hour += 12
        # 0 and 12+ are already unambiguous (or invalid)
        return format_clock(hour, minute)


@dataclass(frozen=True)
class FixedDefault(AmPmConvention):
    """Substitute a fixed time for listings with no usable time information."""

    time: str = "19:00"

    def __post_init__(self) -> None:
        if not re.fullmatch(r"([01]\d|2[0-3]):[0-5]\d", self.time):
            raise ValueError(f"Default time must be HH:MM, got {self.time!r}")

    def resolve(self, hour: int | None, minute: int | None) -> str | None:
        return self.time


@dataclass(frozen=True)
class RequireMeridiem(AmPmConvention):
    """Reject any time that lacks an explicit AM/PM marker."""

    def resolve(self, hour: int | None, minute: int | None) -> str | None:
        return None


def parse_time(raw: str | None, convention: AmPmConvention) -> str | None:
    """
    Parse a showtime into 24-hour HH:MM.

    An explicit marker is always honoured (12 AM -> 00, 12 PM -> 12, other PM
    hours +12). Without one, the venue's convention decides.

    Examples:
        "7:05 PM"       -> "19:05"
        "12:00 AM"      -> "00:00"
        "2:00 p.m. – 3:45 p.m." -> "14:00"
        "7:00" with AssumeEveningBelowTen -> "19:00"

    Args:
        raw: Time text as scraped
        convention: The venue's AmPmConvention

    Returns:
        HH:MM string, or None if no time could be resolved
    """
    match = TIME_PATTERN.search(raw or "")
    if not match:
        return convention.resolve(None, None)

    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    meridiem = match.group("meridiem")

    if not meridiem:
        return convention.resolve(hour, minute)

    if meridiem.lower() == "p" and hour != 12:
        hour += 12
    elif meridiem.lower() == "a" and hour == 12:
        hour = 0

    return format_clock(hour, minute)
