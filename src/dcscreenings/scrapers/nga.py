"""National Gallery of Art film program scraper."""

import logging
import re
from datetime import date

from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.scrapers.browser import render_page
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.utils.dates import MONTH_MAP
from dcscreenings.utils.times import RequireMeridiem

logger = logging.getLogger(__name__)

DATE_LINE = re.compile(r"^(?P<month>[A-Za-z]+)\s+\d{1,2},\s+\d{4}$")
TIME_LINE = re.compile(r"^\d{1,2}:\d{2}\s*[ap]\.m\.", re.IGNORECASE)
FILMS_MARKER = "FILMS"
SKIPPED_TITLE_LINES = ("FILM SERIES",)


class NGAScraper(VenueAdapter):
    """
    Scraper for the National Gallery of Art film calendar.

    The calendar markup is unstable, so this reads the page's visible text
    line by line instead:
    - "December 27, 2025" sets the current date
    - "FILMS" means the next meaningful line is a title
    - "2:00 p.m. – 3:45 p.m." emits a screening for the current title
    """

    CALENDAR_URL = "https://www.nga.gov/calendar?type%5B103026%5D=103026"

    policy = VenuePolicy(
        venue_id="nga",
        venue_name="National Gallery of Art",
        am_pm_convention=RequireMeridiem(),
    )

    async def fetch(self, today: date) -> list[RawCandidate]:
        """Fetch candidates from the film calendar starting today."""
        url = f"{self.CALENDAR_URL}&visit_start={today.isoformat()}&tab=all"
        text = await render_page(url, settle_seconds=3.0, inner_text=True)
        candidates = self._parse_text(text)
        logger.info(f"National Gallery of Art: Found {len(candidates)} candidates")
        return candidates

    def _parse_text(self, text: str) -> list[RawCandidate]:
        """Scan calendar text lines for date, title and time triples."""
        lines = [line.strip() for line in text.splitlines()]
        candidates: list[RawCandidate] = []

        current_date: str | None = None
        current_title: str | None = None

        i = 0
        while i < len(lines):
            line = lines[i]

            date_match = DATE_LINE.match(line)
            if date_match and date_match.group("month").lower() in MONTH_MAP:
                current_date = line

            elif line == FILMS_MARKER:
                title_index = self._next_title_index(lines, i + 1)
                if title_index is not None:
                    current_title = lines[title_index]
                    i = title_index

            elif TIME_LINE.match(line) and current_title and current_date:
                candidates.append(
                    self.candidate(
                        title=current_title,
                        raw_date=current_date,
                        raw_time=line,
                        ticket_url=self.CALENDAR_URL,
                    )
                )
                current_title = None

            i += 1

        return candidates

    def _next_title_index(self, lines: list[str], start: int) -> int | None:
        for j in range(start, len(lines)):
            line = lines[j]
            if line and line not in SKIPPED_TITLE_LINES and "Learn More" not in line:
                return j
        return None
