"""Avalon Theater scraper."""

import logging
from datetime import date
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.scrapers.browser import render_page
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.utils.times import AssumeEveningBelowTen

logger = logging.getLogger(__name__)


class AvalonScraper(VenueAdapter):
    """
    Scraper for the Avalon Theater.

    The homepage lists today's showtimes in `ul.showtimes li` entries: a
    title link, an optional poster and bare times ("7:30") with no AM/PM.
    Evening-heavy programming, so 1-9 o'clock is read as PM.
    """

    BASE_URL = "https://www.theavalon.org/"

    policy = VenuePolicy(
        venue_id="avalon",
        venue_name="Avalon Theater",
        am_pm_convention=AssumeEveningBelowTen(),
    )

    async def fetch(self, today: date) -> list[RawCandidate]:
        """Fetch candidates from the rendered Avalon homepage."""
        html = await render_page(self.BASE_URL, wait_for=".showtimes")
        candidates = self._parse_html(html, today)
        logger.info(f"Avalon Theater: Found {len(candidates)} candidates")
        return candidates

    def _parse_html(self, html: str, today: date) -> list[RawCandidate]:
        """Parse Avalon showtime list items into candidates."""
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[RawCandidate] = []

        for item in soup.select(".showtimes li"):
            try:
                title_link = item.find("a")
                if not title_link:
                    continue

                title = title_link.get_text(" ", strip=True)
                href = title_link.get("href")
                link = urljoin(self.BASE_URL, str(href)) if href else None

                poster_img = item.find("img")
                poster_src = poster_img.get("src") if poster_img else None
                poster = urljoin(self.BASE_URL, str(poster_src)) if poster_src else None

                for time_elem in item.select(".times span, .times a"):
                    candidates.append(
                        self.candidate(
                            title=title,
                            raw_date=today.isoformat(),
                            raw_time=time_elem.get_text(strip=True),
                            poster_url=poster,
                            ticket_url=link,
                        )
                    )

            except Exception as e:
                logger.warning(f"Avalon Theater: Failed to parse showtime item: {e}")
                continue

        return candidates
