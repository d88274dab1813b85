"""Suns Cinema scraper."""

import logging
import re
from datetime import date
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup, Tag

from dcscreenings.config import settings
from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.utils.times import FixedDefault

logger = logging.getLogger(__name__)


class SunsCinemaScraper(VenueAdapter):
    """
    Scraper for Suns Cinema.

    Static HTML homepage with two sections:
    - "Now playing": `.show` blocks each followed by an `ol.showtimes` list
      of today's times ("7:00 pm")
    - Upcoming shows: `.shows .show` cards with a date ("Sat, Dec 27") but
      no time; these fall back to the 7pm default
    """

    BASE_URL = "https://sunscinema.com/"

    policy = VenuePolicy(
        venue_id="suns",
        venue_name="Suns Cinema",
        am_pm_convention=FixedDefault("19:00"),
    )

    async def fetch(self, today: date) -> list[RawCandidate]:
        """Fetch candidates from the Suns Cinema homepage."""
        async with httpx.AsyncClient(
            timeout=settings.scrape_timeout,
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
        ) as client:
            response = await client.get(self.BASE_URL)
            response.raise_for_status()

        candidates = self._parse_html(response.text, today)
        logger.info(f"Suns Cinema: Found {len(candidates)} candidates")
        return candidates

    def _parse_html(self, html: str, today: date) -> list[RawCandidate]:
        """Parse Suns Cinema HTML into candidates."""
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[RawCandidate] = []

        for show in soup.select("#now-playing .show"):
            try:
                candidates.extend(self._parse_now_playing(show, today))
            except Exception as e:
                logger.warning(f"Suns Cinema: Failed to parse now-playing show: {e}")
                continue

        for show in soup.select(".shows .show"):
            try:
                candidate = self._parse_upcoming(show)
                if candidate:
                    candidates.append(candidate)
            except Exception as e:
                logger.warning(f"Suns Cinema: Failed to parse upcoming show: {e}")
                continue

        return candidates

    def _parse_now_playing(self, show: Tag, today: date) -> list[RawCandidate]:
        title_elem = show.find("h2")
        if not title_elem:
            return []
        title = title_elem.get_text(" ", strip=True)

        movie_link = self._href(show.find("a"))
        poster_url = self._background_image(show)

        # Times belong to a show only when their list directly follows it
        showtimes = show.find_next_sibling()
        if (
            showtimes is None
            or showtimes.name != "ol"
            or "showtimes" not in (showtimes.get("class") or [])
        ):
            return []

        candidates: list[RawCandidate] = []
        for item in showtimes.find_all("li"):
            if item.select_one(".sold-out"):
                continue

            time_elem = item.find(["span", "a"])
            if not time_elem:
                continue

            candidates.append(
                self.candidate(
                    title=title,
                    raw_date=today.isoformat(),
                    raw_time=time_elem.get_text(strip=True),
                    poster_url=poster_url,
                    ticket_url=self._href(item.find("a")) or movie_link,
                )
            )

        return candidates

    def _parse_upcoming(self, show: Tag) -> RawCandidate | None:
        title_elem = show.select_one(".show__title")
        date_elem = show.select_one(".show__date")
        if not title_elem or not date_elem:
            return None

        poster_img = show.select_one(".show__image img")
        return self.candidate(
            title=title_elem.get_text(" ", strip=True),
            raw_date=date_elem.get_text(" ", strip=True),
            raw_time="",
            poster_url=self._href(poster_img, "src"),
            ticket_url=self._href(show.select_one(".show-link")),
        )

    def _background_image(self, show: Tag) -> str | None:
        """Poster URL from an inline `background-image: url(...)` style."""
        match = re.search(r"url\((['\"]?)(.*?)\1\)", show.get("style") or "")
        if match:
            return urljoin(self.BASE_URL, match.group(2))
        return None

    def _href(self, elem: Tag | None, attr: str = "href") -> str | None:
        if elem is None:
            return None
        value = elem.get(attr)
        if not value:
            return None
        return urljoin(self.BASE_URL, str(value))
