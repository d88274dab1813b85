"""Angelika Pop-Up at Union Market scraper."""

import logging
import re
from datetime import date
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.scrapers.browser import render_page
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.utils.times import RequireMeridiem

logger = logging.getLogger(__name__)

SHOWTIME_TEXT = re.compile(r"^\d{1,2}:\d{2}\s*(AM|PM)$", re.IGNORECASE)
FULL_DATE_TEXT = re.compile(r"[A-Za-z]+\.?\s+\d{1,2},\s+\d{4}")


def _is_movie_container(tag: Tag) -> bool:
    classes = tag.get("class") or []
    return any(
        "movie-details" in cls or cls == "movie-item" or "film" in cls
        for cls in classes
    )


class AngelikaScraper(VenueAdapter):
    """
    Scraper for Angelika Pop-Up at Union Market.

    React site; the now-playing page only renders after visiting the DC
    landing page. Showtime buttons read "7:15 PM" and sit inside a movie
    container holding the title, poster and (sometimes) a date heading.
    """

    BASE_URL = "https://angelikafilmcenter.com"
    LANDING_URL = f"{BASE_URL}/dc"
    NOW_PLAYING_URL = f"{BASE_URL}/dc/now-playing"

    policy = VenuePolicy(
        venue_id="angelika",
        venue_name="Angelika Pop-Up at Union Market",
        am_pm_convention=RequireMeridiem(),
    )

    async def fetch(self, today: date) -> list[RawCandidate]:
        """Fetch candidates from the rendered now-playing page."""
        html = await render_page(
            self.NOW_PLAYING_URL,
            warmup_url=self.LANDING_URL,
            scroll=True,
        )
        candidates = self._parse_html(html, today)
        logger.info(f"Angelika: Found {len(candidates)} candidates")
        return candidates

    def _parse_html(self, html: str, today: date) -> list[RawCandidate]:
        """Find every showtime button and resolve its movie container."""
        soup = BeautifulSoup(html, "html.parser")
        candidates: list[RawCandidate] = []

        page_date_elem = soup.select_one("[class*=selected-date]")
        page_date = self._date_text(page_date_elem) or today.isoformat()

        for time_elem in soup.find_all(["a", "button", "div"]):
            time_text = time_elem.get_text(" ", strip=True)
            if not SHOWTIME_TEXT.match(time_text):
                continue

            try:
                container = time_elem.find_parent(_is_movie_container)
                if not container:
                    continue

                title_elem = container.select_one("h1, h2, h3, h4, [class*=title]")
                if not title_elem:
                    continue

                raw_date = self._date_text(container.select_one("[class*=date]")) or page_date

                candidates.append(
                    self.candidate(
                        title=title_elem.get_text(" ", strip=True),
                        raw_date=raw_date,
                        raw_time=time_text,
                        poster_url=self._poster(container),
                        ticket_url=self._ticket_link(time_elem),
                    )
                )

            except Exception as e:
                logger.warning(f"Angelika: Failed to parse showtime '{time_text}': {e}")
                continue

        return candidates

    def _date_text(self, elem: Tag | None) -> str | None:
        """The "December 22, 2025" part of a date heading, if there is one."""
        if elem is None:
            return None
        match = FULL_DATE_TEXT.search(elem.get_text(" ", strip=True))
        return match.group(0) if match else None

    def _poster(self, container: Tag) -> str | None:
        img = container.find("img")
        if not img:
            return None
        src = img.get("src") or img.get("data-src")
        return urljoin(self.BASE_URL, str(src)) if src else None

    def _ticket_link(self, time_elem: Tag) -> str | None:
        anchor = time_elem if time_elem.name == "a" else time_elem.find_parent("a")
        if anchor is None or not anchor.get("href"):
            return None
        return urljoin(self.BASE_URL, str(anchor["href"]))
