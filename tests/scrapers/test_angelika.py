"""Unit tests for the Angelika Pop-Up scraper."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from dcscreenings.scrapers.angelika import AngelikaScraper
from dcscreenings.services.normalizer import normalize

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "angelika"
TODAY = date(2025, 12, 20)


@pytest.fixture
def scraper() -> AngelikaScraper:
    return AngelikaScraper()


@pytest.fixture
def fixture_html() -> str:
    return (FIXTURE_DIR / "now_playing.html").read_text()


class TestAngelikaParseHtml:
    def test_finds_showtimes_inside_movie_containers(
        self, scraper: AngelikaScraper, fixture_html: str
    ) -> None:
        candidates = scraper._parse_html(fixture_html, TODAY)
        assert [(c.title, c.raw_date, c.raw_time) for c in candidates] == [
            ("Sentimental Value", "December 22, 2025", "1:10 PM"),
            ("Sentimental Value", "December 22, 2025", "7:45 PM"),
            ("No Other Choice", "December 23, 2025", "9:30 pm"),
        ]

    def test_ignores_times_outside_movie_containers(
        self, scraper: AngelikaScraper, fixture_html: str
    ) -> None:
        candidates = scraper._parse_html(fixture_html, TODAY)
        assert not any(c.raw_time == "6:00 PM" for c in candidates)

    def test_poster_from_data_src(self, scraper: AngelikaScraper, fixture_html: str) -> None:
        first = scraper._parse_html(fixture_html, TODAY)[0]
        assert first.poster_url == "https://angelikafilmcenter.com/posters/sentimental-value.jpg"

    def test_ticket_link_from_anchor(self, scraper: AngelikaScraper, fixture_html: str) -> None:
        candidates = scraper._parse_html(fixture_html, TODAY)
        assert candidates[0].ticket_url == "https://angelikafilmcenter.com/dc/tickets/sv-1"
        assert candidates[2].ticket_url is None

    def test_falls_back_to_today_without_date_heading(self, scraper: AngelikaScraper) -> None:
        html = (
            '<div class="movie-item"><h2>Solo Film</h2>'
            '<a href="/dc/t/1">8:00 PM</a></div>'
        )
        [candidate] = scraper._parse_html(html, TODAY)
        assert candidate.raw_date == "2025-12-20"

    def test_normalizes_with_explicit_meridiem(
        self, scraper: AngelikaScraper, fixture_html: str
    ) -> None:
        screenings = normalize(scraper._parse_html(fixture_html, TODAY), scraper.policy, TODAY)
        assert [(s.date, s.time) for s in screenings] == [
            ("2025-12-22", "13:10"),
            ("2025-12-22", "19:45"),
            ("2025-12-23", "21:30"),
        ]


class TestAngelikaFetch:
    async def test_visits_landing_page_first(
        self, scraper: AngelikaScraper, fixture_html: str
    ) -> None:
        with patch(
            "dcscreenings.scrapers.angelika.render_page", AsyncMock(return_value=fixture_html)
        ) as render:
            candidates = await scraper.fetch(TODAY)
        assert len(candidates) == 3
        assert render.await_args.args[0] == "https://angelikafilmcenter.com/dc/now-playing"
        assert render.await_args.kwargs["warmup_url"] == "https://angelikafilmcenter.com/dc"
