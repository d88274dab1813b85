"""TMDb API client for fetching film posters and release years."""

import logging
from typing import Any

import httpx

from dcscreenings.config import settings

logger = logging.getLogger(__name__)


class TMDbClient:
    """Client for The Movie Database (TMDb) API."""

    BASE_URL = "https://api.themoviedb.org/3"
    IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(self, api_key: str | None = None) -> None:
        """
        Initialize TMDb client.

        Args:
            api_key: TMDb API key (uses settings if not provided)
        """
        self.api_key = api_key or settings.tmdb_api_key
        if not self.api_key:
            logger.warning("TMDb API key not configured")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def search_films(self, title: str, year: str | None = None) -> list[dict[str, Any]]:
        """
        Search for films by title.

        Args:
            title: Film title
            year: Release year (optional, helps narrow results)

        Returns:
            Search results in TMDb relevance order

        Raises:
            httpx.HTTPError: On network failure or a non-2xx response
        """
        if not self.api_key:
            logger.warning("Cannot search TMDb without API key")
            return []

        params: dict[str, Any] = {
            "api_key": self.api_key,
            "query": title,
            "language": "en-US",
        }
        if year:
            params["year"] = year

        async with httpx.AsyncClient(timeout=settings.scrape_timeout) as client:
            response = await client.get(f"{self.BASE_URL}/search/movie", params=params)
            response.raise_for_status()
            data = response.json()

        results = data.get("results", [])
        if not results:
            logger.info(f"No TMDb results for: {title}")
        return results

    async def lookup(self, title: str, known_year: str | None = None) -> dict[str, str | None] | None:
        """
        Look up the release year and poster for a title.

        Args:
            title: Film title (already normalised for searching)
            known_year: Release year if the venue printed one

        Returns:
            {"year": ..., "poster": ...} for the top result, or None if TMDb
            has no match
        """
        results = await self.search_films(title, known_year)
        if not results:
            return None
        return self.to_metadata(results[0])

    def to_metadata(self, result: dict[str, Any]) -> dict[str, str | None]:
        """
        Reduce a TMDb search result to the fields the feed uses.

        Args:
            result: One entry of a TMDb search response

        Returns:
            {"title": ..., "year": ..., "poster": ...}
        """
        release_date = result.get("release_date") or ""
        poster_path = result.get("poster_path")
        return {
            "title": result.get("title"),
            "year": release_date[:4] or None,
            "poster": f"{self.IMAGE_BASE_URL}{poster_path}" if poster_path else None,
        }
