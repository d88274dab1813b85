"""Poster enrichment for merged feeds using TMDb."""

import logging

from rapidfuzz import fuzz

from dcscreenings.schemas.screening import Screening, ScreeningFeed
from dcscreenings.services.tmdb_client import TMDbClient
from dcscreenings.utils.text import extract_year, normalise_title

logger = logging.getLogger(__name__)

Metadata = dict[str, str | None]


class PosterEnricher:
    """
    Fill in missing posters from TMDb.

    Runs after the feed is merged, one screening at a time:
    1. Skip screenings that already have a poster
    2. Normalise the title and pull any "(YYYY)" year out of it
    3. Search TMDb (once per title/year within a run)
    4. Accept the top hit only if its title fuzzy-matches ours
    5. Return a new Screening with the poster set

    A lookup failure leaves that screening untouched and moves on.
    """

    FUZZY_THRESHOLD = 85  # Minimum similarity score to trust a TMDb hit

    def __init__(self, tmdb_client: TMDbClient | None = None) -> None:
        """
        Initialize the enricher.

        Args:
            tmdb_client: TMDb client (creates default if not provided)
        """
        self.tmdb_client = tmdb_client or TMDbClient()
        self._cache: dict[tuple[str, str | None], Metadata | None] = {}

    @property
    def enabled(self) -> bool:
        return self.tmdb_client.enabled

    async def enrich_feed(self, feed: ScreeningFeed) -> ScreeningFeed:
        """
        Return a copy of the feed with missing posters filled where possible.

        Args:
            feed: Merged feed

        Returns:
            New ScreeningFeed; order and timestamp unchanged
        """
        if not self.enabled:
            logger.info("TMDb enrichment disabled (no API key)")
            return feed

        enriched: list[Screening] = []
        filled = 0
        failures = 0

        for screening in feed.screenings:
            try:
                updated = await self.enrich_screening(screening)
            except Exception as e:
                logger.warning(f"Enrichment failed for '{screening.title}': {e}")
                failures += 1
                updated = screening

            if updated is not screening:
                filled += 1
            enriched.append(updated)

        logger.info(f"Enrichment complete: {filled} posters added, {failures} lookups failed")
        return feed.model_copy(update={"screenings": enriched})

    async def enrich_screening(self, screening: Screening) -> Screening:
        """
        Add a poster to a single screening if it lacks one.

        Returns:
            The same object when nothing changed, otherwise a new Screening
            with only ``poster`` replaced
        """
        if screening.poster:
            return screening

        query = normalise_title(screening.title)
        if not query:
            return screening

        metadata = await self._lookup(query, extract_year(screening.title))
        if not metadata or not metadata.get("poster"):
            return screening

        if not self._is_match(query, metadata.get("title")):
            logger.info(f"TMDb hit '{metadata.get('title')}' rejected for '{query}'")
            return screening

        return screening.model_copy(update={"poster": metadata["poster"]})

    async def _lookup(self, query: str, year: str | None) -> Metadata | None:
        key = (query.lower(), year)
        if key not in self._cache:
            self._cache[key] = await self.tmdb_client.lookup(query, year)
        return self._cache[key]

    def _is_match(self, query: str, tmdb_title: str | None) -> bool:
        """Fuzzy compare our title with TMDb's; untitled hits are trusted."""
        if not tmdb_title:
            return True
        score = fuzz.ratio(query.lower(), tmdb_title.lower())
        logger.debug(f"Fuzzy score {score:.1f}% - '{query}' vs '{tmdb_title}'")
        return score >= self.FUZZY_THRESHOLD
