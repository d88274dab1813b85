"""Base adapter interface for all venue scrapers."""

from abc import ABC, abstractmethod
from datetime import date

from dcscreenings.scrapers.models import RawCandidate, VenuePolicy


class VenueAdapter(ABC):
    """
    Abstract base class for all venue adapters.

    Each adapter knows how to fetch one venue's listings page and pull raw
    candidates out of it. It never parses dates or times itself; that is
    left to the normalizer, driven by ``policy``.
    """

    policy: VenuePolicy

    @abstractmethod
    async def fetch(self, today: date) -> list[RawCandidate]:
        """
        Fetch raw screening candidates from the venue.

        Args:
            today: Current date in the reference timezone. Listings that
                only show "today's" times are stamped with it.

        Returns:
            List of raw candidates

        Raises:
            Any network, timeout or browser error. The aggregation run treats
            a failed adapter as contributing no screenings.
        """

    @property
    def venue_id(self) -> str:
        return self.policy.venue_id

    @property
    def venue_name(self) -> str:
        return self.policy.venue_name

    def candidate(
        self,
        title: str,
        raw_date: str,
        raw_time: str,
        poster_url: str | None = None,
        ticket_url: str | None = None,
    ) -> RawCandidate:
        """Build a RawCandidate tagged with this venue's id."""
        return RawCandidate(
            title=title,
            venue_id=self.venue_id,
            raw_date=raw_date,
            raw_time=raw_time,
            poster_url=poster_url,
            ticket_url=ticket_url,
        )
