"""Adapter registry for the venues included in the feed."""

from typing import Type

from dcscreenings.scrapers.alamo import AlamoScraper
from dcscreenings.scrapers.angelika import AngelikaScraper
from dcscreenings.scrapers.avalon import AvalonScraper
from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.scrapers.nga import NGAScraper
from dcscreenings.scrapers.suns import SunsCinemaScraper

# Registry mapping venue ids to adapter classes, in feed order
ADAPTER_REGISTRY: dict[str, Type[VenueAdapter]] = {
    "suns": SunsCinemaScraper,
    "avalon": AvalonScraper,
    "angelika": AngelikaScraper,
    "alamo": AlamoScraper,
    "nga": NGAScraper,
}


def get_adapter(venue_id: str) -> VenueAdapter | None:
    """
    Get an adapter instance by venue id.

    Args:
        venue_id: The venue id (e.g., "suns", "avalon")

    Returns:
        Adapter instance or None if the id is unknown
    """
    adapter_class = ADAPTER_REGISTRY.get(venue_id)
    if adapter_class:
        return adapter_class()
    return None


def get_adapters() -> list[VenueAdapter]:
    """One instance of every registered adapter."""
    return [adapter_class() for adapter_class in ADAPTER_REGISTRY.values()]


__all__ = [
    "ADAPTER_REGISTRY",
    "get_adapter",
    "get_adapters",
    "VenueAdapter",
    "RawCandidate",
    "VenuePolicy",
    "AlamoScraper",
    "AngelikaScraper",
    "AvalonScraper",
    "NGAScraper",
    "SunsCinemaScraper",
]
