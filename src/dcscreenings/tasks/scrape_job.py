"""One aggregation run: scrape every venue and write the snapshot."""

import logging
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from dcscreenings.config import settings
from dcscreenings.schemas.screening import ScreeningFeed
from dcscreenings.scrapers import get_adapters
from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.services.aggregator import aggregate, collect_venue_results
from dcscreenings.services.enricher import PosterEnricher
from dcscreenings.services.snapshot import write_snapshot

logger = logging.getLogger(__name__)


async def run_scrape_all(
    adapters: Sequence[VenueAdapter] | None = None,
    enricher: PosterEnricher | None = None,
    snapshot_path: str | Path | None = None,
    now: datetime | None = None,
) -> ScreeningFeed:
    """Scrape all venues, merge, optionally enrich, and write the snapshot.

    Venue and enrichment failures are logged and absorbed. A snapshot write
    failure is not: ``SnapshotWriteError`` propagates and the previous
    snapshot stays in place.
    """
    if now is None:
        now = datetime.now(ZoneInfo(settings.timezone))
    today: date = now.date()

    if adapters is None:
        adapters = get_adapters()
    if enricher is None:
        enricher = PosterEnricher()
    if snapshot_path is None:
        snapshot_path = settings.snapshot_path

    logger.info(f"Starting scrape of {len(adapters)} venues for {today}")

    per_venue = await collect_venue_results(adapters, today)
    failures = sum(1 for result in per_venue if isinstance(result, BaseException))

    feed = aggregate(per_venue, today.isoformat(), generated_at=now)

    if enricher.enabled:
        feed = await enricher.enrich_feed(feed)

    write_snapshot(feed, snapshot_path)

    logger.info(
        f"Scrape complete: {len(adapters) - failures} venues succeeded, "
        f"{failures} failed, {len(feed.screenings)} screenings written"
    )
    return feed
