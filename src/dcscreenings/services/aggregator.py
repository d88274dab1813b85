"""Fan out to venue adapters and merge their screenings into one feed."""

import asyncio
import logging
from collections.abc import Sequence
from datetime import date, datetime
from zoneinfo import ZoneInfo

from dcscreenings.config import settings
from dcscreenings.schemas.screening import Screening, ScreeningFeed
from dcscreenings.scrapers.base import VenueAdapter
from dcscreenings.services.deduplicator import dedupe
from dcscreenings.services.normalizer import normalize

logger = logging.getLogger(__name__)

VenueResult = list[Screening] | BaseException


async def collect_venue_results(
    adapters: Sequence[VenueAdapter],
    today: date,
) -> list[VenueResult]:
    """
    Run every adapter concurrently and normalize what each one returns.

    All adapters are allowed to settle. A failing adapter's slot holds its
    exception instead of a screening list, so one venue outage never stops
    the others from being collected.

    Args:
        adapters: Venue adapters to run
        today: Current date in the reference timezone

    Returns:
        One entry per adapter, in adapter order: deduplicated screenings, or
        the exception the adapter raised
    """
    raw_results = await asyncio.gather(
        *(adapter.fetch(today) for adapter in adapters),
        return_exceptions=True,
    )

    results: list[VenueResult] = []
    for adapter, raw in zip(adapters, raw_results):
        if isinstance(raw, BaseException):
            logger.error(
                f"Error scraping {adapter.venue_name}: {raw!r}",
                exc_info=(type(raw), raw, raw.__traceback__),
            )
            results.append(raw)
            continue

        logger.info(f"Found {len(raw)} raw candidates for {adapter.venue_name}")
        results.append(dedupe(normalize(raw, adapter.policy, today)))

    return results


def aggregate(
    per_venue_results: Sequence[VenueResult],
    today: str,
    generated_at: datetime | None = None,
) -> ScreeningFeed:
    """
    Merge per-venue screenings into a single feed.

    Keeps only screenings dated today or later and sorts by (date, time).
    The sort is stable, so screenings sharing a slot keep venue order.
    Entries that are exceptions (failed venues) contribute nothing. The
    merged list is deduplicated once more so (title, venue, date, time)
    stays unique across the whole feed.

    Args:
        per_venue_results: Deduplicated screenings per venue, or exceptions
        today: Today's date as YYYY-MM-DD in the reference timezone
        generated_at: Run timestamp (defaults to now in the reference timezone)

    Returns:
        The merged ScreeningFeed
    """
    merged: list[Screening] = []
    failures = 0

    for result in per_venue_results:
        if isinstance(result, BaseException):
            failures += 1
            continue
        merged.extend(result)

    # Two adapters can report under the same venue name
    merged = dedupe(merged)

    # Fixed-width ISO strings compare correctly as text
    upcoming = [s for s in merged if s.date >= today]
    upcoming.sort(key=lambda s: (s.date, s.time))

    if generated_at is None:
        generated_at = datetime.now(ZoneInfo(settings.timezone))

    logger.info(
        f"Merged {len(upcoming)} upcoming screenings "
        f"({len(merged) - len(upcoming)} past, {failures} venue(s) failed)"
    )
    return ScreeningFeed(generated_at=generated_at, screenings=upcoming)
