"""Turn raw venue candidates into canonical Screening records."""

import logging
from datetime import date

from pydantic import ValidationError

from dcscreenings.schemas.screening import Screening
from dcscreenings.scrapers.models import RawCandidate, VenuePolicy
from dcscreenings.utils.dates import parse_date
from dcscreenings.utils.text import clean_title, is_plausible_title
from dcscreenings.utils.times import parse_time

logger = logging.getLogger(__name__)


def normalize(
    candidates: list[RawCandidate],
    policy: VenuePolicy,
    reference_date: date,
) -> list[Screening]:
    """
    Parse and validate a venue's raw candidates.

    Candidates whose date or time cannot be parsed, or whose title is empty
    or implausibly long, are dropped without raising. The feed is best
    effort; one bad listing never costs the venue its other screenings.

    Args:
        candidates: Raw records from one venue adapter
        policy: The venue's name and AM/PM convention
        reference_date: Date the listings were fetched (for year inference)

    Returns:
        Screenings in candidate order
    """
    screenings: list[Screening] = []
    dropped = 0

    for candidate in candidates:
        screening = _normalize_one(candidate, policy, reference_date)
        if screening is None:
            dropped += 1
            continue
        screenings.append(screening)

    logger.info(
        f"{policy.venue_name}: normalized {len(screenings)} of "
        f"{len(candidates)} candidates ({dropped} dropped)"
    )
    return screenings


def _normalize_one(
    candidate: RawCandidate,
    policy: VenuePolicy,
    reference_date: date,
) -> Screening | None:
    title = clean_title(candidate.title)
    if not is_plausible_title(title):
        logger.debug(f"{policy.venue_name}: rejected title {candidate.title[:40]!r}")
        return None

    parsed_date = parse_date(candidate.raw_date, reference_date)
    if parsed_date is None:
        logger.debug(f"{policy.venue_name}: unparseable date {candidate.raw_date!r} for '{title}'")
        return None

    parsed_time = parse_time(candidate.raw_time, policy.am_pm_convention)
    if parsed_time is None:
        logger.debug(f"{policy.venue_name}: unparseable time {candidate.raw_time!r} for '{title}'")
        return None

    try:
        return Screening(
            title=title,
            venue=policy.venue_name,
            date=parsed_date,
            time=parsed_time,
            poster=candidate.poster_url or None,
            ticket_link=candidate.ticket_url or None,
        )
    except ValidationError as e:
        logger.debug(f"{policy.venue_name}: invalid screening for '{title}': {e}")
        return None
