"""Run the screening aggregation once and write the snapshot."""

import asyncio
import logging
import sys

from dcscreenings.services.snapshot import SnapshotWriteError
from dcscreenings.tasks.scrape_job import run_scrape_all

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    try:
        asyncio.run(run_scrape_all())
    except SnapshotWriteError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
