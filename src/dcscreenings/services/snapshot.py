"""Write the feed snapshot read by the static front end."""

import logging
import os
import tempfile
from pathlib import Path

from dcscreenings.schemas.screening import ScreeningFeed

logger = logging.getLogger(__name__)


class SnapshotWriteError(Exception):
    """The snapshot could not be written; the previous file is untouched."""


def render_snapshot(feed: ScreeningFeed) -> str:
    """Serialize a feed to the snapshot JSON format."""
    return feed.model_dump_json(by_alias=True, indent=2)


def write_snapshot(feed: ScreeningFeed, path: str | Path) -> Path:
    """
    Atomically replace the snapshot file with the given feed.

    The JSON is written to a temporary file in the target directory and
    moved over the old snapshot, so readers only ever see a complete file.

    Args:
        feed: Feed to persist
        path: Snapshot location

    Returns:
        The snapshot path

    Raises:
        SnapshotWriteError: If the directory or file cannot be written
    """
    target = Path(path)
    payload = render_snapshot(feed)

    tmp_name: str | None = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.write("\n")
        # mkstemp creates the file 0600; the snapshot must be world-readable
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SnapshotWriteError(f"Could not write snapshot to {target}: {e}") from e

    logger.info(f"Wrote {len(feed.screenings)} screenings to {target}")
    return target
