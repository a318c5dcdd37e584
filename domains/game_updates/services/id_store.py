"""Announced news id store.

A newline-delimited text file of Steam news gids that have already been
posted. Shared by every tracked game and trimmed to the newest entries on
each write so it never grows without bound.
"""

from pathlib import Path

from domains.errors import StoreIOError
from logger import logger
from .. import config


def _resolve(path: Path | str | None) -> Path:
    return Path(path) if path is not None else config.TRACKING_FILE


def read_tracked_ids(path: Path | str | None = None) -> list[str]:
    """Load announced ids in file order.

    A missing file is a cold start, not an error: it is created empty and
    an empty list is returned.

    Raises:
        StoreIOError: The file exists but cannot be read, or cannot be created.
    """
    path = _resolve(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info(f"Tracking file does not exist yet: {path}, creating it")
        write_tracked_ids(path, [])
        return []
    except OSError as e:
        raise StoreIOError(path, str(e)) from e

    ids = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info(f"Loaded {len(ids)} tracked IDs from {path}")
    return ids


def write_tracked_ids(path: Path | str | None, ids: list[str], max_ids: int = config.DEFAULT_MAX_IDS) -> list[str]:
    """Replace the file with the newest ``max_ids`` ids, one per line.

    Returns:
        The ids actually written

    Raises:
        StoreIOError: The file or its directory is not writable.
    """
    path = _resolve(path)
    trimmed = list(ids[-max_ids:]) if max_ids > 0 else []
    content = "".join(f"{i}\n" for i in trimmed)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing tracking file {path}: {e}")
        raise StoreIOError(path, str(e)) from e

    if len(trimmed) != len(ids):
        logger.info(f"Updated tracking file {path} with {len(ids)} IDs (trimmed to {len(trimmed)})")
    return trimmed


def update_tracked_ids(path: Path | str | None, new_ids: list[str], max_ids: int = config.DEFAULT_MAX_IDS) -> list[str]:
    """Append ``new_ids`` to the stored ids and rewrite the trimmed result.

    Read-modify-write; assumes a single writer.
    """
    existing = read_tracked_ids(path)
    written = write_tracked_ids(path, existing + list(new_ids), max_ids)
    logger.info(f"Recorded {len(new_ids)} new IDs ({len(written)} stored)")
    return written
