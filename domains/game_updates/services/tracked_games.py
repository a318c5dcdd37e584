"""Tracked Steam games, persisted as a JSON list of {name, app_id}."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path

from domains.errors import StoreIOError, DuplicateGameError, GameNotFoundError
from logger import logger
from .. import config


@dataclass
class TrackedGame:
    """A Steam app whose news is announced."""

    name: str
    app_id: str


def _resolve(path: Path | str | None) -> Path:
    return Path(path) if path is not None else config.TRACKED_APPS_FILE


def get_tracked_games(path: Path | str | None = None) -> list[TrackedGame]:
    """Load all tracked games, creating an empty list file on first use."""
    path = _resolve(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.info(f"Tracked games file does not exist yet: {path}, creating it")
        save_tracked_games([], path)
        return []
    except (OSError, ValueError) as e:
        raise StoreIOError(path, str(e)) from e

    if not isinstance(raw, list):
        raise StoreIOError(path, "expected a JSON list")

    games = []
    for entry in raw:
        if not isinstance(entry, dict) or not entry.get("name") or not entry.get("app_id"):
            logger.warning(f"Skipping malformed tracked game entry: {entry!r}")
            continue
        games.append(TrackedGame(name=str(entry["name"]), app_id=str(entry["app_id"])))
    return games


def save_tracked_games(games: list[TrackedGame], path: Path | str | None = None) -> None:
    """Rewrite the whole tracked games file."""
    path = _resolve(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps([asdict(g) for g in games], indent=2), encoding="utf-8")
    except OSError as e:
        logger.error(f"Error saving tracked games to {path}: {e}")
        raise StoreIOError(path, str(e)) from e


def add_tracked_game(name: str, app_id: str, path: Path | str | None = None) -> str:
    """Start tracking a game.

    Returns:
        Confirmation message for the user

    Raises:
        DuplicateGameError: The app id is already tracked.
    """
    games = get_tracked_games(path)

    for game in games:
        if game.app_id == app_id:
            raise DuplicateGameError(app_id, game.name)

    games.append(TrackedGame(name=name, app_id=app_id))
    save_tracked_games(games, path)
    logger.info(f"Added tracked game {name} ({app_id})")
    return f'Successfully added "{name}" ({app_id}) to tracked games'


def remove_tracked_game(app_id: str, path: Path | str | None = None) -> str:
    """Stop tracking a game.

    Raises:
        GameNotFoundError: No tracked game has this app id.
    """
    games = get_tracked_games(path)

    for index, game in enumerate(games):
        if game.app_id == app_id:
            del games[index]
            save_tracked_games(games, path)
            logger.info(f"Removed tracked game {game.name} ({app_id})")
            return f'Successfully removed "{game.name}" ({app_id}) from tracked games'

    raise GameNotFoundError(app_id)
