"""Steam news fetching.

Calls ISteamNews/GetNewsForApp for one app, validates the response shape and
keeps only official announcements. Deduplication is left to the checker.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from domains.errors import TransportError
from logger import logger
from utils import redact_secret
import config as global_config
from .. import config

UNEXPECTED_FORMAT = "Unexpected API response format"


@dataclass
class NewsItem:
    """One Steam news post."""

    gid: str
    url: str
    feed_type: int
    game_name: str


@dataclass
class FetchResult:
    """Outcome of fetching news for one tracked game."""

    app_id: str
    game_name: str
    success: bool
    items: list[NewsItem] = field(default_factory=list)
    app_name: Optional[str] = None  # name reported by Steam, if any
    error: Optional[str] = None


def parse_news_response(payload: Any) -> Optional[list[dict]]:
    """Validate ``{"appnews": {"newsitems": [...]}}`` and return the raw items.

    Returns None when the payload does not have the expected shape.
    """
    if not isinstance(payload, dict):
        return None
    appnews = payload.get("appnews")
    if not isinstance(appnews, dict):
        return None
    newsitems = appnews.get("newsitems")
    if not isinstance(newsitems, list):
        return None
    return [item for item in newsitems if isinstance(item, dict)]


def _feed_type(item: dict) -> Optional[int]:
    try:
        return int(item.get("feed_type"))
    except (TypeError, ValueError):
        return None


def filter_official(raw_items: list[dict], game_name: str) -> list[NewsItem]:
    """Keep official announcements (feed_type 1) in feed order."""
    items = []
    for raw in raw_items:
        feed_type = _feed_type(raw)
        if feed_type != config.OFFICIAL_FEED_TYPE:
            continue
        if not raw.get("gid") or not raw.get("url"):
            logger.warning(f"Skipping {game_name} news item without gid/url")
            continue
        items.append(NewsItem(
            gid=str(raw["gid"]),
            url=str(raw["url"]),
            feed_type=feed_type,
            game_name=game_name
        ))
    return items


async def _get_news(app_id: str) -> Any:
    """GET the raw news payload for an app."""
    params = {
        "key": global_config.STEAM_API_KEY or "",
        "appid": app_id,
        "count": config.NEWS_COUNT,
    }
    async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT) as client:
        response = await client.get(config.STEAM_NEWS_URL, params=params)

    if response.status_code != 200:
        raise TransportError(f"Steam API HTTP {response.status_code}")
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(f"Steam API returned invalid JSON: {e}") from e


async def fetch_news_for_app(app_id: str, game_name: str) -> FetchResult:
    """Fetch the latest official news for one game.

    Never raises: transport and format problems come back as
    ``FetchResult(success=False, error=...)`` so one bad game cannot stop
    the others from being checked.
    """
    logger.info(f"Checking for news updates for {game_name} ({app_id})...")

    try:
        payload = await _get_news(app_id)
    except Exception as e:
        error = redact_secret(str(e) or type(e).__name__, global_config.STEAM_API_KEY)
        logger.error(f"Error checking Steam news for {game_name} ({app_id}): {error}")
        return FetchResult(app_id=app_id, game_name=game_name, success=False, error=error)

    raw_items = parse_news_response(payload)
    if raw_items is None:
        logger.warning(f"Unexpected API response format for {game_name} ({app_id})")
        return FetchResult(app_id=app_id, game_name=game_name, success=False, error=UNEXPECTED_FORMAT)

    items = filter_official(raw_items, game_name)
    logger.info(f"Retrieved {len(items)} relevant news items from Steam API for {game_name}")

    return FetchResult(
        app_id=app_id,
        game_name=game_name,
        success=True,
        items=items,
        app_name=payload["appnews"].get("appname") or game_name
    )
