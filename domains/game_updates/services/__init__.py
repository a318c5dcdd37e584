"""Game updates domain services."""

from .id_store import read_tracked_ids, write_tracked_ids, update_tracked_ids
from .tracked_games import (
    TrackedGame,
    get_tracked_games,
    save_tracked_games,
    add_tracked_game,
    remove_tracked_game,
)
from .steam_news import NewsItem, FetchResult, fetch_news_for_app, parse_news_response

__all__ = [
    "read_tracked_ids",
    "write_tracked_ids",
    "update_tracked_ids",
    "TrackedGame",
    "get_tracked_games",
    "save_tracked_games",
    "add_tracked_game",
    "remove_tracked_game",
    "NewsItem",
    "FetchResult",
    "fetch_news_for_app",
    "parse_news_response",
]
