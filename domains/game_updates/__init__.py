"""Game updates domain - Steam news announcements for tracked games."""

from .domain import GameUpdatesDomain
from .checker import check_game_news, CheckSummary
from .config import CHANNEL_ID

__all__ = ["GameUpdatesDomain", "check_game_news", "CheckSummary", "CHANNEL_ID"]
