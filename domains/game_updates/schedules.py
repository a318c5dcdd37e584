"""Game updates domain scheduled tasks."""

from domains.base import ScheduledTask
from logger import logger
from . import config
from .checker import check_game_news


async def scheduled_news_check(bot):
    """Hourly Steam news check; no reply target."""
    summary = await check_game_news(bot)
    if summary is not None and summary.total_new:
        logger.info(f"Scheduled check announced {summary.total_new} updates")


SCHEDULES = [
    ScheduledTask(
        name="steam_news_check",
        handler=scheduled_news_check,
        minutes=config.CHECK_INTERVAL_MINUTES,
        run_on_start=True
    )
]
