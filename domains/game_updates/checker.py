"""Steam news check: fetch, diff, announce, persist.

One cycle walks every tracked game in order, announces news items whose gid
is not in the announced-id file, then appends the new gids to that file in a
single write. Ids are recorded even when their announcement failed to send,
so a flaky channel never causes the same post to be spammed twice.

Scheduled and manual (!gameUpdates) checks share one lock; a check that
arrives while another is running is skipped instead of racing on the files.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from logger import logger
from . import config
from .services import (
    TrackedGame,
    NewsItem,
    get_tracked_games,
    read_tracked_ids,
    update_tracked_ids,
    fetch_news_for_app,
)

NO_GAMES_REPLY = (
    "There are no games currently being tracked, sir. "
    "Use !addTrackedGame to add a game to monitor."
)
BUSY_REPLY = "I'm already checking for game updates, sir. Please try again in a moment."
ERROR_REPLY = "I do apologize, sir. I encountered an error while checking for Steam news."

_cycle_lock = asyncio.Lock()


@dataclass
class CheckSummary:
    """What one check cycle did."""

    games_checked: int = 0
    announced: list[tuple[str, int]] = field(default_factory=list)  # (game name, new items)
    failed_games: list[str] = field(default_factory=list)
    new_ids: list[str] = field(default_factory=list)
    failed_sends: int = 0

    @property
    def total_new(self) -> int:
        return len(self.new_ids)


def format_announcement(game: TrackedGame, item: NewsItem) -> str:
    """Announcement text; Discord embeds the URL preview itself."""
    return f"📢 **New update for {game.name}!**\n{item.url}"


def format_summary(summary: CheckSummary) -> str:
    """Reply for a manual check."""
    if summary.total_new:
        games = ", ".join(f"{name} ({count})" for name, count in summary.announced)
        text = (
            f"I've found {summary.total_new} new game updates across {games}, sir. "
            f"I've posted them in the {config.CHANNEL_NAME} channel."
        )
    else:
        text = (
            f"I've checked for updates for all {summary.games_checked} tracked games, sir. "
            "No new announcements were found."
        )
    if summary.failed_games:
        text += f"\nI'm afraid Steam could not be reached for: {', '.join(summary.failed_games)}."
    return text


async def _reply(message, text: str) -> None:
    try:
        await message.reply(text)
    except Exception as e:
        logger.error(f"Failed to reply to !gameUpdates: {e}")


async def _get_announcement_channel(bot):
    """Resolve the announcement channel, from cache first."""
    channel = bot.get_channel(config.CHANNEL_ID)
    if channel:
        return channel
    try:
        return await bot.fetch_channel(config.CHANNEL_ID)
    except Exception as e:
        logger.error(f"Could not find target channel with ID {config.CHANNEL_ID}: {e}")
        return None


async def _announce(channel, game: TrackedGame, item: NewsItem) -> bool:
    """Post one item. Returns False if it could not be sent."""
    if channel is None:
        return False
    try:
        await channel.send(format_announcement(game, item))
    except Exception as e:
        logger.error(f"Failed to announce news item {item.gid} ({game.name}): {e}")
        return False
    logger.info(f"Sent announcement for news item: {item.gid} ({game.name})")
    return True


async def _run_cycle(bot, message) -> CheckSummary:
    logger.info("Checking for new Steam news updates for all tracked games...")

    games = get_tracked_games(config.TRACKED_APPS_FILE)
    if not games:
        logger.info("No games are currently being tracked")
        if message:
            await _reply(message, NO_GAMES_REPLY)
        return CheckSummary()

    # One snapshot per cycle, shared by every game
    seen = set(read_tracked_ids(config.TRACKING_FILE))

    summary = CheckSummary(games_checked=len(games))
    channel = None
    channel_resolved = False

    for game in games:
        result = await fetch_news_for_app(game.app_id, game.name)
        if not result.success:
            logger.warning(f"Skipping {game.name} this round: {result.error}")
            summary.failed_games.append(game.name)
            continue

        new_items = [item for item in result.items if item.gid not in seen]
        logger.info(f"Found {len(new_items)} new news items to announce for {game.name}")
        if not new_items:
            continue

        if not channel_resolved:
            channel = await _get_announcement_channel(bot)
            channel_resolved = True

        for item in new_items:
            if not await _announce(channel, game, item):
                summary.failed_sends += 1
            seen.add(item.gid)
            summary.new_ids.append(item.gid)

        summary.announced.append((game.name, len(new_items)))

    if summary.new_ids:
        update_tracked_ids(config.TRACKING_FILE, summary.new_ids, config.MAX_TRACKED_IDS)
        if summary.failed_sends:
            logger.warning(
                f"{summary.failed_sends} of {summary.total_new} announcements failed to send; "
                "their IDs were recorded anyway"
            )

    if message:
        await _reply(message, format_summary(summary))

    logger.info("Steam news check completed for all games")
    return summary


async def check_game_news(bot, message=None) -> Optional[CheckSummary]:
    """Run one check cycle.

    Args:
        bot: Discord client used to resolve the announcement channel
        message: The !gameUpdates message to reply to, None for scheduled runs

    Returns:
        Summary of the cycle, or None if it was skipped or failed
    """
    if _cycle_lock.locked():
        logger.warning("Steam news check already running, skipping this trigger")
        if message:
            await _reply(message, BUSY_REPLY)
        return None

    async with _cycle_lock:
        try:
            return await _run_cycle(bot, message)
        except Exception as e:
            logger.error(f"Error checking Steam news: {e}")
            if message:
                await _reply(message, ERROR_REPLY)
            return None
