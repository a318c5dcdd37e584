"""Game tracking chat commands."""

import asyncio

from domains.base import CommandDefinition
from domains.errors import AlfredError, DuplicateGameError, GameNotFoundError
from logger import logger
from . import config
from .checker import check_game_news
from .services import get_tracked_games, add_tracked_game, remove_tracked_game

TIMEOUT_REPLY = "The operation timed out, sir. Please try again."


def parse_game_input(text: str) -> tuple[str, str] | None:
    """Parse "Game Name,AppID" into (name, app_id)."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


async def _ask(bot, message, prompt: str) -> str:
    """Ask the author a follow-up question and wait for their answer.

    Raises:
        asyncio.TimeoutError: No answer within PROMPT_TIMEOUT seconds.
    """
    await message.reply(prompt)
    answer = await bot.wait_for(
        "message",
        check=lambda m: m.author.id == message.author.id and m.channel.id == message.channel.id,
        timeout=config.PROMPT_TIMEOUT
    )
    return answer.content


async def game_updates(bot, message):
    """!gameUpdates - run a news check now."""
    await check_game_news(bot, message)


async def tracked_games(bot, message):
    """!trackedGames - list tracked games."""
    try:
        games = get_tracked_games()
    except AlfredError as e:
        logger.error(f"Error handling !trackedGames command: {e}")
        await message.reply("I do apologize, sir. I encountered an error fetching the tracked games list.")
        return

    if not games:
        await message.reply("There are currently no games being tracked, sir.")
        return

    games_list = "\n".join(f"• {game.name} ({game.app_id})" for game in games)
    await message.reply(f"Here are the currently tracked games, sir:\n{games_list}")


async def add_game(bot, message):
    """!addTrackedGame - prompt for name and app id, then track it."""
    try:
        answer = await _ask(
            bot, message,
            "Please provide the game name and Steam app ID separated by a comma (e.g., Rematch,2138720)"
        )
    except asyncio.TimeoutError:
        await message.reply(TIMEOUT_REPLY)
        return

    parsed = parse_game_input(answer)
    if not parsed:
        await message.reply("Invalid format. Please use: Game Name,AppID")
        return

    name, app_id = parsed
    try:
        await message.reply(add_tracked_game(name, app_id))
    except DuplicateGameError as e:
        await message.reply(str(e))
    except AlfredError as e:
        logger.error(f"Error handling !addTrackedGame command: {e}")
        await message.reply("I do apologize, sir. I encountered an error adding the game.")


async def remove_game(bot, message):
    """!removeTrackedGame - prompt for an app id, then stop tracking it."""
    try:
        answer = await _ask(bot, message, "Please provide the Steam app ID of the game you wish to remove.")
    except asyncio.TimeoutError:
        await message.reply(TIMEOUT_REPLY)
        return

    try:
        await message.reply(remove_tracked_game(answer.strip()))
    except GameNotFoundError as e:
        await message.reply(str(e))
    except AlfredError as e:
        logger.error(f"Error handling !removeTrackedGame command: {e}")
        await message.reply("I do apologize, sir. I encountered an error removing the game.")


COMMANDS = [
    CommandDefinition(
        name="!gameUpdates",
        description="Check for new updates for all tracked games",
        handler=game_updates
    ),
    CommandDefinition(
        name="!trackedGames",
        description="Display all currently tracked games",
        handler=tracked_games
    ),
    CommandDefinition(
        name="!addTrackedGame",
        description="Add a new game to track",
        handler=add_game
    ),
    CommandDefinition(
        name="!removeTrackedGame",
        description="Remove a game from tracking",
        handler=remove_game
    ),
]
