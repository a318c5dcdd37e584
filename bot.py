"""Alfred - Discord game-night butler.

Announces Steam news for tracked games on a schedule and answers a handful
of "!" commands. Commands are routed to domain handlers via the registry.
"""

import sys

import discord
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from registry import registry
from logger import logger
from config import DISCORD_TOKEN, COMMAND_PREFIX, missing_settings
from utils import sanitize_log

from domains.general import GeneralDomain
from domains.game_updates import GameUpdatesDomain

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
intents.voice_states = True  # !randomTeams reads voice channel members
bot = commands.Bot(command_prefix=COMMAND_PREFIX, intents=intents, help_command=None)

# Initialize scheduler
scheduler = AsyncIOScheduler()


def register_domains() -> None:
    """Register all domains (idempotent)."""
    if registry.all_domains():
        return
    registry.register(GameUpdatesDomain())
    registry.register(GeneralDomain())


@bot.event
async def on_ready():
    """Called when bot is connected and ready."""
    logger.info(f"Logged in as {bot.user}")

    # on_ready fires again after reconnects; only start jobs once
    if scheduler.running:
        return

    register_domains()

    for domain in registry.all_domains():
        jobs = domain.register_schedules(scheduler, bot)
        logger.info(f"Registered domain: {domain.name} ({len(domain.commands)} commands, {len(jobs)} jobs)")

    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")


async def dispatch(message) -> bool:
    """Route a message to its command handler.

    Returns:
        True if a command handled the message
    """
    if message.author.bot or not message.content:
        return False

    command = registry.find_command(message.content)
    if not command:
        return False

    logger.info(f"Command {command.name} from {message.author}")
    try:
        await command.handler(bot, message)
    except Exception as e:
        logger.error(f"Error handling {command.name}: {sanitize_log(str(e))}")
        try:
            await message.reply("I do apologize, sir. Something went wrong with that command.")
        except discord.HTTPException:
            pass  # nothing left to tell the user through
    return True


@bot.event
async def on_message(message):
    """Handle incoming messages."""
    await dispatch(message)


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.exception(f"Bot error in {event}")


def main():
    """Entry point."""
    missing = missing_settings()
    if missing:
        logger.error(f"Missing required settings: {', '.join(missing)}")
        sys.exit(1)

    register_domains()
    logger.info("Starting Alfred...")
    bot.run(DISCORD_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
