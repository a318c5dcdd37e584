"""General chat commands: help, ping, random numbers, magic 8-ball."""

import random

import discord

from domains.base import CommandDefinition
from registry import registry
from . import config
from .teams import random_teams


def eight_ball_answer(content: str) -> str:
    """Pick a random answer, echoing the question if one was asked."""
    response = random.choice(config.EIGHT_BALL_RESPONSES)
    question = content.strip()[len("!8ball"):].strip()
    if question:
        return f'Question: "{question}"\nAlfred says: {response}'
    return f"Alfred says: {response}"


def build_help_embed(bot) -> discord.Embed:
    """Embed listing every registered domain's commands."""
    embed = discord.Embed(title="Alfred's Command List", colour=config.HELP_COLOUR)
    if bot.user is not None:
        embed.set_thumbnail(url=bot.user.display_avatar.url)

    for domain in registry.all_domains():
        for title, body in domain.help_sections:
            embed.add_field(name=title, value=body, inline=False)

    embed.set_footer(
        text="I automatically check for game updates every hour and post them in the #game-updates channel."
    )
    embed.timestamp = discord.utils.utcnow()
    return embed


async def help_command(bot, message):
    """!help"""
    await message.reply("Here are all available commands, sir:", embed=build_help_embed(bot))


async def ping(bot, message):
    await message.reply("Pong!")


async def random_number(bot, message):
    await message.reply(f"Your random number is: {random.randint(1, 100)}")


async def eight_ball(bot, message):
    await message.reply(eight_ball_answer(message.content))


COMMANDS = [
    CommandDefinition(name="!help", description="Display this help message", handler=help_command),
    CommandDefinition(name="!ping", description="Check if I'm online", handler=ping),
    CommandDefinition(name="!random", description="Generate a random number between 1-100", handler=random_number),
    CommandDefinition(
        name="!8ball",
        description="Ask the Magic 8-Ball a question",
        handler=eight_ball,
        exact=False
    ),
    CommandDefinition(
        name="!randomTeams",
        description="Create random teams from users in a voice channel",
        handler=random_teams
    ),
]
