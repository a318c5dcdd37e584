"""Random team creation from a voice channel or a typed list of names."""

import asyncio
import random
import re

from logger import logger
from . import config


def create_random_teams(players: list[str]) -> tuple[list[str], list[str]]:
    """Shuffle players into two teams; team 1 takes the odd one out."""
    shuffled = list(players)
    random.shuffle(shuffled)
    split = (len(shuffled) + 1) // 2
    return shuffled[:split], shuffled[split:]


def format_teams_table(team1: list[str], team2: list[str]) -> str:
    """Render both teams side by side as a plain-text table."""
    width = max(len(name) for name in team1 + team2) + 5
    gap = " " * config.TEAM_COLUMN_GAP

    lines = [
        f"{'Team 1'.ljust(width)}|{gap}Team 2",
        f"{'-' * width}+{'-' * width}",
    ]
    for i in range(max(len(team1), len(team2))):
        left = team1[i] if i < len(team1) else ""
        right = team2[i] if i < len(team2) else ""
        lines.append(f"{left.ljust(width)}|{gap}{right}".rstrip())

    return "\n".join(lines) + "\n"


def parse_names(text: str) -> list[str]:
    """Split a comma-separated list of names, dropping blanks."""
    return [name.strip() for name in text.split(",") if name.strip()]


async def _post_teams(channel, intro: str, players: list[str]) -> None:
    team1, team2 = create_random_teams(players)
    await channel.send(intro)
    await channel.send(f"```\n{format_teams_table(team1, team2)}```")


async def teams_from_voice(message, voice_channel) -> None:
    """Build teams from the non-bot members of a voice channel."""
    players = [member.display_name for member in voice_channel.members if not member.bot]

    if len(players) <= 1:
        await message.reply(
            "I do apologize, sir, but I require at least two participants "
            "in the voice channel to create balanced teams."
        )
        return

    logger.info(f"Creating teams from voice channel {voice_channel.name} ({len(players)} players)")
    await _post_teams(
        message.channel,
        f"I've taken the liberty of organizing the participants from {voice_channel.name} into teams, sir:",
        players
    )


async def teams_from_names(bot, message) -> None:
    """Ask the author for a list of names and build teams from it."""
    await message.reply(
        "Very good, sir. Please provide the names of the participants, "
        "separated by commas, if you would be so kind."
    )

    try:
        answer = await bot.wait_for(
            "message",
            check=lambda m: m.author.id == message.author.id and m.channel.id == message.channel.id,
            timeout=config.NAMES_TIMEOUT
        )
    except asyncio.TimeoutError:
        await message.reply(
            "I notice you haven't provided any names within the time limit, sir. "
            "Do let me know if you wish to try again."
        )
        return

    players = parse_names(answer.content)
    if len(players) <= 1:
        await message.reply("I'm afraid I need at least two names to create teams, sir.")
        return

    await _post_teams(message.channel, "I've prepared the teams as requested, sir:", players)


_YES = re.compile(r"\byes\b", re.IGNORECASE)
_NO = re.compile(r"\bno\b", re.IGNORECASE)


def parse_yes_no(content: str) -> str | None:
    """'yes' or 'no' when exactly one appears as a whole word, else None."""
    said_yes = bool(_YES.search(content))
    said_no = bool(_NO.search(content))
    if said_yes == said_no:
        return None
    return "yes" if said_yes else "no"


async def random_teams(bot, message):
    """!randomTeams - offer voice channel members, otherwise ask for names."""
    voice_state = getattr(message.author, "voice", None)
    voice_channel = voice_state.channel if voice_state else None

    if voice_channel is None:
        await teams_from_names(bot, message)
        return

    await message.reply(
        "I notice you're in a voice channel, sir. Would you like me to create teams using "
        "the participants in your current voice channel? Please respond with 'yes' or 'no'."
    )

    try:
        answer = await bot.wait_for(
            "message",
            check=lambda m: (
                m.author.id == message.author.id
                and m.channel.id == message.channel.id
                and parse_yes_no(m.content) is not None
            ),
            timeout=config.VOICE_CONFIRM_TIMEOUT
        )
    except asyncio.TimeoutError:
        await message.reply(
            "I didn't receive a clear response, sir. Please use the command again when you're ready."
        )
        return

    if parse_yes_no(answer.content) == "yes":
        await teams_from_voice(message, voice_channel)
    else:
        await teams_from_names(bot, message)
