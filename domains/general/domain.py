"""General domain implementation."""

from domains.base import Domain, CommandDefinition, help_lines
from .commands import COMMANDS


def _pick(*names: str) -> list[CommandDefinition]:
    return [c for c in COMMANDS if c.name in names]


class GeneralDomain(Domain):
    """Team randomizer and small fun commands."""

    @property
    def name(self) -> str:
        return "general"

    @property
    def commands(self) -> list[CommandDefinition]:
        return COMMANDS

    @property
    def help_sections(self) -> list[tuple[str, str]]:
        return [
            ("👥 Team Management", help_lines(_pick("!randomTeams"))),
            ("🎲 Fun Commands", help_lines(_pick("!ping", "!random", "!8ball"))),
            ("ℹ️ Help", help_lines(_pick("!help"))),
        ]
