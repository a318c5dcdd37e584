"""Game updates domain implementation."""

from domains.base import Domain, CommandDefinition, ScheduledTask, help_lines
from .commands import COMMANDS
from .schedules import SCHEDULES


class GameUpdatesDomain(Domain):
    """Steam news announcements and tracked game management."""

    @property
    def name(self) -> str:
        return "game_updates"

    @property
    def commands(self) -> list[CommandDefinition]:
        return COMMANDS

    @property
    def help_sections(self) -> list[tuple[str, str]]:
        return [("🎮 Game Tracking", help_lines(COMMANDS))]

    @property
    def schedules(self) -> list[ScheduledTask]:
        return SCHEDULES
