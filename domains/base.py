"""Base domain class and supporting types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Any

from apscheduler.job import Job
from apscheduler.schedulers.asyncio import AsyncIOScheduler


@dataclass
class CommandDefinition:
    """Chat command keyword + handler."""

    name: str
    description: str
    handler: Callable[..., Any]
    exact: bool = True  # False = match as prefix (e.g. "!8ball question")

    def matches(self, content: str) -> bool:
        """Check whether a message body invokes this command."""
        content = content.strip()
        if self.exact:
            return content == self.name
        return content == self.name or content.startswith(self.name + " ")


@dataclass
class ScheduledTask:
    """Fixed-interval scheduled task."""

    name: str
    handler: Callable
    minutes: int = 60
    run_on_start: bool = True  # first run immediately instead of after one interval


class Domain(ABC):
    """Base class for all domains."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Domain identifier."""
        pass

    @property
    @abstractmethod
    def commands(self) -> list[CommandDefinition]:
        """Chat commands handled by this domain."""
        pass

    @property
    def help_sections(self) -> list[tuple[str, str]]:
        """(title, body) fields for the !help embed, in display order."""
        return []

    @property
    def schedules(self) -> list[ScheduledTask]:
        """Scheduled tasks (optional, default empty)."""
        return []

    def get_command(self, content: str) -> CommandDefinition | None:
        """Find the command invoked by a message body."""
        for command in self.commands:
            if command.matches(content):
                return command
        return None

    def register_schedules(self, scheduler: AsyncIOScheduler, bot) -> list[Job]:
        """Register all scheduled tasks with the scheduler.

        Returns the job handles so callers can pause or remove them.
        """
        jobs = []
        for task in self.schedules:
            # next_run_time=None would add the job paused, so only pass it when set
            extra = {"next_run_time": datetime.now(timezone.utc)} if task.run_on_start else {}
            jobs.append(scheduler.add_job(
                task.handler,
                'interval',
                args=[bot],
                minutes=task.minutes,
                max_instances=1,
                coalesce=True,
                id=f"{self.name}_{task.name}",
                replace_existing=True,
                **extra
            ))
        return jobs


def help_lines(commands: list[CommandDefinition]) -> str:
    """One bullet per command for a !help field."""
    return "\n".join(f"• `{c.name}` - {c.description}" for c in commands)
