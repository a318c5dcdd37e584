"""Domain modules for Alfred."""

from .base import Domain, CommandDefinition, ScheduledTask

__all__ = ["Domain", "CommandDefinition", "ScheduledTask"]
