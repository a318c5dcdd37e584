"""General domain - help, teams and fun commands."""

from .domain import GeneralDomain

__all__ = ["GeneralDomain"]
