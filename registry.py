"""Domain registry for command routing."""

from domains.base import Domain, CommandDefinition


class DomainRegistry:
    """Central registry for all domains."""

    def __init__(self):
        self._by_name: dict[str, Domain] = {}  # name → domain

    def register(self, domain: Domain) -> None:
        """Register a domain."""
        self._by_name[domain.name] = domain

    def find_command(self, content: str) -> CommandDefinition | None:
        """Find the command a message invokes, first registered domain wins."""
        for domain in self._by_name.values():
            command = domain.get_command(content)
            if command:
                return command
        return None

    def all_domains(self) -> list[Domain]:
        """Get all registered domains."""
        return list(self._by_name.values())


# Global registry instance
registry = DomainRegistry()
