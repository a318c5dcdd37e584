"""Error types shared across domains."""


class AlfredError(Exception):
    """Base class for errors surfaced by Alfred's domains."""


class StoreIOError(AlfredError):
    """Raised when a persisted store cannot be read or written."""

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Store '{path}' unavailable: {reason}")


class TransportError(AlfredError):
    """Raised when the Steam news API cannot be reached or returns garbage."""


class DuplicateGameError(AlfredError):
    """Raised when a game with the same app id is already tracked."""

    def __init__(self, app_id: str, existing_name: str):
        self.app_id = app_id
        super().__init__(f'Game with app ID {app_id} already exists as "{existing_name}"')


class GameNotFoundError(AlfredError):
    """Raised when no tracked game has the given app id."""

    def __init__(self, app_id: str):
        self.app_id = app_id
        super().__init__(f"No game found with app ID {app_id}")
