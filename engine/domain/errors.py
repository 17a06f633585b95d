"""
Error types raised while starting a game.

Gameplay itself does not raise: running into a wall or into the body is a
normal end of the game.
"""


class GameError(Exception):
    """Base class for snake game errors."""


class StartupError(GameError):
    """The game could not be constructed."""


class ConfigError(StartupError):
    """A configuration value is out of range."""


class ResourceNotFoundError(StartupError):
    """A required resource (e.g. the font file) could not be loaded."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
