class AdventureError(Exception):
    """Base class for adventure-related errors."""


class ConfigError(AdventureError):
    """Raised when a configuration file cannot be parsed or holds invalid data."""


class GameOverError(AdventureError):
    """Raised when a turn is played after the session reached a terminal state."""


class UnknownEncounterError(AdventureError):
    """Raised when an encounter key is not found in the registry."""
