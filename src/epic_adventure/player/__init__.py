from .model import DEFAULT_MAX_HEALTH, Player

__all__ = ["DEFAULT_MAX_HEALTH", "Player"]
