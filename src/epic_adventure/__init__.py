"""
Epic Text Adventure package root.

The narrative engine (player, encounters, controller, reporter) is kept free of
console I/O; ``epic_adventure.app`` is the thin adapter that talks to a terminal.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "app",
    "engine",
]
