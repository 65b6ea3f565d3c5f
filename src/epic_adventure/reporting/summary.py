from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..player.model import Player

logger = logging.getLogger(__name__)


def format_summary(player: Player) -> str:
    return f"{player.name} ended the game with {player.gold} gold and {player.health} health."


class ResultReporter:
    """Writes the end-of-game summary to a text file, replacing earlier content.

    Write failures never propagate: they are logged, kept on ``last_error`` and
    reported through the boolean return of ``persist``.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.last_error: Optional[OSError] = None

    def persist(self, summary: str) -> bool:
        self.last_error = None
        try:
            self.path.write_text(summary, encoding="utf-8")
        except OSError as exc:
            self.last_error = exc
            logger.warning("Failed to write game result to %s: %s", self.path, exc)
            return False
        logger.info("Game result saved to %s", self.path)
        return True
