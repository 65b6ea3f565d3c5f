from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ..config import AdventureConfig
from ..core.events import EventBus
from ..core.rng import RandomSource
from ..encounters import Encounter, Question, build_encounters, parse_answer
from ..errors import GameOverError
from ..items.model import Item, health_potion
from ..player.model import Player
from ..reporting.summary import format_summary
from .state import GameStatus, TurnKind, TurnResult

logger = logging.getLogger(__name__)

QUIT_KEY = "5"
QUIT_LABEL = "Quit the adventure."
MENU_HEADER = "You are lost and need to find a refuge before the sun comes down. Where will you go?"
MENU_PROMPT = "Your choice (1-5): "

EMPTY_INPUT_MESSAGE = "No input detected. Please try again."
INVALID_INPUT_MESSAGE = "Invalid choice. Please try again."
QUIT_MESSAGE = "You have been arrested by local soldiers. Game over!"
DEATH_MESSAGE = "You receive critical damage. You collapse and fade into darkness. Game Over!"


class Game:
    """Menu-driven adventure session.

    The game is a small state machine over GameStatus. Each call to
    ``play_turn`` consumes one menu decision, runs the matching encounter and
    returns the narration instead of printing it, so the same engine can be
    driven by the console adapter or by tests.
    """

    def __init__(
        self,
        player_name: Optional[str] = None,
        config: Optional[AdventureConfig] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or AdventureConfig()
        name = (player_name or "").strip() or self.config.default_name
        self.event_bus = event_bus or EventBus()
        self.player = Player(name, max_health=self.config.max_health, event_bus=self.event_bus)
        self.potion: Item = health_potion(self.config.potion_value)
        if rng is None and self.config.randomized:
            rng = RandomSource(self.config.seed)
        self.encounters: Dict[str, Encounter] = build_encounters(self.config, self.potion, rng)
        self._status = GameStatus.PLAYING
        self._history: List[TurnResult] = []
        logger.info("Started adventure for %s", self.player.name)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.terminal

    @property
    def history(self) -> Tuple[TurnResult, ...]:
        return tuple(self._history)

    @property
    def turns(self) -> int:
        return len(self._history)

    def menu(self) -> List[str]:
        lines = [MENU_HEADER]
        for key, enc in self.encounters.items():
            lines.append(f"{key}. {enc.label}")
        lines.append(f"{QUIT_KEY}. {QUIT_LABEL}")
        return lines

    def question_for(self, choice: Optional[str]) -> Optional[Question]:
        """Return the question the chosen encounter asks before resolving, if any."""
        enc = self.encounters.get((choice or "").strip())
        if enc is None:
            return None
        return enc.question()

    def play_turn(self, choice: Optional[str], answer: Optional[str] = None) -> TurnResult:
        """Consume one menu decision.

        Args:
            choice: Raw menu input; surrounding whitespace is ignored.
            answer: Raw reply to the encounter's question (village only).

        Raises:
            GameOverError: if the session already reached DEAD or QUIT.
        """
        if self.is_over:
            raise GameOverError(f"Adventure is over ({self._status.value}); no more turns")

        key = (choice or "").strip()
        if not key:
            return self._record(key, TurnKind.EMPTY, (EMPTY_INPUT_MESSAGE,))
        if key == QUIT_KEY:
            self._status = GameStatus.QUIT
            logger.info("%s quit after %d turns", self.player.name, self.turns)
            return self._record(key, TurnKind.QUIT, (QUIT_MESSAGE,))

        enc = self.encounters.get(key)
        if enc is None:
            logger.debug("Invalid menu choice %r", key)
            return self._record(key, TurnKind.INVALID, (INVALID_INPUT_MESSAGE,))

        accepted = parse_answer(answer) if enc.question() is not None else None
        outcome = enc.resolve(self.player, accepted)
        if not self.player.alive:
            self._status = GameStatus.DEAD
            logger.info("%s died in encounter %s", self.player.name, key)
        return self._record(key, TurnKind.ENCOUNTER, outcome.lines, outcome)

    def farewell(self) -> str:
        """Closing line picked from the terminal state."""
        if self._status is GameStatus.DEAD:
            return DEATH_MESSAGE
        return f"Your adventure ends here, {self.player.name}! Game Over!"

    def summary(self) -> str:
        return format_summary(self.player)

    def _record(self, key: str, kind: TurnKind, lines: Tuple[str, ...], encounter=None) -> TurnResult:
        result = TurnResult(
            turn_index=len(self._history) + 1,
            choice=key,
            kind=kind,
            lines=tuple(lines),
            status=self._status,
            encounter=encounter,
        )
        self._history.append(result)
        return result
