from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..encounters.base import EncounterResult


class GameStatus(Enum):
    """Session state. PLAYING is the only non-terminal state."""

    PLAYING = "playing"
    DEAD = "dead"
    QUIT = "quit"

    @property
    def terminal(self) -> bool:
        return self is not GameStatus.PLAYING


class TurnKind(Enum):
    ENCOUNTER = "encounter"
    QUIT = "quit"
    EMPTY = "empty"      # no input; re-prompt
    INVALID = "invalid"  # unrecognised choice; re-prompt


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a single menu decision.

    Attributes:
        turn_index: 1-based position of this decision in the session.
        choice: The trimmed menu input that was submitted.
        kind: How the input was interpreted.
        lines: Narrative lines to show the player, in order.
        status: Session state after the turn.
        encounter: The encounter outcome, for ENCOUNTER turns only.
    """

    turn_index: int
    choice: str
    kind: TurnKind
    lines: Tuple[str, ...]
    status: GameStatus
    encounter: Optional[EncounterResult] = None

    @property
    def mutated(self) -> bool:
        if self.encounter is None:
            return False
        return self.encounter.health_delta != 0 or self.encounter.gold_delta != 0
