from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.rng import RandomSource
from ..player.model import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    """A yes/no decision an encounter needs before it can be resolved.

    ``lines`` are narrated before the prompt is shown.
    """

    lines: Tuple[str, ...]
    prompt: str


@dataclass(frozen=True)
class EncounterResult:
    """Narrative lines produced by an encounter plus the net stat changes."""

    key: str
    lines: Tuple[str, ...]
    health_delta: int
    gold_delta: int


class Encounter:
    """Base class for menu-driven story events.

    Subclasses implement ``_play`` and mutate the player only through its
    methods; ``resolve`` records the narration and the resulting deltas.
    """

    key: str = ""
    label: str = ""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng = rng

    def question(self) -> Optional[Question]:
        return None

    def resolve(self, player: Player, accepted: Optional[bool] = None) -> EncounterResult:
        old_health, old_gold = player.health, player.gold
        lines: List[str] = []
        self._play(player, lines, accepted)
        result = EncounterResult(
            key=self.key,
            lines=tuple(lines),
            health_delta=player.health - old_health,
            gold_delta=player.gold - old_gold,
        )
        logger.info(
            "Encounter %s resolved for %s: health %+d, gold %+d",
            type(self).__name__,
            player.name,
            result.health_delta,
            result.gold_delta,
        )
        return result

    def _play(self, player: Player, lines: List[str], accepted: Optional[bool]) -> None:
        raise NotImplementedError

    def _roll(self, base: int, variance: int) -> int:
        if self.rng is None:
            return base
        return self.rng.vary(base, variance)

    @staticmethod
    def _damage(player: Player, lines: List[str], amount: int, reason: str) -> None:
        player.take_damage(amount, reason=reason)
        lines.append(f"{player.name} takes {amount} damage. Health: {player.health}")

    @staticmethod
    def _reward(player: Player, lines: List[str], amount: int, reason: str) -> None:
        player.collect_gold(amount, reason=reason)
        lines.append(f"{player.name} collects {amount} gold. Total gold: {player.gold}")
