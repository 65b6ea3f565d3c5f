from __future__ import annotations

from typing import List, Optional

from ..config import VillageTuning
from ..core.rng import RandomSource
from ..player.model import Player
from .base import Encounter, Question

ACCEPT_WORD = "yes"


def parse_answer(raw: Optional[str]) -> bool:
    """Interpret a merchant reply. Only "yes" (any case, surrounding spaces ignored) accepts."""
    if raw is None:
        return False
    return raw.strip().lower() == ACCEPT_WORD


class VillageEncounter(Encounter):
    """The marketplace: buy the treasure map, or ignore the merchant and meet a thief."""

    key = "3"
    label = "Visit the nearby village."

    def __init__(
        self,
        tuning: VillageTuning,
        rng: Optional[RandomSource] = None,
        damage_variance: int = 0,
        reward_variance: int = 0,
    ) -> None:
        super().__init__(rng)
        self.tuning = tuning
        self.damage_variance = damage_variance
        self.reward_variance = reward_variance

    def question(self) -> Question:
        return Question(
            lines=(
                "You enter the village marketplace and talk with people about a place where you can rest.",
                f"A merchant offers you a deal: pay {self.tuning.map_price} gold for a map to hidden treasure.",
            ),
            prompt="Do you accept? (yes/no): ",
        )

    def _play(self, player: Player, lines: List[str], accepted: Optional[bool]) -> None:
        if accepted:
            if player.spend_gold(self.tuning.map_price, reason="treasure map"):
                treasure = self._roll(self.tuning.treasure_gold, self.reward_variance)
                lines.append(f"You buy the map and discover a chest containing {treasure} gold and a sword!")
                self._reward(player, lines, treasure, "treasure")
            else:
                lines.append("You do not have enough gold. The merchant laughs and walks away.")
            return

        lines.append("You ignore the merchant, but a thief tries to pick your pocket!")
        self._damage(player, lines, self._roll(self.tuning.thief_damage, self.damage_variance), "thief")
