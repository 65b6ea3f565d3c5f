from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import EncounterTuning
from ..core.rng import RandomSource
from ..player.model import Player
from .base import Encounter


class HazardEncounter(Encounter):
    """A walk into danger: one hit of damage, then gold if the player survives."""

    intro: Tuple[str, ...] = ()
    hazard_reason: str = "hazard"
    reward_lines: Tuple[str, ...] = ()
    reward_reason: str = "reward"

    def __init__(
        self,
        tuning: EncounterTuning,
        rng: Optional[RandomSource] = None,
        damage_variance: int = 0,
        reward_variance: int = 0,
    ) -> None:
        super().__init__(rng)
        self.tuning = tuning
        self.damage_variance = damage_variance
        self.reward_variance = reward_variance

    def _play(self, player: Player, lines: List[str], accepted: Optional[bool]) -> None:
        lines.extend(self.intro)
        self._damage(player, lines, self._roll(self.tuning.damage, self.damage_variance), self.hazard_reason)
        if not player.alive:
            return
        lines.extend(self.reward_lines)
        self._reward(player, lines, self._roll(self.tuning.gold, self.reward_variance), self.reward_reason)


class ForestEncounter(HazardEncounter):
    key = "1"
    label = "Enter into the dark forest."
    intro = (
        "You step into the dark forest, you feel someone or something is watching you.",
        "Suddenly, a pack of wolves emerges from the bushes and attack you!",
    )
    hazard_reason = "wolves"
    reward_lines = (
        "You drive off the wolves and discover an abandoned temple.",
        "Inside, you find gold scattered on the floor and a sword.",
    )
    reward_reason = "temple"


class MountainEncounter(HazardEncounter):
    key = "2"
    label = "Climb the misty mountains."
    intro = (
        "You begin climbing the misty mountain trails to find a cave and spend the night there.",
        "Suddenly, an avalanche roars down the slopes!",
    )
    hazard_reason = "avalanche"
    reward_lines = (
        "You survive and stumble into a hidden cave full of gems. You find an armor and a shield.",
    )
    reward_reason = "cave"
