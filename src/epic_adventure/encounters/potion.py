from __future__ import annotations

from typing import List, Optional

from ..items.model import Item
from ..player.model import Player
from .base import Encounter


class PotionEncounter(Encounter):
    key = "4"
    label = "Drink a mystery potion."

    def __init__(self, potion: Item) -> None:
        super().__init__(rng=None)
        self.potion = potion

    def _play(self, player: Player, lines: List[str], accepted: Optional[bool]) -> None:
        if player.at_full_health:
            lines.append("You are already at full health.")
            return
        player.heal(self.potion.value, reason="potion")
        lines.append(f"{player.name} drinks a potion. Health restored to {player.health}.")
