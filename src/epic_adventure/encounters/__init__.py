from __future__ import annotations

from typing import Dict, Optional

from ..config import AdventureConfig
from ..core.rng import RandomSource
from ..errors import UnknownEncounterError
from ..items.model import Item
from .base import Encounter, EncounterResult, Question
from .hazards import ForestEncounter, HazardEncounter, MountainEncounter
from .potion import PotionEncounter
from .village import VillageEncounter, parse_answer

__all__ = [
    "Encounter",
    "EncounterResult",
    "ForestEncounter",
    "HazardEncounter",
    "MountainEncounter",
    "PotionEncounter",
    "Question",
    "VillageEncounter",
    "build_encounters",
    "get_encounter",
    "parse_answer",
]


def build_encounters(config: AdventureConfig, potion: Item, rng: Optional[RandomSource] = None) -> Dict[str, Encounter]:
    """Create the menu encounters keyed by their menu choice, in menu order."""
    variance = {"damage_variance": config.damage_variance, "reward_variance": config.reward_variance}
    encounters = [
        ForestEncounter(config.forest, rng, **variance),
        MountainEncounter(config.mountain, rng, **variance),
        VillageEncounter(config.village, rng, **variance),
        PotionEncounter(potion),
    ]
    return {enc.key: enc for enc in encounters}


def get_encounter(encounters: Dict[str, Encounter], key: str) -> Encounter:
    try:
        return encounters[key]
    except KeyError:
        raise UnknownEncounterError(f"Unknown encounter '{key}'") from None
