from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError
from .platform.paths import default_config_path

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Steve"
DEFAULT_RESULTS_FILE = "game_results.txt"
CONFIG_ENV_VAR = "EPIC_ADVENTURE_CONFIG"


@dataclass
class EncounterTuning:
    """Damage dealt by a hazard and gold awarded to a survivor."""

    damage: int
    gold: int


@dataclass
class VillageTuning:
    map_price: int = 20
    treasure_gold: int = 100
    thief_damage: int = 10


@dataclass
class AdventureConfig:
    """Central game configuration.

    Defaults reproduce the classic fixed-outcome adventure. Setting
    damage_variance or reward_variance above zero lets encounters roll around
    their base values using a RandomSource seeded from ``seed``.
    """

    default_name: str = DEFAULT_PLAYER_NAME
    max_health: int = 100
    potion_value: int = 50
    forest: EncounterTuning = field(default_factory=lambda: EncounterTuning(damage=25, gold=40))
    mountain: EncounterTuning = field(default_factory=lambda: EncounterTuning(damage=35, gold=60))
    village: VillageTuning = field(default_factory=VillageTuning)
    damage_variance: int = 0
    reward_variance: int = 0
    seed: Optional[int] = None
    results_file: str = DEFAULT_RESULTS_FILE

    def validate(self) -> "AdventureConfig":
        """Normalize values in place; negative constants are clamped to zero."""
        if int(self.max_health) <= 0:
            raise ConfigError(f"max_health must be positive, got {self.max_health}")
        self.max_health = int(self.max_health)
        self.potion_value = _non_negative("potion_value", self.potion_value)
        for label, tuning in (("forest", self.forest), ("mountain", self.mountain)):
            tuning.damage = _non_negative(f"{label}.damage", tuning.damage)
            tuning.gold = _non_negative(f"{label}.gold", tuning.gold)
        self.village.map_price = _non_negative("village.map_price", self.village.map_price)
        self.village.treasure_gold = _non_negative("village.treasure_gold", self.village.treasure_gold)
        self.village.thief_damage = _non_negative("village.thief_damage", self.village.thief_damage)
        self.damage_variance = _non_negative("damage_variance", self.damage_variance)
        self.reward_variance = _non_negative("reward_variance", self.reward_variance)
        if not str(self.default_name).strip():
            logger.warning("Empty default_name; using %r", DEFAULT_PLAYER_NAME)
            self.default_name = DEFAULT_PLAYER_NAME
        if not str(self.results_file).strip():
            logger.warning("Empty results_file; using %r", DEFAULT_RESULTS_FILE)
            self.results_file = DEFAULT_RESULTS_FILE
        return self

    @property
    def randomized(self) -> bool:
        return self.damage_variance > 0 or self.reward_variance > 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "player": {"default_name": self.default_name, "max_health": self.max_health},
            "potion_value": self.potion_value,
            "encounters": {
                "forest": {"damage": self.forest.damage, "gold": self.forest.gold},
                "mountain": {"damage": self.mountain.damage, "gold": self.mountain.gold},
                "village": {
                    "map_price": self.village.map_price,
                    "treasure_gold": self.village.treasure_gold,
                    "thief_damage": self.village.thief_damage,
                },
            },
            "randomness": {
                "seed": self.seed,
                "damage_variance": self.damage_variance,
                "reward_variance": self.reward_variance,
            },
            "results_file": self.results_file,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AdventureConfig":
        """Build a config from a parsed mapping. Missing fields fall back to defaults."""
        cfg = cls()
        try:
            player = _section(raw, "player")
            cfg.default_name = str(player.get("default_name", cfg.default_name))
            cfg.max_health = int(player.get("max_health", cfg.max_health))
            cfg.potion_value = int(raw.get("potion_value", cfg.potion_value))

            encounters = _section(raw, "encounters")
            for label in ("forest", "mountain"):
                section = _section(encounters, label)
                tuning: EncounterTuning = getattr(cfg, label)
                tuning.damage = int(section.get("damage", tuning.damage))
                tuning.gold = int(section.get("gold", tuning.gold))
            village = _section(encounters, "village")
            cfg.village.map_price = int(village.get("map_price", cfg.village.map_price))
            cfg.village.treasure_gold = int(village.get("treasure_gold", cfg.village.treasure_gold))
            cfg.village.thief_damage = int(village.get("thief_damage", cfg.village.thief_damage))

            randomness = _section(raw, "randomness")
            seed = randomness.get("seed", cfg.seed)
            cfg.seed = None if seed is None else int(seed)
            cfg.damage_variance = int(randomness.get("damage_variance", cfg.damage_variance))
            cfg.reward_variance = int(randomness.get("reward_variance", cfg.reward_variance))

            cfg.results_file = str(raw.get("results_file", cfg.results_file))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid configuration value: {exc}") from exc
        return cfg.validate()

    def apply_env(self, env: Optional[Mapping[str, str]] = None) -> "AdventureConfig":
        """Apply EPIC_ADVENTURE_* environment overrides in place."""
        env = os.environ if env is None else env
        results = env.get("EPIC_ADVENTURE_RESULTS_FILE")
        if results:
            self.results_file = results
        name = env.get("EPIC_ADVENTURE_DEFAULT_NAME")
        if name and name.strip():
            self.default_name = name.strip()
        seed = env.get("EPIC_ADVENTURE_SEED")
        if seed:
            try:
                self.seed = int(seed)
            except ValueError:
                logger.warning("Ignoring non-integer EPIC_ADVENTURE_SEED=%r", seed)
        return self


def _non_negative(label: str, value: Any) -> int:
    value = int(value)
    if value < 0:
        logger.warning("Negative %s (%s) clamped to 0", label, value)
        return 0
    return value


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"Section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def _resolve_path(path: Optional[Path | str], env: Mapping[str, str]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    from_env = env.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    candidate = default_config_path()
    if candidate.exists():
        return candidate
    return None


def load_config(path: Optional[Path | str] = None, env: Optional[Mapping[str, str]] = None) -> AdventureConfig:
    """Load the adventure configuration from YAML plus environment overrides.

    Lookup order: explicit ``path``, then $EPIC_ADVENTURE_CONFIG, then
    adventure.yaml in the user config dir. A missing file falls back to defaults;
    unreadable YAML raises ConfigError.
    """
    env = os.environ if env is None else env
    resolved = _resolve_path(path, env)
    if resolved is None:
        logger.debug("No adventure config file found; using defaults")
        return AdventureConfig().apply_env(env).validate()
    if not resolved.exists():
        logger.warning("Adventure config not found at %s; using defaults", resolved)
        return AdventureConfig().apply_env(env).validate()

    try:
        with resolved.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in {resolved}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config {resolved}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {resolved} must be a mapping")
    cfg = AdventureConfig.from_dict(raw)
    logger.info("Loaded adventure config from %s", resolved)
    return cfg.apply_env(env).validate()


def save_config(config: AdventureConfig, path: Path | str) -> None:
    """Persist configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(config.as_dict(), f, sort_keys=False)
    logger.debug("Saved adventure config to %s", path)
