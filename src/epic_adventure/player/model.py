from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.events import EventBus, GoldChangedEvent, HealthChangedEvent

logger = logging.getLogger(__name__)

DEFAULT_MAX_HEALTH = 100


@dataclass
class Player:
    """The adventurer: a name plus mutable health and gold.

    Health stays within [0, max_health] and gold never drops below zero. All
    changes go through the methods below, which emit HealthChangedEvent and
    GoldChangedEvent on the optional event bus.
    """

    name: str
    max_health: int = DEFAULT_MAX_HEALTH
    event_bus: Optional[EventBus] = field(default=None, repr=False, compare=False)
    _health: int = field(init=False, default=0)
    _gold: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            raise ValueError("max_health must be positive")
        self._health = self.max_health
        self._gold = 0
        logger.info("Created player %r (health=%s, gold=%s)", self.name, self._health, self._gold)

    @property
    def health(self) -> int:
        return self._health

    @property
    def gold(self) -> int:
        return self._gold

    @property
    def alive(self) -> bool:
        return self._health > 0

    @property
    def at_full_health(self) -> bool:
        return self._health >= self.max_health

    def take_damage(self, amount: int, reason: str = "damage") -> int:
        """Reduce health by ``amount``, clamped at zero. Returns health actually lost."""
        amount = max(0, int(amount))
        old = self._health
        self._health = max(0, old - amount)
        lost = old - self._health
        logger.debug("%s took %s damage (reason=%s); old=%s new=%s", self.name, amount, reason, old, self._health)
        self._emit_health(old, reason)
        return lost

    def heal(self, amount: int, reason: str = "heal") -> int:
        """Restore health by ``amount``, clamped at max_health. Returns health actually restored."""
        amount = max(0, int(amount))
        old = self._health
        self._health = min(self.max_health, old + amount)
        restored = self._health - old
        logger.debug("%s healed %s (reason=%s); old=%s new=%s", self.name, restored, reason, old, self._health)
        self._emit_health(old, reason)
        return restored

    def collect_gold(self, amount: int, reason: str = "collect") -> int:
        if amount < 0:
            raise ValueError("Cannot collect negative gold; use spend_gold() for deduction")
        old = self._gold
        self._gold = old + amount
        logger.debug("%s collected %s gold (reason=%s); old=%s new=%s", self.name, amount, reason, old, self._gold)
        self._emit_gold(old, reason)
        return amount

    def can_afford(self, cost: int) -> bool:
        if cost < 0:
            return False
        return self._gold >= cost

    def spend_gold(self, amount: int, reason: str = "purchase") -> bool:
        """Debit ``amount`` gold if affordable.

        Returns False and leaves gold untouched when funds are insufficient.
        """
        if amount < 0:
            raise ValueError("Cannot spend negative gold")
        if not self.can_afford(amount):
            logger.info("%s cannot afford %s gold (have %s)", self.name, amount, self._gold)
            return False
        old = self._gold
        self._gold = old - amount
        logger.debug("%s spent %s gold (reason=%s); old=%s new=%s", self.name, amount, reason, old, self._gold)
        self._emit_gold(old, reason)
        return True

    def _emit_health(self, old: int, reason: str) -> None:
        if self.event_bus is None or old == self._health:
            return
        self.event_bus.emit(
            HealthChangedEvent(
                player=self.name,
                old_health=old,
                new_health=self._health,
                delta=self._health - old,
                reason=reason,
            )
        )

    def _emit_gold(self, old: int, reason: str) -> None:
        if self.event_bus is None or old == self._gold:
            return
        self.event_bus.emit(
            GoldChangedEvent(
                player=self.name,
                old_amount=old,
                new_amount=self._gold,
                delta=self._gold - old,
                reason=reason,
            )
        )
