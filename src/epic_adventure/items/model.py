from __future__ import annotations

from dataclasses import dataclass

HEALTH_POTION_NAME = "Health Potion"


@dataclass(frozen=True)
class Item:
    """Immutable item definition: a display name and the magnitude of its effect."""

    name: str
    value: int

    def ensure_valid(self) -> None:
        if not self.name:
            raise ValueError("Item name must not be empty")
        if self.value < 0:
            raise ValueError(f"Item {self.name} has negative value {self.value}")


def health_potion(value: int = 50) -> Item:
    itm = Item(name=HEALTH_POTION_NAME, value=value)
    itm.ensure_valid()
    return itm
