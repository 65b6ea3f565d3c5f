from .model import HEALTH_POTION_NAME, Item, health_potion

__all__ = ["HEALTH_POTION_NAME", "Item", "health_potion"]
