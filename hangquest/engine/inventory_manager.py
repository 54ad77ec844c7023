"""Inventory management system."""

import logging
from typing import Optional

from hangquest.config import DEFAULT_INVENTORY_CAPACITY
from hangquest.models.items import Effect, Inventory, Item, ItemKind

logger = logging.getLogger(__name__.split(".")[-1])


class InventoryManager:
    """Handles the player's capacity-bounded item collection."""

    def __init__(self, inventory: Optional[Inventory] = None, capacity: int = DEFAULT_INVENTORY_CAPACITY) -> None:
        """
        Initialize inventory manager.

        Args:
            inventory: Optional saved inventory (keeps its own capacity)
            capacity: Capacity of a new, empty inventory
        """
        self._inventory = inventory or Inventory(capacity=capacity)

    @property
    def inventory(self) -> Inventory:
        """Get current inventory."""
        return self._inventory

    @property
    def items(self) -> list[Item]:
        return list(self._inventory.items)

    @property
    def is_full(self) -> bool:
        return len(self._inventory.items) >= self._inventory.capacity

    def find(self, item_id: str) -> Optional[Item]:
        """First item with the given id."""
        return next((item for item in self._inventory.items if item.item_id == item_id), None)

    def add_item(self, item: Item) -> bool:
        """
        Append an item.

        Returns:
            False without changing anything when the inventory is full
        """
        if self.is_full:
            logger.debug(f"Inventory full, cannot add {item.item_id}")
            return False

        self._inventory = self._inventory.model_copy(update={"items": self._inventory.items + [item]})
        return True

    def use_item(self, item_id: str) -> tuple[list[Effect], bool]:
        """
        Use the first unused item with the given id.

        Consumables are flagged as used and stay in the inventory. Equipment
        keeps its flag and can be used again.

        Returns:
            Tuple of (effects, found)
        """
        for index, item in enumerate(self._inventory.items):
            if item.item_id != item_id or item.used:
                continue

            if item.kind == ItemKind.CONSUMABLE:
                new_items = list(self._inventory.items)
                new_items[index] = item.model_copy(update={"used": True})
                self._inventory = self._inventory.model_copy(update={"items": new_items})

            logger.debug(f"Used item {item_id}")
            return list(item.effects), True

        return [], False
