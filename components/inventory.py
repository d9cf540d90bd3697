from __future__ import annotations

from typing import Iterator, List, TYPE_CHECKING

from components.base_component import BaseComponent
from components.equipment import dequip, equip, find_equipped_in_slot
from exceptions import Impossible

if TYPE_CHECKING:
    from entity import Entity
    from message_log import MessageLog


class Inventory(BaseComponent):
    """Items carried by one holder, in pickup order."""

    parent: Entity

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.items: List[Entity] = []

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    @property
    def equipped_items(self) -> Iterator[Entity]:
        yield from (
            item
            for item in self.items
            if item.equippable is not None and item.equippable.equipped
        )

    @property
    def power_bonus(self) -> int:
        return sum(item.equippable.power_bonus for item in self.equipped_items)

    @property
    def defense_bonus(self) -> int:
        return sum(item.equippable.defense_bonus for item in self.equipped_items)

    @property
    def max_hp_bonus(self) -> int:
        return sum(item.equippable.max_hp_bonus for item in self.equipped_items)

    def add(self, item: Entity, message_log: MessageLog) -> None:
        """Put `item` in this inventory, wearing it if its slot is free."""
        if self.is_full:
            raise Impossible("Your inventory is full.")

        slot = item.equippable.slot if item.equippable else None
        occupant = find_equipped_in_slot(slot, self) if slot is not None else None

        self.items.append(item)
        item.parent = self

        if slot is None:
            return
        if occupant is None:
            equip(item, message_log)
        else:
            # Arrived marked as worn but the slot is taken.
            item.equippable.equipped = False

    def drop(self, item: Entity, message_log: MessageLog) -> None:
        """
        Removes an item from the inventory and restores it to the game map, at the holder's current location.
        """
        if item not in self.items:
            raise Impossible(f"You are not carrying the {item.name}.")

        if item.equippable is not None:
            dequip(item, message_log)

        self.items.remove(item)
        item.place(self.parent.x, self.parent.y, self.gamemap)

        message_log.add_message(f"You dropped the {item.name}.")
