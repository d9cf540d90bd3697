"""Equip, dequip and toggle-equip for items held in an inventory.

Only the `equipped` flag on each item's `Equippable` records what is worn.
`equip` and `dequip` work on a single item and only take the message log;
keeping one item per slot is done by `toggle_equip` and `Inventory.add`,
which can see the whole inventory.
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import color
from components.consumable import Consumable, UseResult

if TYPE_CHECKING:
    from actions import ItemAction
    from components.inventory import Inventory
    from entity import Entity
    from equipment_types import EquipmentSlot
    from message_log import MessageLog


def equip(item: Entity, message_log: MessageLog) -> None:
    if item.consumable is None:
        message_log.add_message(
            f"Can't equip the {item.name} because it's not an item.", color.error
        )
        return
    if item.equippable is None:
        message_log.add_message(
            f"Can't equip the {item.name} because it's not equipment.", color.error
        )
        return

    equippable = item.equippable
    if equippable.equipped:
        return
    equippable.equipped = True
    message_log.add_message(
        f"Equipped {item.name} on {equippable.slot.display_name}.", color.equip
    )


def dequip(item: Entity, message_log: MessageLog) -> None:
    if item.consumable is None:
        message_log.add_message(
            f"Can't dequip the {item.name} because it's not an item.", color.error
        )
        return
    if item.equippable is None:
        message_log.add_message(
            f"Can't dequip the {item.name} because it's not equipment.", color.error
        )
        return

    equippable = item.equippable
    if not equippable.equipped:
        return
    equippable.equipped = False
    message_log.add_message(
        f"Dequipped {item.name} from {equippable.slot.display_name}.", color.dequip
    )


def find_equipped_in_slot(slot: EquipmentSlot, inventory: Inventory) -> Optional[int]:
    """Return the inventory index of the item worn in `slot`, if any."""
    for index, item in enumerate(inventory.items):
        equippable = item.equippable
        if equippable is not None and equippable.equipped and equippable.slot == slot:
            return index
    return None


def toggle_equip(inventory: Inventory, index: int, message_log: MessageLog) -> UseResult:
    """Equip or dequip the item at `index`, freeing its slot first if needed."""
    item = inventory.items[index]
    if item.equippable is None:
        return UseResult.CANCELLED

    if item.equippable.equipped:
        dequip(item, message_log)
    else:
        occupant = find_equipped_in_slot(item.equippable.slot, inventory)
        if occupant is not None and occupant != index:
            dequip(inventory.items[occupant], message_log)
        equip(item, message_log)
    return UseResult.KEPT


class EquipmentConsumable(Consumable):
    """Marks wearable gear as usable; using it toggles whether it's worn."""

    def activate(self, action: ItemAction) -> UseResult:
        inventory = action.entity.inventory
        if inventory is None or self.parent not in inventory.items:
            return UseResult.CANCELLED
        index = inventory.items.index(self.parent)
        return toggle_equip(inventory, index, action.engine.message_log)
