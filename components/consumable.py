from __future__ import annotations

from enum import auto, Enum
from typing import TYPE_CHECKING

import color
from components.base_component import BaseComponent
from exceptions import Impossible

if TYPE_CHECKING:
    from actions import ItemAction
    from entity import Entity


class UseResult(Enum):
    """What happened to an item after the player used it."""

    USED_UP = auto()  # Removed from the inventory.
    KEPT = auto()  # Acted upon, stays in the inventory.
    CANCELLED = auto()  # Nothing happened; no turn is spent.


class Consumable(BaseComponent):
    """Marks an entity as an item the player can use from the inventory."""

    parent: Entity

    def activate(self, action: ItemAction) -> UseResult:
        """Invoke this item's ability.

        `action` is the context for this activation.
        """
        raise NotImplementedError()


class HealingConsumable(Consumable):
    def __init__(self, amount: int):
        self.amount = amount

    def activate(self, action: ItemAction) -> UseResult:
        consumer = action.entity
        if consumer.fighter is None:
            return UseResult.CANCELLED

        amount_recovered = consumer.fighter.heal(self.amount)
        if amount_recovered <= 0:
            raise Impossible("Your health is already full.")

        action.engine.message_log.add_message(
            f"You consume the {self.parent.name}, and recover {amount_recovered} HP!",
            color.health_recovered,
        )
        return UseResult.USED_UP
