from __future__ import annotations

from typing import TYPE_CHECKING

from components.base_component import BaseComponent
from equipment_types import EquipmentSlot

if TYPE_CHECKING:
    from entity import Entity


class Equippable(BaseComponent):
    """Slot, wear state and stat bonuses of a wearable entity.

    Bonuses may be negative for cursed gear.
    """

    parent: Entity

    def __init__(
        self,
        slot: EquipmentSlot,
        power_bonus: int = 0,
        defense_bonus: int = 0,
        max_hp_bonus: int = 0,
        equipped: bool = False,
    ):
        self._slot = slot
        self.equipped = equipped
        self.power_bonus = power_bonus
        self.defense_bonus = defense_bonus
        self.max_hp_bonus = max_hp_bonus

    @property
    def slot(self) -> EquipmentSlot:
        return self._slot
