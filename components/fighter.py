from __future__ import annotations

from enum import auto, Enum
from typing import TYPE_CHECKING

import color
from components.base_component import BaseComponent
from render_order import RenderOrder

if TYPE_CHECKING:
    from entity import Entity


class DeathBehavior(Enum):
    PLAYER = auto()
    MONSTER = auto()


class Fighter(BaseComponent):
    """Base combat stats. Effective stats live on the entity, see `Entity.power`."""

    parent: Entity

    def __init__(
        self,
        hp: int,
        base_defense: int,
        base_power: int,
        xp: int = 0,
        on_death: DeathBehavior = DeathBehavior.MONSTER,
    ):
        self.base_max_hp = hp
        self._hp = hp
        self.base_defense = base_defense
        self.base_power = base_power
        self.xp = xp
        self.on_death = on_death

    @property
    def hp(self) -> int:
        return self._hp

    @hp.setter
    def hp(self, value: int) -> None:
        self._hp = max(0, min(value, self.parent.max_hp))

    def heal(self, amount: int) -> int:
        """Restore up to `amount` HP without passing the equipped max HP.

        Returns the amount actually recovered.
        """
        max_hp = self.parent.max_hp
        if amount <= 0:
            return 0
        if self.hp >= max_hp:
            # Gear that raised max HP may have come off since hp was set.
            self.hp = max_hp
            return 0

        new_hp_value = min(self.hp + amount, max_hp)
        amount_recovered = new_hp_value - self.hp
        self.hp = new_hp_value

        return amount_recovered

    def take_damage(self, amount: int) -> None:
        if amount <= 0 or self.hp == 0:
            return
        self.hp -= amount
        if self.hp == 0:
            self.die()

    def die(self) -> None:
        self.parent.char = "%"
        self.parent.color = (191, 0, 0)

        if self.on_death is DeathBehavior.PLAYER:
            death_message = "You died!"
            death_message_color = color.player_die
        else:
            death_message = (
                f"{self.parent.name} is dead! You gain {self.xp} experience points."
            )
            death_message_color = color.enemy_die
            self.parent.blocks_movement = False
            self.parent.name = f"remains of {self.parent.name}"
            self.parent.render_order = RenderOrder.CORPSE

        self.engine.message_log.add_message(death_message, death_message_color)
