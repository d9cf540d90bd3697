from __future__ import annotations

import copy
from typing import Optional, Tuple, TypeVar, TYPE_CHECKING, Union

from render_order import RenderOrder

if TYPE_CHECKING:
    from components.consumable import Consumable
    from components.equippable import Equippable
    from components.fighter import Fighter
    from components.inventory import Inventory
    from game_map import GameMap

T = TypeVar("T", bound="Entity")


class Entity:
    """
    A generic object to represent players, enemies, items, etc.

    What an entity can do is decided by which optional components it carries:
    `consumable` marks it as a usable item, `equippable` as something that can
    be worn, `fighter` gives it combat stats and `inventory` lets it carry
    items.
    """

    parent: Union[GameMap, Inventory]

    def __init__(
        self,
        parent: Optional[GameMap] = None,
        x: int = 0,
        y: int = 0,
        char: str = "?",
        color: Tuple[int, int, int] = (255, 255, 255),
        name: str = "<Unnamed>",
        blocks_movement: bool = False,
        render_order: RenderOrder = RenderOrder.CORPSE,
        consumable: Optional[Consumable] = None,
        equippable: Optional[Equippable] = None,
        fighter: Optional[Fighter] = None,
        inventory: Optional[Inventory] = None,
    ):
        self.x = x
        self.y = y
        self.char = char
        self.color = color
        self.name = name
        self.blocks_movement = blocks_movement
        self.render_order = render_order

        self.consumable = consumable
        if self.consumable:
            self.consumable.parent = self

        self.equippable = equippable
        if self.equippable:
            self.equippable.parent = self

        self.fighter = fighter
        if self.fighter:
            self.fighter.parent = self

        self.inventory = inventory
        if self.inventory:
            self.inventory.parent = self

        if parent:
            # If parent isn't provided now then it will be set later.
            self.parent = parent
            parent.entities.add(self)

    @property
    def gamemap(self) -> GameMap:
        return self.parent.gamemap

    @property
    def is_alive(self) -> bool:
        return self.fighter is not None and self.fighter.hp > 0

    @property
    def power(self) -> int:
        base = self.fighter.base_power if self.fighter else 0
        bonus = self.inventory.power_bonus if self.inventory else 0
        return base + bonus

    @property
    def defense(self) -> int:
        base = self.fighter.base_defense if self.fighter else 0
        bonus = self.inventory.defense_bonus if self.inventory else 0
        return base + bonus

    @property
    def max_hp(self) -> int:
        base = self.fighter.base_max_hp if self.fighter else 0
        bonus = self.inventory.max_hp_bonus if self.inventory else 0
        return base + bonus

    def spawn(self: T, gamemap: GameMap, x: int, y: int) -> T:
        """Spawn a copy of this instance at the given location."""
        clone = copy.deepcopy(self)
        clone.x = x
        clone.y = y
        clone.parent = gamemap
        gamemap.entities.add(clone)
        return clone

    def place(self, x: int, y: int, gamemap: Optional[GameMap] = None) -> None:
        """Place this entity at a new location. Handles moving across GameMaps."""
        self.x = x
        self.y = y
        if gamemap:
            if hasattr(self, "parent"):  # Possibly uninitialized.
                if self.parent is self.gamemap:
                    self.gamemap.entities.remove(self)
            self.parent = gamemap
            gamemap.entities.add(self)

    def move(self, dx: int, dy: int) -> None:
        # Move the entity by a given amount
        self.x += dx
        self.y += dy
