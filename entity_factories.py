from components.consumable import HealingConsumable
from components.equipment import EquipmentConsumable
from components.equippable import Equippable
from components.fighter import DeathBehavior, Fighter
from components.inventory import Inventory
from entity import Entity
from equipment_types import EquipmentSlot
from render_order import RenderOrder

player = Entity(
    char="@",
    color=(255, 255, 255),
    name="Player",
    blocks_movement=True,
    render_order=RenderOrder.ACTOR,
    fighter=Fighter(hp=100, base_defense=1, base_power=2, on_death=DeathBehavior.PLAYER),
    inventory=Inventory(capacity=26),
)

orc = Entity(
    char="o",
    color=(63, 127, 63),
    name="Orc",
    blocks_movement=True,
    render_order=RenderOrder.ACTOR,
    fighter=Fighter(hp=20, base_defense=0, base_power=4, xp=35),
)
troll = Entity(
    char="T",
    color=(0, 127, 0),
    name="Troll",
    blocks_movement=True,
    render_order=RenderOrder.ACTOR,
    fighter=Fighter(hp=30, base_defense=2, base_power=8, xp=100),
)

health_potion = Entity(
    char="!",
    color=(127, 0, 255),
    name="Health Potion",
    render_order=RenderOrder.ITEM,
    consumable=HealingConsumable(amount=40),
)

dagger = Entity(
    char="-",
    color=(0, 191, 255),
    name="Dagger",
    render_order=RenderOrder.ITEM,
    consumable=EquipmentConsumable(),
    equippable=Equippable(EquipmentSlot.LEFT_HAND, power_bonus=2),
)
sword = Entity(
    char="/",
    color=(0, 191, 255),
    name="Sword",
    render_order=RenderOrder.ITEM,
    consumable=EquipmentConsumable(),
    equippable=Equippable(EquipmentSlot.RIGHT_HAND, power_bonus=3),
)
shield = Entity(
    char="[",
    color=(255, 127, 0),
    name="Shield",
    render_order=RenderOrder.ITEM,
    consumable=EquipmentConsumable(),
    equippable=Equippable(EquipmentSlot.LEFT_HAND, defense_bonus=1),
)
helmet = Entity(
    char="^",
    color=(139, 69, 19),
    name="Helmet",
    render_order=RenderOrder.ITEM,
    consumable=EquipmentConsumable(),
    equippable=Equippable(EquipmentSlot.HEAD, defense_bonus=1, max_hp_bonus=10),
)
