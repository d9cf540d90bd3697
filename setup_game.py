"""Handle the loading and initialization of game sessions."""
from __future__ import annotations

import copy
import lzma
import pickle

import color
from engine import Engine
import entity_factories
from game_map import GameMap
import tile_types

MAP_WIDTH = 80
MAP_HEIGHT = 40


def new_game() -> Engine:
    """Return a brand new game session as an Engine instance.

    The map is one open room; the player starts in its centre wielding a
    dagger, with a sword and a shield on the floor nearby.
    """
    player = copy.deepcopy(entity_factories.player)

    engine = Engine(player=player)

    engine.game_map = GameMap(engine, MAP_WIDTH, MAP_HEIGHT, entities=[player])
    engine.game_map.tiles[1:-1, 1:-1] = tile_types.floor

    center_x, center_y = MAP_WIDTH // 2, MAP_HEIGHT // 2
    player.place(center_x, center_y, engine.game_map)

    entity_factories.sword.spawn(engine.game_map, center_x + 2, center_y)
    entity_factories.shield.spawn(engine.game_map, center_x - 2, center_y)
    entity_factories.health_potion.spawn(engine.game_map, center_x, center_y + 2)
    entity_factories.orc.spawn(engine.game_map, center_x + 6, center_y + 3)

    engine.update_fov()

    engine.message_log.add_message(
        "Welcome, adventurer, to yet another dungeon!", color.welcome_text
    )

    dagger = copy.deepcopy(entity_factories.dagger)
    dagger.parent = player.inventory
    player.inventory.items.append(dagger)
    dagger.equippable.equipped = True

    return engine


def load_game(filename: str) -> Engine:
    """Load an Engine instance from a file."""
    with open(filename, "rb") as f:
        engine = pickle.loads(lzma.decompress(f.read()))
    assert isinstance(engine, Engine)
    return engine
