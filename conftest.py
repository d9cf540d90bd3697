from __future__ import annotations

import copy

import pytest

from engine import Engine
import entity_factories
from game_map import GameMap
from message_log import MessageLog
import tile_types


@pytest.fixture
def engine():
    player = copy.deepcopy(entity_factories.player)
    engine = Engine(player=player)
    engine.game_map = GameMap(engine, 20, 20, entities=[player])
    engine.game_map.tiles[1:-1, 1:-1] = tile_types.floor
    player.place(10, 10, engine.game_map)
    engine.update_fov()
    return engine


@pytest.fixture
def player(engine):
    return engine.player


@pytest.fixture
def message_log():
    return MessageLog()
