from __future__ import annotations

import pytest

import actions
import color
import entity_factories
from exceptions import Impossible
import setup_game


def _spawn_under(player, prototype):
    return prototype.spawn(player.gamemap, player.x, player.y)


def test_pickup_moves_item_off_map_and_equips(engine, player):
    sword = _spawn_under(player, entity_factories.sword)

    assert engine.handle_action(actions.PickupAction(player))

    assert sword not in engine.game_map.entities
    assert player.inventory.items == [sword]
    assert sword.equippable.equipped
    assert [m.plain_text for m in engine.message_log.messages[-2:]] == [
        "You picked up the Sword!",
        "Equipped Sword on right hand.",
    ]


def test_pickup_with_nothing_here_spends_no_turn(engine, player):
    assert not engine.handle_action(actions.PickupAction(player))

    last = engine.message_log.messages[-1]
    assert last.plain_text == "There is nothing here to pick up."
    assert last.fg == color.impossible


def test_pickup_with_full_inventory_leaves_item_on_map(engine, player):
    player.inventory.capacity = 0
    potion = _spawn_under(player, entity_factories.health_potion)

    assert not engine.handle_action(actions.PickupAction(player))
    assert potion in engine.game_map.entities


def test_using_equipment_keeps_it_in_inventory(engine, player):
    _spawn_under(player, entity_factories.dagger)
    engine.handle_action(actions.PickupAction(player))
    shield = _spawn_under(player, entity_factories.shield)
    engine.handle_action(actions.PickupAction(player))
    dagger = player.inventory.items[0]

    assert engine.handle_action(actions.ItemAction(player, shield))

    assert shield in player.inventory.items
    assert shield.equippable.equipped
    assert not dagger.equippable.equipped
    assert player.defense == 2


def test_using_a_potion_uses_it_up(engine, player):
    _spawn_under(player, entity_factories.health_potion)
    engine.handle_action(actions.PickupAction(player))
    potion = player.inventory.items[0]
    player.fighter.hp = 30

    assert engine.handle_action(actions.ItemAction(player, potion))

    assert potion not in player.inventory.items
    assert player.fighter.hp == 70
    assert engine.message_log.messages[-1].fg == color.health_recovered


def test_potion_at_full_health_is_kept_and_spends_no_turn(engine, player):
    _spawn_under(player, entity_factories.health_potion)
    engine.handle_action(actions.PickupAction(player))
    potion = player.inventory.items[0]

    assert not engine.handle_action(actions.ItemAction(player, potion))

    assert potion in player.inventory.items
    assert engine.message_log.messages[-1].plain_text == "Your health is already full."


def test_equip_action_on_non_equipment_is_cancelled(engine, player):
    _spawn_under(player, entity_factories.health_potion)
    engine.handle_action(actions.PickupAction(player))
    potion = player.inventory.items[0]

    assert not engine.handle_action(actions.EquipAction(player, potion))
    assert potion in player.inventory.items


def test_equip_action_toggles(engine, player):
    helmet = _spawn_under(player, entity_factories.helmet)
    engine.handle_action(actions.PickupAction(player))

    engine.handle_action(actions.EquipAction(player, helmet))
    assert not helmet.equippable.equipped

    engine.handle_action(actions.EquipAction(player, helmet))
    assert helmet.equippable.equipped


def test_drop_action_unequips(engine, player):
    sword = _spawn_under(player, entity_factories.sword)
    engine.handle_action(actions.PickupAction(player))
    assert player.power == 5

    assert engine.handle_action(actions.DropItem(player, sword))

    assert not sword.equippable.equipped
    assert sword in engine.game_map.entities
    assert player.power == 2


def test_melee_uses_equipped_power_and_awards_xp(engine, player):
    orc = entity_factories.orc.spawn(engine.game_map, player.x + 1, player.y)
    sword = _spawn_under(player, entity_factories.sword)
    engine.handle_action(actions.PickupAction(player))
    assert sword.equippable.equipped

    for _ in range(4):
        engine.handle_action(actions.BumpAction(player, 1, 0))

    # 5 power against 0 defense, 20 hp.
    assert not orc.is_alive
    assert orc.name == "remains of Orc"
    assert not orc.blocks_movement
    assert player.fighter.xp == 35


def test_melee_against_higher_defense_does_no_damage(engine, player):
    troll = entity_factories.troll.spawn(engine.game_map, player.x + 1, player.y)

    engine.handle_action(actions.MeleeAction(player, 1, 0))

    assert troll.fighter.hp == 30
    assert engine.message_log.messages[-1].plain_text.endswith("but does no damage.")


def test_movement_is_blocked_by_walls(engine, player):
    player.place(1, 1)

    with pytest.raises(Impossible):
        actions.MovementAction(player, -1, 0).perform()
    actions.MovementAction(player, 1, 0).perform()
    assert (player.x, player.y) == (2, 1)


def test_new_game_starts_with_dagger_equipped():
    engine = setup_game.new_game()
    player = engine.player

    assert [item.name for item in player.inventory.items] == ["Dagger"]
    assert player.inventory.items[0].equippable.equipped
    assert player.power == 4


def test_save_and_load_keep_equipment_state(tmp_path):
    engine = setup_game.new_game()
    filename = str(tmp_path / "savegame.sav")

    engine.save_as(filename)
    loaded = setup_game.load_game(filename)

    dagger = loaded.player.inventory.items[0]
    assert dagger.equippable.equipped
    assert dagger.parent is loaded.player.inventory
    assert loaded.player.power == 4


def test_drop_action_on_item_not_carried_spends_no_turn(engine, player):
    sword = _spawn_under(player, entity_factories.sword)
    sword.equippable.equipped = True

    assert not engine.handle_action(actions.DropItem(player, sword))

    assert sword.equippable.equipped
    assert sword in engine.game_map.entities
    last = engine.message_log.messages[-1]
    assert last.plain_text == "You are not carrying the Sword."
    assert last.fg == color.impossible


def test_equip_action_on_item_not_carried_spends_no_turn(engine, player):
    helmet = _spawn_under(player, entity_factories.helmet)

    assert not engine.handle_action(actions.EquipAction(player, helmet))

    assert not helmet.equippable.equipped
    assert engine.message_log.messages[-1].plain_text == "You are not carrying the Helmet."
