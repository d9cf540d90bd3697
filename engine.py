from __future__ import annotations

import lzma
import pickle
from typing import Optional, TYPE_CHECKING

from tcod.console import Console
from tcod.map import compute_fov

import color
import exceptions
from message_log import MessageLog
import render_functions

if TYPE_CHECKING:
    from actions import Action
    from entity import Entity
    from game_map import GameMap

FOV_RADIUS = 8

# Side panel layout, below a 40 row map on an 80x50 console.
BAR_WIDTH = 20
BAR_Y = 43
LOG_X, LOG_Y, LOG_WIDTH, LOG_HEIGHT = 21, 43, 59, 6


class Engine:
    game_map: GameMap

    def __init__(self, player: Entity):
        self.message_log = MessageLog()
        self.player = player

    def handle_action(self, action: Optional[Action]) -> bool:
        """Perform `action` and return True if it took up the player's turn."""
        if action is None:
            return False
        try:
            action.perform()
        except exceptions.Impossible as exc:
            self.message_log.add_message(exc.args[0], color.impossible)
            return False  # Skip enemy turn on exceptions.

        self.update_fov()
        return True

    def update_fov(self) -> None:
        """Recompute the visible area based on the players point of view."""
        self.game_map.visible[:] = compute_fov(
            self.game_map.tiles["transparent"],
            (self.player.x, self.player.y),
            radius=FOV_RADIUS,
        )
        # If a tile is "visible" it should be added to "explored".
        self.game_map.explored |= self.game_map.visible

    def render(self, console: Console) -> None:
        self.game_map.render(console)

        self.message_log.render(
            console=console, x=LOG_X, y=LOG_Y, width=LOG_WIDTH, height=LOG_HEIGHT
        )

        render_functions.render_bar(
            console=console,
            current_value=self.player.fighter.hp,
            maximum_value=self.player.max_hp,
            total_width=BAR_WIDTH,
            y=BAR_Y,
        )
        render_functions.render_stats(console=console, entity=self.player, x=0, y=BAR_Y + 1)

    def save_as(self, filename: str) -> None:
        """Save this Engine instance as a compressed file."""
        save_data = lzma.compress(pickle.dumps(self))
        with open(filename, "wb") as f:
            f.write(save_data)
