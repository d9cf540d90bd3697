from __future__ import annotations

from typing import TYPE_CHECKING

import color

if TYPE_CHECKING:
    from tcod.console import Console
    from components.inventory import Inventory
    from entity import Entity


def inventory_item_label(item: Entity) -> str:
    """Menu text for an item: worn gear shows the slot it is worn on."""
    equippable = item.equippable
    if equippable is not None and equippable.equipped:
        return f"{item.name} (on {equippable.slot.display_name})"
    return item.name


def render_inventory_menu(
    console: Console, inventory: Inventory, title: str, x: int, y: int
) -> None:
    """Draw a framed, lettered list of the inventory at (x, y)."""
    labels = [
        f"({chr(ord('a') + i)}) {inventory_item_label(item)}"
        for i, item in enumerate(inventory.items)
    ]

    height = max(len(labels) + 2, 3)
    width = max([len(title) + 4] + [len(label) + 2 for label in labels])

    console.draw_frame(
        x=x,
        y=y,
        width=width,
        height=height,
        title=title,
        clear=True,
        fg=color.white,
        bg=color.black,
    )

    if labels:
        for i, label in enumerate(labels):
            console.print(x + 1, y + i + 1, label, fg=color.menu_text)
    else:
        console.print(x + 1, y + 1, "(Empty)", fg=color.menu_text)


def render_bar(
    console: Console, current_value: int, maximum_value: int, total_width: int, y: int
) -> None:
    bar_width = int(float(current_value) / maximum_value * total_width) if maximum_value > 0 else 0
    bar_width = min(bar_width, total_width)

    console.draw_rect(x=0, y=y, width=total_width, height=1, ch=1, bg=color.bar_empty)

    if bar_width > 0:
        console.draw_rect(
            x=0, y=y, width=bar_width, height=1, ch=1, bg=color.bar_filled
        )

    console.print(1, y, f"HP: {current_value}/{maximum_value}", fg=color.bar_text)


def render_stats(console: Console, entity: Entity, x: int, y: int) -> None:
    console.print(x, y, f"Power: {entity.power}", fg=color.white)
    console.print(x, y + 1, f"Defense: {entity.defense}", fg=color.white)
