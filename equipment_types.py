from enum import auto, Enum


class EquipmentSlot(Enum):
    """Body locations an item can be worn in. One item per slot."""

    LEFT_HAND = auto()
    RIGHT_HAND = auto()
    HEAD = auto()

    @property
    def display_name(self) -> str:
        # Player-facing text; repr/name stay the debug form.
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    EquipmentSlot.LEFT_HAND: "left hand",
    EquipmentSlot.RIGHT_HAND: "right hand",
    EquipmentSlot.HEAD: "head",
}
