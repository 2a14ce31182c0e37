"""Keyboard command surface.

Raw HighGUI key codes are translated to :class:`Command` members at the input
boundary; the session dispatches on the command only.
"""

from __future__ import annotations

__all__ = (
    "DEFAULT_KEYMAP",
    "Command",
    "Keymap",
    "translate_key",
)

import enum
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, TypeAlias

from cvscope import constants


class Command(enum.Enum):
    """Operator commands understood by a filter session."""

    CYCLE_PREV = enum.auto()
    CYCLE_NEXT = enum.auto()
    EMIT_PRIMARY_CODE = enum.auto()
    EMIT_SECONDARY_CODE = enum.auto()
    TOGGLE_PAUSE = enum.auto()
    TERMINATE = enum.auto()


Keymap: TypeAlias = Mapping[int, Command]

DEFAULT_KEYMAP: Final[Keymap] = MappingProxyType(
    {
        constants.KEY_Z: Command.CYCLE_PREV,
        constants.KEY_X: Command.CYCLE_NEXT,
        constants.KEY_P: Command.EMIT_PRIMARY_CODE,
        constants.KEY_G: Command.EMIT_SECONDARY_CODE,
        constants.KEY_SPACE: Command.TOGGLE_PAUSE,
        constants.KEY_ESC: Command.TERMINATE,
        constants.KEY_Q: Command.TERMINATE,
    }
)


def translate_key(key: int, keymap: Keymap = DEFAULT_KEYMAP) -> Command | None:
    """Map a raw ``cv2.waitKey`` result to a command.

    Args:
        key: Value returned by ``cv2.waitKey``; ``-1`` when no key was pressed.
        keymap: Key code to command mapping. Defaults to :data:`DEFAULT_KEYMAP`.

    Returns:
        Command | None: The mapped command, or ``None`` for no key or an unmapped key.
    """
    if key == constants.NO_KEY:
        return None
    return keymap.get(key & 0xFF)
