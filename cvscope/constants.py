"""Shared constants.

The :mod:`cvscope.constants` module centralizes the small tuning values used by
the live filter loop (key poll cadence, window title decorations, and the raw
key codes of the default keymap).
"""

from __future__ import annotations

from typing import Final

__all__ = (
    "DEFAULT_SOURCE",
    "KEY_ESC",
    "KEY_G",
    "KEY_P",
    "KEY_Q",
    "KEY_SPACE",
    "KEY_X",
    "KEY_Z",
    "NO_KEY",
    "PAUSED_MARKER",
    "TITLE_SEPARATOR",
    "TITLE_SUFFIX",
    "WAIT_KEY_DELAY_MS",
)

# Loop pacing; also bounds how long a key press may go unnoticed.
WAIT_KEY_DELAY_MS: Final[int] = 1
DEFAULT_SOURCE: Final[str] = "0"

TITLE_SUFFIX: Final[str] = "CVscope"
TITLE_SEPARATOR: Final[str] = " - "
PAUSED_MARKER: Final[str] = "**PAUSED** "

# HighGUI key codes (low byte of cv2.waitKey)
NO_KEY: Final[int] = -1
KEY_ESC: Final[int] = 27
KEY_SPACE: Final[int] = 32
KEY_G: Final[int] = ord("g")
KEY_P: Final[int] = ord("p")
KEY_Q: Final[int] = ord("q")
KEY_X: Final[int] = ord("x")
KEY_Z: Final[int] = ord("z")
