"""OpenCV HighGUI window with trackbars.

:class:`Window` owns one named window for the lifetime of a filter session and
is the only place that talks to ``cv2`` display primitives.
"""

from __future__ import annotations

__all__ = ("Window",)

import logging
from typing import TYPE_CHECKING

import cv2 as cv
from typing_extensions import Self

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def nothing(_: int) -> None:
    """Dummy callback function for trackbar events."""


class Window:
    """A named display window whose trackbars are polled every iteration."""

    def __init__(self: Self, name: str, title: str | None = None) -> None:
        """Create the window.

        Args:
            name: Window identifier used by every HighGUI call.
            title: Initial title; defaults to ``name``.
        """
        self.name = name
        self._closed = False
        cv.namedWindow(self.name, cv.WINDOW_AUTOSIZE)
        if title is not None:
            self.set_title(title)

    def create_trackbar(self: Self, label: str, maximum: int, initial: int, minimum: int = 0) -> None:
        """Attach a trackbar and move it to its starting position."""
        cv.createTrackbar(label, self.name, initial, maximum, nothing)
        if minimum:
            cv.setTrackbarMin(label, self.name, minimum)
        cv.setTrackbarPos(label, self.name, max(initial, minimum))

    def get_pos(self: Self, label: str) -> int:
        """Return a trackbar's position."""
        return int(cv.getTrackbarPos(label, self.name))

    def set_pos(self: Self, label: str, position: int) -> None:
        """Move a trackbar; the change is visible on the next render."""
        cv.setTrackbarPos(label, self.name, position)

    def show(self: Self, frame: npt.NDArray[np.uint8]) -> None:
        """Display a frame."""
        cv.imshow(self.name, frame)

    def set_title(self: Self, title: str) -> None:
        """Replace the displayed window title."""
        cv.setWindowTitle(self.name, title)

    def wait_key(self: Self, delay_ms: int) -> int:
        """Pump the event loop for up to ``delay_ms`` and return the pressed key or ``-1``."""
        return int(cv.waitKey(delay_ms))

    def close(self: Self) -> None:
        """Destroy the window. Further calls are ignored."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Destroying window %r.", self.name)
        cv.destroyWindow(self.name)
