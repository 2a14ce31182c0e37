"""Video source helpers.

Thin wrappers around :class:`cv2.VideoCapture` that turn the command-line
source argument into a device index or path and report read status as plain
values instead of exceptions.
"""

from __future__ import annotations

__all__ = (
    "is_empty_frame",
    "open_video_source",
    "parse_source",
    "read_frame",
)

import logging
from typing import TYPE_CHECKING, TypeAlias

import cv2 as cv

from cvscope.models import VideoSourceError

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

Frame: TypeAlias = "npt.NDArray[np.uint8]"

logger = logging.getLogger(__name__)


def parse_source(source: int | str) -> int | str:
    """Interpret an all-digit string as a camera device index.

    Args:
        source: Device index, or a path/URL understood by OpenCV.

    Returns:
        int | str: Device index, or ``source`` unchanged.
    """
    if isinstance(source, str) and source.strip().isdigit():
        return int(source)
    return source


def open_video_source(source: int | str) -> cv.VideoCapture:
    """Open a camera device or video file.

    Args:
        source: Device index or path/URL.

    Returns:
        cv.VideoCapture: An opened capture.

    Raises:
        VideoSourceError: If OpenCV cannot open the source.
    """
    source = parse_source(source)
    capture = cv.VideoCapture(source)
    if not capture.isOpened():
        capture.release()
        raise VideoSourceError(source)
    logger.debug("Opened video source %r.", source)
    return capture


def read_frame(capture: cv.VideoCapture) -> tuple[bool, Frame | None]:
    """Read the next frame.

    Returns:
        tuple[bool, Frame | None]: ``False`` when the device closed or the file ended.
    """
    ok, frame = capture.read()
    return bool(ok), frame


def is_empty_frame(frame: Frame | None) -> bool:
    """Return ``True`` for a missing or zero-sized frame."""
    return frame is None or getattr(frame, "size", 0) == 0
