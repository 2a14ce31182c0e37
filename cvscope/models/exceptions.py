"""Exception classes used across cvscope."""

from __future__ import annotations

__all__ = ("VideoSourceError",)

from typing import Final

from typing_extensions import Self

_VIDEO_SOURCE_MESSAGE: Final[str] = "Error opening video source: {source}"


class VideoSourceError(Exception):
    """Raised when a camera device or video file cannot be opened.

    Attributes:
        source: Device index or path that failed to open.
    """

    def __init__(self: Self, source: int | str) -> None:
        """Initialise the error with the offending source.

        Args:
            source: Device index or path that triggered the error.
        """
        self.source: int | str = source
        super().__init__(_VIDEO_SOURCE_MESSAGE.format(source=source))
