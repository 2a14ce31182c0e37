"""Interactive exploration of OpenCV filter parameters on live video.

The package re-exports the session entry point, the filter registry, and the
project metadata.
"""

from __future__ import annotations

from ._about import (
    __author__,
    __copyright__,
    __git_sha1__,
    __issue_tracker__,
    __license__,
    __maintainer__,
    __url__,
    __version__,
)
from .filters import FILTERS, FilterSpec, get_filter
from .models import FilterKind, VideoSourceError
from .session import FilterSession, SessionState

__all__ = (
    "FILTERS",
    "FilterKind",
    "FilterSession",
    "FilterSpec",
    "SessionState",
    "VideoSourceError",
    "__author__",
    "__copyright__",
    "__git_sha1__",
    "__issue_tracker__",
    "__license__",
    "__maintainer__",
    "__url__",
    "__version__",
    "get_filter",
)
