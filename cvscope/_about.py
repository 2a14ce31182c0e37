"""Package metadata.

This module stores build- and release-related metadata and is intentionally
dependency-free. Values are re-exported from :mod:`cvscope` for convenience.
"""

from __future__ import annotations

from typing import Final

__all__ = (
    "__author__",
    "__copyright__",
    "__git_sha1__",
    "__issue_tracker__",
    "__license__",
    "__maintainer__",
    "__url__",
    "__version__",
)

__author__: Final[str] = "cvscope contributors"
__maintainer__: Final[str] = "cvscope contributors"
__copyright__: Final[str] = "2024-present, cvscope contributors"
__issue_tracker__: Final[str] = "https://github.com/cvscope/cvscope/issues"
__license__: Final[str] = "MIT"
__url__: Final[str] = "https://github.com/cvscope/cvscope"
__version__: Final[str] = "0.1.0"
__git_sha1__: Final[str] = "HEAD"
