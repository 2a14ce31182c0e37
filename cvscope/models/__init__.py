"""Data structures and domain exceptions used by cvscope.

This package centralises the option tables, trackbar parameter descriptions,
resolved filter configurations, and project-specific exception types.
"""

from __future__ import annotations

__all__ = (
    "BORDER_TYPES",
    "MORPH_SHAPES",
    "BlurConfig",
    "ErodeConfig",
    "FilterConfig",
    "FilterKind",
    "GaussianBlurConfig",
    "OptionEntry",
    "OptionTable",
    "Parameter",
    "ParameterRole",
    "ScharrConfig",
    "VideoSourceError",
)

from .exceptions import VideoSourceError
from .filter_config import BlurConfig, ErodeConfig, FilterConfig, FilterKind, GaussianBlurConfig, ScharrConfig
from .options import BORDER_TYPES, MORPH_SHAPES, OptionEntry, OptionTable
from .parameter import Parameter, ParameterRole
