"""Core building blocks of a live filter session."""

from __future__ import annotations

__all__ = (
    "DEFAULT_KEYMAP",
    "Command",
    "EnumCycler",
    "Language",
    "ParameterStore",
    "VideoSourceError",
    "Window",
    "ensure_odd",
    "ensure_positive",
    "open_video_source",
    "render",
    "translate_key",
    "validate_gaussian_kernel",
    "validate_gradient_orders",
)

from cvscope.models import VideoSourceError

from .capture import open_video_source
from .codegen import Language, render
from .commands import DEFAULT_KEYMAP, Command, translate_key
from .display import Window
from .enum_cycler import EnumCycler
from .parameter_store import ParameterStore
from .validation import ensure_odd, ensure_positive, validate_gaussian_kernel, validate_gradient_orders
