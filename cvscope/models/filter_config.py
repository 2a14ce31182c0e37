"""Resolved per-iteration filter configurations.

A configuration is a derived view of the trackbar state: it is rebuilt on every
loop iteration by :class:`~cvscope.core.parameter_store.ParameterStore` and is
always valid for the filter it belongs to.
"""

from __future__ import annotations

__all__ = (
    "BlurConfig",
    "ErodeConfig",
    "FilterConfig",
    "FilterKind",
    "GaussianBlurConfig",
    "ScharrConfig",
)

import enum
from dataclasses import dataclass
from typing import TypeAlias


class FilterKind(str, enum.Enum):
    """Supported filters; values double as CLI subcommand names."""

    BLUR = "blur"
    ERODE = "erode"
    GAUSSIAN_BLUR = "gaussian"
    SCHARR = "scharr"


@dataclass(frozen=True, slots=True)
class BlurConfig:
    """Normalized box filter extent."""

    kx: int
    ky: int


@dataclass(frozen=True, slots=True)
class ErodeConfig:
    """Structuring element shape and extent for erosion."""

    shape_index: int
    kx: int
    ky: int


@dataclass(frozen=True, slots=True)
class GaussianBlurConfig:
    """Gaussian kernel size, standard deviations and border handling.

    Attributes:
        kx: Odd kernel width.
        ky: Odd kernel height.
        sigma_x: Standard deviation along X.
        sigma_y: Standard deviation along Y; 0 means "same as ``sigma_x``".
        border_index: Index into :data:`~cvscope.models.options.BORDER_TYPES`.
    """

    kx: int
    ky: int
    sigma_x: float
    sigma_y: float
    border_index: int


@dataclass(frozen=True, slots=True)
class ScharrConfig:
    """Scharr derivative orders, scaling and border handling.

    Exactly one of ``dx`` and ``dy`` is 1.
    """

    dx: int
    dy: int
    scale: float
    delta: float
    border_index: int


FilterConfig: TypeAlias = BlurConfig | ErodeConfig | GaussianBlurConfig | ScharrConfig
