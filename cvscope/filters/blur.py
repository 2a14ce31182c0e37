"""Normalized box filter."""

from __future__ import annotations

__all__ = ("BlurFilter",)

from typing import TYPE_CHECKING, Final, cast

import cv2 as cv
from typing_extensions import Self

from cvscope.core.validation import ensure_positive
from cvscope.models import BlurConfig, FilterKind, Parameter, ParameterRole

from .base import FilterSpec

if TYPE_CHECKING:
    from cvscope.models import FilterConfig

    from .base import Frame, Positions

KSIZE_X: Final[str] = "ksize X"
KSIZE_Y: Final[str] = "ksize Y"


class BlurFilter(FilterSpec):
    """Blur frames with ``cv2.blur``."""

    kind = FilterKind.BLUR
    title = "Blur"
    parameters = (
        Parameter(KSIZE_X, 25, 12, ParameterRole.KERNEL_SIZE, minimum=1),
        Parameter(KSIZE_Y, 25, 12, ParameterRole.KERNEL_SIZE, minimum=1),
    )

    def build_config(self: Self, positions: Positions, option_index: int = 0) -> BlurConfig:  # noqa: ARG002
        return BlurConfig(kx=ensure_positive(positions[KSIZE_X]), ky=ensure_positive(positions[KSIZE_Y]))

    def apply(self: Self, frame: Frame, config: FilterConfig) -> Frame:
        blur = cast("BlurConfig", config)
        return cast("Frame", cv.blur(frame, (blur.kx, blur.ky)))
