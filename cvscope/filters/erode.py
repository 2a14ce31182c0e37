"""Morphological erosion with a selectable structuring element."""

from __future__ import annotations

__all__ = ("ErodeFilter",)

from typing import TYPE_CHECKING, Final, cast

import cv2 as cv
from typing_extensions import Self

from cvscope.core.validation import ensure_positive
from cvscope.models import MORPH_SHAPES, ErodeConfig, FilterKind, Parameter, ParameterRole

from .base import FilterSpec

if TYPE_CHECKING:
    from cvscope.models import FilterConfig

    from .base import Frame, Positions

KSIZE_X: Final[str] = "ksize X"
KSIZE_Y: Final[str] = "ksize Y"


class ErodeFilter(FilterSpec):
    """Erode frames with a structuring element paged through :data:`MORPH_SHAPES`."""

    kind = FilterKind.ERODE
    title = "Erode"
    parameters = (
        Parameter(KSIZE_X, 25, 12, ParameterRole.KERNEL_SIZE, minimum=1),
        Parameter(KSIZE_Y, 25, 12, ParameterRole.KERNEL_SIZE, minimum=1),
    )
    options = MORPH_SHAPES

    def build_config(self: Self, positions: Positions, option_index: int = 0) -> ErodeConfig:
        return ErodeConfig(
            shape_index=option_index % len(MORPH_SHAPES),
            kx=ensure_positive(positions[KSIZE_X]),
            ky=ensure_positive(positions[KSIZE_Y]),
        )

    def apply(self: Self, frame: Frame, config: FilterConfig) -> Frame:
        erode = cast("ErodeConfig", config)
        shape = getattr(cv, MORPH_SHAPES[erode.shape_index].symbolic_name)
        kernel = cv.getStructuringElement(shape, (erode.kx, erode.ky))
        return cast("Frame", cv.erode(frame, kernel))
