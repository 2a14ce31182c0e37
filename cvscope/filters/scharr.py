"""Scharr first-derivative edge filter."""

from __future__ import annotations

__all__ = ("ScharrFilter",)

from typing import TYPE_CHECKING, Final, cast

import cv2 as cv
from typing_extensions import Self, override

from cvscope.core.validation import validate_gradient_orders
from cvscope.models import BORDER_TYPES, FilterKind, Parameter, ParameterRole, ScharrConfig

from .base import FilterSpec

if TYPE_CHECKING:
    from cvscope.models import FilterConfig

    from .base import Frame, Positions

DX: Final[str] = "dx"
DY: Final[str] = "dy"
SCALE: Final[str] = "scale"
DELTA: Final[str] = "delta"


class ScharrFilter(FilterSpec):
    """Compute a Scharr gradient along exactly one axis.

    The gradient is computed as signed 16-bit and converted back to 8-bit
    absolute values for display.
    """

    kind = FilterKind.SCHARR
    title = "Scharr"
    parameters = (
        Parameter(DX, 1, 1, ParameterRole.GRADIENT_ORDER),
        Parameter(DY, 1, 0, ParameterRole.GRADIENT_ORDER),
        Parameter(SCALE, 60, 0, ParameterRole.SCALE),
        Parameter(DELTA, 60, 0, ParameterRole.DELTA),
    )
    options = BORDER_TYPES

    @override
    def correct(self: Self, positions: Positions, previous: Positions | None = None) -> dict[str, int]:
        corrected = dict(positions)
        prior = (previous[DX], previous[DY]) if previous is not None else None
        corrected[DX], corrected[DY] = validate_gradient_orders(positions[DX], positions[DY], prior)
        return corrected

    def build_config(self: Self, positions: Positions, option_index: int = 0) -> ScharrConfig:
        return ScharrConfig(
            dx=positions[DX],
            dy=positions[DY],
            scale=float(positions[SCALE]),
            delta=float(positions[DELTA]),
            border_index=option_index % len(BORDER_TYPES),
        )

    def apply(self: Self, frame: Frame, config: FilterConfig) -> Frame:
        scharr = cast("ScharrConfig", config)
        border = getattr(cv, BORDER_TYPES[scharr.border_index].symbolic_name)
        gradient = cv.Scharr(
            frame, cv.CV_16S, scharr.dx, scharr.dy, scale=scharr.scale, delta=scharr.delta, borderType=border
        )
        return cast("Frame", cv.convertScaleAbs(gradient))
