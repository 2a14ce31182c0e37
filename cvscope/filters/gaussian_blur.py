"""Gaussian blur with selectable border handling."""

from __future__ import annotations

__all__ = ("GaussianBlurFilter",)

from typing import TYPE_CHECKING, Final, cast

import cv2 as cv
from typing_extensions import Self, override

from cvscope.core.validation import ensure_odd, validate_gaussian_kernel
from cvscope.models import BORDER_TYPES, FilterKind, GaussianBlurConfig, Parameter, ParameterRole

from .base import FilterSpec

if TYPE_CHECKING:
    from cvscope.models import FilterConfig

    from .base import Frame, Positions

KSIZE_X: Final[str] = "ksize X"
KSIZE_Y: Final[str] = "ksize Y"
SIGMA_X: Final[str] = "sigma X"
SIGMA_Y: Final[str] = "sigma Y"


class GaussianBlurFilter(FilterSpec):
    """Blur frames with ``cv2.GaussianBlur``.

    Either the kernel size or ``sigma X`` has to be non-zero. While ``sigma X``
    sits at 0, a zero kernel trackbar is pushed to 1. Even kernel sizes are
    rounded up to the next odd value when the configuration is built, leaving
    the trackbar where the operator put it.
    """

    kind = FilterKind.GAUSSIAN_BLUR
    title = "Gaussian Blur"
    parameters = (
        Parameter(KSIZE_X, 25, 0, ParameterRole.KERNEL_SIZE),
        Parameter(KSIZE_Y, 25, 0, ParameterRole.KERNEL_SIZE),
        Parameter(SIGMA_X, 60, 30, ParameterRole.SIGMA),
        Parameter(SIGMA_Y, 60, 0, ParameterRole.SIGMA),
    )
    options = BORDER_TYPES

    @override
    def correct(self: Self, positions: Positions, previous: Positions | None = None) -> dict[str, int]:
        corrected = dict(positions)
        corrected[KSIZE_X], corrected[KSIZE_Y] = validate_gaussian_kernel(
            positions[KSIZE_X], positions[KSIZE_Y], positions[SIGMA_X]
        )
        return corrected

    def build_config(self: Self, positions: Positions, option_index: int = 0) -> GaussianBlurConfig:
        return GaussianBlurConfig(
            kx=ensure_odd(positions[KSIZE_X]),
            ky=ensure_odd(positions[KSIZE_Y]),
            sigma_x=float(positions[SIGMA_X]),
            sigma_y=float(positions[SIGMA_Y]),
            border_index=option_index % len(BORDER_TYPES),
        )

    def apply(self: Self, frame: Frame, config: FilterConfig) -> Frame:
        gaussian = cast("GaussianBlurConfig", config)
        border = getattr(cv, BORDER_TYPES[gaussian.border_index].symbolic_name)
        return cast(
            "Frame",
            cv.GaussianBlur(
                frame,
                (gaussian.kx, gaussian.ky),
                sigmaX=gaussian.sigma_x,
                sigmaY=gaussian.sigma_y,
                borderType=border,
            ),
        )
