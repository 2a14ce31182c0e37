"""Trackbar-backed parameter descriptions."""

from __future__ import annotations

__all__ = ("Parameter", "ParameterRole")

import enum
from dataclasses import dataclass


class ParameterRole(enum.Enum):
    """Selects which validation rule a parameter is subject to."""

    KERNEL_SIZE = "kernel_size"
    SIGMA = "sigma"
    SCALE = "scale"
    DELTA = "delta"
    GRADIENT_ORDER = "gradient_order"


@dataclass(frozen=True, slots=True)
class Parameter:
    """Describe a single trackbar.

    The trackbar clamps its own position to ``[minimum, maximum]``; values read
    back from it are never re-checked against the range.

    Attributes:
        name: Trackbar label, also used as the key in position mappings.
        maximum: Upper bound of the trackbar.
        initial: Position applied when the session starts.
        role: Validation role of the parameter.
        minimum: Lower bound of the trackbar. Defaults to 0.
    """

    name: str
    maximum: int
    initial: int
    role: ParameterRole
    minimum: int = 0
