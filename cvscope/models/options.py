"""Read-only tables of discrete filter options.

Each :class:`OptionEntry` pairs an OpenCV constant name with a short
human-readable description shown in the window title. The numeric value is
looked up on :mod:`cv2` where the option is used, so these tables stay free of
OpenCV imports.
"""

from __future__ import annotations

__all__ = (
    "BORDER_TYPES",
    "MORPH_SHAPES",
    "OptionEntry",
    "OptionTable",
)

from typing import Final, NamedTuple, TypeAlias


class OptionEntry(NamedTuple):
    """A named discrete option.

    Attributes:
        symbolic_name: OpenCV constant name, e.g. ``"MORPH_RECT"``.
        description: Label shown to the operator.
    """

    symbolic_name: str
    description: str


OptionTable: TypeAlias = tuple[OptionEntry, ...]

MORPH_SHAPES: Final[OptionTable] = (
    OptionEntry("MORPH_RECT", "Rectangle"),
    OptionEntry("MORPH_CROSS", "Cross"),
    OptionEntry("MORPH_ELLIPSE", "Ellipse"),
)

# Wrap and transparent modes are rejected by OpenCV's spatial filters.
BORDER_TYPES: Final[OptionTable] = (
    OptionEntry("BORDER_CONSTANT", "Border Constant"),
    OptionEntry("BORDER_REPLICATE", "Border Replicate"),
    OptionEntry("BORDER_REFLECT", "Border Reflect"),
    OptionEntry("BORDER_REFLECT_101", "Border Reflect 101"),
    OptionEntry("BORDER_ISOLATED", "Border Isolated"),
)
