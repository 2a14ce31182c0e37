"""Common interface for the filters a session can drive.

A :class:`FilterSpec` bundles everything a session needs to know about one
filter kind: its trackbars, its optional option table, the pure rule that
corrects raw trackbar positions, how to build a configuration, and how to
apply the filter to a frame.
"""

from __future__ import annotations

__all__ = ("FilterSpec", "Frame", "Positions")

import abc
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, TypeAlias

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from cvscope import constants
from cvscope.core.codegen import render

if TYPE_CHECKING:
    from cvscope.core.codegen import Language
    from cvscope.models import FilterConfig, FilterKind, OptionEntry, OptionTable, Parameter

Frame: TypeAlias = npt.NDArray[np.uint8]
Positions: TypeAlias = Mapping[str, int]


class FilterSpec(abc.ABC):
    """Describe and apply one filter kind."""

    kind: ClassVar[FilterKind]
    title: ClassVar[str]
    parameters: ClassVar[tuple[Parameter, ...]]
    options: ClassVar[OptionTable | None] = None

    def correct(self: Self, positions: Positions, previous: Positions | None = None) -> dict[str, int]:
        """Return the positions that must be shown on the trackbars.

        The default rule accepts every position as read.

        Args:
            positions: Raw trackbar positions keyed by parameter name.
            previous: Corrected positions from the preceding iteration, if any.
        """
        return dict(positions)

    @abc.abstractmethod
    def build_config(self: Self, positions: Positions, option_index: int = 0) -> FilterConfig:
        """Build the filter configuration from corrected positions."""

    @abc.abstractmethod
    def apply(self: Self, frame: Frame, config: FilterConfig) -> Frame:
        """Run the filter on ``frame`` and return the processed image."""

    def option(self: Self, option_index: int) -> OptionEntry | None:
        """Return the option entry at ``option_index``, or ``None`` without an option table."""
        if not self.options:
            return None
        return self.options[option_index % len(self.options)]

    def window_title(self: Self, option: OptionEntry | None = None) -> str:
        """Return the window title for the current option."""
        parts = [self.title]
        if option is not None:
            parts.append(option.description)
        parts.append(constants.TITLE_SUFFIX)
        return constants.TITLE_SEPARATOR.join(parts)

    def code_fragment(self: Self, language: Language, config: FilterConfig, option: OptionEntry | None = None) -> str:
        """Render the current filter call in ``language``."""
        return render(language, self.kind, config, option)
