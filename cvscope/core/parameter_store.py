"""Trackbar-backed parameter resolution."""

from __future__ import annotations

__all__ = ("ParameterStore",)

import logging
from typing import TYPE_CHECKING

from typing_extensions import Self

if TYPE_CHECKING:
    from cvscope.filters import FilterSpec
    from cvscope.models import FilterConfig

    from .display import Window

logger = logging.getLogger(__name__)


class ParameterStore:
    """Turn live trackbar positions into a validated configuration.

    The store creates the filter's trackbars on construction. Each call to
    :meth:`resolve` runs the filter's correction rule, writes any forced
    position back to its trackbar so the operator sees it, and builds the
    configuration from the corrected positions.
    """

    def __init__(self: Self, spec: FilterSpec, window: Window) -> None:
        """Create one trackbar per filter parameter.

        Args:
            spec: Filter whose parameters and rules apply.
            window: Window that hosts the trackbars.
        """
        self.spec = spec
        self.window = window
        self._previous: dict[str, int] | None = None

        for parameter in spec.parameters:
            window.create_trackbar(parameter.name, parameter.maximum, parameter.initial, parameter.minimum)

    def positions(self: Self) -> dict[str, int]:
        """Return the raw trackbar positions keyed by parameter name."""
        return {parameter.name: self.window.get_pos(parameter.name) for parameter in self.spec.parameters}

    def resolve(self: Self, option_index: int = 0) -> FilterConfig:
        """Validate the current positions and build this iteration's configuration.

        Args:
            option_index: Current index into the filter's option table.

        Returns:
            FilterConfig: Configuration that is valid for the filter.
        """
        raw = self.positions()
        corrected = self.spec.correct(raw, self._previous)
        for name, position in corrected.items():
            if raw[name] != position:
                logger.debug("Forcing trackbar %r from %d to %d.", name, raw[name], position)
                self.window.set_pos(name, position)
        self._previous = corrected
        return self.spec.build_config(corrected, option_index)
