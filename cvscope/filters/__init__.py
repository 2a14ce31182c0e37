"""Filters that can be explored interactively, keyed by :class:`~cvscope.models.FilterKind`."""

from __future__ import annotations

__all__ = (
    "FILTERS",
    "BlurFilter",
    "ErodeFilter",
    "FilterSpec",
    "GaussianBlurFilter",
    "ScharrFilter",
    "get_filter",
)

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from cvscope.models import FilterKind

from .base import FilterSpec
from .blur import BlurFilter
from .erode import ErodeFilter
from .gaussian_blur import GaussianBlurFilter
from .scharr import ScharrFilter

if TYPE_CHECKING:
    from collections.abc import Mapping

FILTERS: Final[Mapping[FilterKind, type[FilterSpec]]] = MappingProxyType(
    {
        FilterKind.BLUR: BlurFilter,
        FilterKind.ERODE: ErodeFilter,
        FilterKind.GAUSSIAN_BLUR: GaussianBlurFilter,
        FilterKind.SCHARR: ScharrFilter,
    }
)


def get_filter(kind: FilterKind | str) -> FilterSpec:
    """Instantiate the filter registered for ``kind``.

    Raises:
        ValueError: If ``kind`` does not name a known filter.
    """
    return FILTERS[FilterKind(kind)]()
