"""Cyclic cursor over a fixed option table."""

from __future__ import annotations

__all__ = ("EnumCycler",)

from typing import TYPE_CHECKING

from typing_extensions import Self

if TYPE_CHECKING:
    from cvscope.models import OptionEntry, OptionTable


class EnumCycler:
    """Page forwards and backwards through an option table, wrapping at both ends."""

    def __init__(self: Self, table: OptionTable, index: int = 0) -> None:
        """Initialise the cursor.

        Args:
            table: Ordered, non-empty option table.
            index: Starting position. Defaults to 0.

        Raises:
            ValueError: If ``table`` is empty.
        """
        if not table:
            msg = "EnumCycler requires at least one option."
            raise ValueError(msg)
        self.table = table
        self._index = index % len(table)

    @property
    def index(self: Self) -> int:
        """Position of the cursor."""
        return self._index

    def next(self: Self) -> int:
        """Advance one entry and return the new index."""
        self._index = (self._index + 1) % len(self.table)
        return self._index

    def prev(self: Self) -> int:
        """Step back one entry and return the new index."""
        self._index = (self._index - 1) % len(self.table)
        return self._index

    def current(self: Self) -> OptionEntry:
        """Return the entry under the cursor."""
        return self.table[self._index]
