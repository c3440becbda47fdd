"""Disk rows — the board of the alternating disks puzzle.

The puzzle starts with a row of ``2n`` disks whose colours alternate
(dark, light, dark, light, ...).  The goal is to move every light disk
to the left half and every dark disk to the right half.  The only legal
move is to exchange two **adjacent** disks, so a row exposes exactly
that primitive and nothing more powerful.

Key design properties:
    - **Fixed length** — disks are never inserted or removed, only
      swapped in place.  ``total_count()`` never changes.
    - **Balanced colours** — every row holds as many light disks as
      dark ones, so ``light_count() == dark_count()`` always.
    - **Loud preconditions** — an out-of-range index is a programming
      error, not a runtime condition.  It raises ``PreconditionError``
      instead of being clamped or wrapped around like a Python index.

State at a glance (``light_count=3``)::

    alternating:  D L D L D L
    sorted:       L L L D D D
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class PreconditionError(AssertionError):
    """Raise when a caller breaks an operation's precondition.

    Subclassing AssertionError keeps the "this is a bug" meaning of a
    failed assertion, but unlike a bare ``assert`` it still fires when
    Python runs with ``-O``.
    """


class DiskColor(StrEnum):
    """The two disk colours.

    The values double as the one-character symbols used by
    ``DiskRow.to_string()``.
    """

    LIGHT = "L"
    DARK = "D"


class DiskRow:
    """A fixed-length row of light and dark disks.

    Rows are mutable (the sorters swap disks in place) and therefore
    unhashable.  Use ``copy()`` to get an independent row.
    """

    def __init__(self, light_count: int) -> None:
        """Create the alternating row with *light_count* disks of each colour.

        Dark disks sit at even indices and light disks at odd indices.

        Args:
            light_count: Number of light disks (must be positive).

        Raises:
            PreconditionError: If *light_count* is not a positive int.

        """
        if isinstance(light_count, bool) or not isinstance(light_count, int) or light_count <= 0:
            msg = f"light_count must be a positive integer, got {light_count!r}"
            raise PreconditionError(msg)
        self._colors: list[DiskColor] = [
            DiskColor.DARK if i % 2 == 0 else DiskColor.LIGHT for i in range(light_count * 2)
        ]

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor]) -> DiskRow:
        """Build a row from an arbitrary sequence of colours.

        Args:
            colors: The disk colours, left to right.

        Returns:
            A new row holding exactly those colours.

        Raises:
            PreconditionError: If the row is empty, has an odd length,
                holds something other than a ``DiskColor``, or has
                unequal numbers of light and dark disks.

        """
        values = list(colors)
        for value in values:
            if not isinstance(value, DiskColor):
                msg = f"Not a disk colour: {value!r}"
                raise PreconditionError(msg)
        if not values or len(values) % 2 != 0:
            msg = f"A row needs a positive, even number of disks, got {len(values)}"
            raise PreconditionError(msg)
        lights = values.count(DiskColor.LIGHT)
        if lights * 2 != len(values):
            msg = f"A row needs equal light and dark disks, got {lights} light of {len(values)}"
            raise PreconditionError(msg)
        row = cls.__new__(cls)
        row._colors = values
        return row

    @classmethod
    def from_string(cls, text: str) -> DiskRow:
        """Parse the ``to_string()`` format, e.g. ``"D L D L"``.

        Raises:
            PreconditionError: On an unknown symbol or an invalid row.

        """
        colors: list[DiskColor] = []
        for symbol in text.split():
            try:
                colors.append(DiskColor(symbol))
            except ValueError:
                msg = f"Unknown disk symbol {symbol!r} (expected 'L' or 'D')"
                raise PreconditionError(msg) from None
        return cls.from_colors(colors)

    # -- Counts and indices ---------------------------------------------------

    def total_count(self) -> int:
        """Return the number of disks in the row."""
        return len(self._colors)

    def light_count(self) -> int:
        """Return the number of light disks (half the row)."""
        return self.total_count() // 2

    def dark_count(self) -> int:
        """Return the number of dark disks (always equal to light_count)."""
        return self.light_count()

    def is_index(self, index: int) -> bool:
        """Return True if *index* is an int addressing a disk in this row."""
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < self.total_count()

    def _require_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            msg = f"Index must be an int, got {index!r}"
            raise PreconditionError(msg)
        if not self.is_index(index):
            msg = f"Index {index} out of range for a row of {self.total_count()} disks"
            raise PreconditionError(msg)

    def get(self, index: int) -> DiskColor:
        """Return the colour of the disk at *index*.

        Raises:
            PreconditionError: If *index* is not a valid index.

        """
        self._require_index(index)
        return self._colors[index]

    # -- Moves ----------------------------------------------------------------

    def swap(self, left_index: int) -> None:
        """Exchange the disks at *left_index* and *left_index* + 1.

        Raises:
            PreconditionError: If either position is outside the row.

        """
        self._require_index(left_index)
        self._require_index(left_index + 1)
        colors = self._colors
        colors[left_index], colors[left_index + 1] = colors[left_index + 1], colors[left_index]

    def rev_swap(self, right_index: int) -> None:
        """Exchange the disks at *right_index* - 1 and *right_index*.

        The same move as ``swap(right_index - 1)``, addressed from the
        right-hand disk so a backward sweep can use its own index.

        Raises:
            PreconditionError: If either position is outside the row.

        """
        self._require_index(right_index)
        self._require_index(right_index - 1)
        colors = self._colors
        colors[right_index - 1], colors[right_index] = colors[right_index], colors[right_index - 1]

    # -- Predicates -----------------------------------------------------------

    def is_alternating(self) -> bool:
        """Return True if the row reads D, L, D, L, ... from index 0."""
        if self._colors[0] is not DiskColor.DARK:
            return False
        return all(self._colors[i] is not self._colors[i + 1] for i in range(self.total_count() - 1))

    def is_sorted(self) -> bool:
        """Return True if the left half is all light and the right half all dark."""
        half = self.light_count()
        left_ok = all(color is DiskColor.LIGHT for color in self._colors[:half])
        return left_ok and all(color is DiskColor.DARK for color in self._colors[half:])

    def inversion_count(self) -> int:
        """Return the number of (dark, light) pairs with the dark disk on the left.

        Each adjacent swap of an out-of-order pair removes exactly one
        inversion, so this is the number of swaps any correct sorter
        must perform on this row.
        """
        darks_seen = 0
        inversions = 0
        for color in self._colors:
            if color is DiskColor.DARK:
                darks_seen += 1
            else:
                inversions += darks_seen
        return inversions

    # -- Copies and rendering -------------------------------------------------

    def copy(self) -> DiskRow:
        """Return an independent copy of this row."""
        return DiskRow.from_colors(self._colors)

    def colors(self) -> tuple[DiskColor, ...]:
        """Return a snapshot of the colours, left to right."""
        return tuple(self._colors)

    def to_string(self) -> str:
        """Render the row as space-separated symbols, e.g. ``"D L D L"``."""
        return " ".join(color.value for color in self._colors)

    def __len__(self) -> int:
        """Return the number of disks."""
        return self.total_count()

    def __str__(self) -> str:
        """Return the same text as ``to_string()``."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return a debug representation showing the row."""
        return f"DiskRow({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        """Rows are equal when they hold the same colours in the same order."""
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors
