"""Sort results — the final row plus the cost of reaching it."""

from __future__ import annotations

from dataclasses import dataclass

from alternating_disks.disks import DiskRow, PreconditionError


@dataclass(frozen=True)
class SortResult:
    """The outcome of one sorter run.

    The result keeps its own copy of the final row, and ``after()``
    hands out a fresh copy each time, so nothing a caller does to the
    returned row can change the recorded outcome.  Results hold a mutable
    row, so like ``DiskRow`` they are unhashable.

    Attributes:
        final_row: The row as the sorter left it.
        swaps: Adjacent swaps performed.
        comparisons: Adjacent pairs inspected.
        sweeps: Passes over (a window of) the row.

    """

    final_row: DiskRow
    swaps: int
    comparisons: int = 0
    sweeps: int = 0

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __post_init__(self) -> None:
        """Validate the counters and detach the row from the caller."""
        for name in ("swaps", "comparisons", "sweeps"):
            value = getattr(self, name)
            if value < 0:
                msg = f"{name} must be non-negative, got {value}"
                raise PreconditionError(msg)
        object.__setattr__(self, "final_row", self.final_row.copy())

    def after(self) -> DiskRow:
        """Return a copy of the final row."""
        return self.final_row.copy()

    def swap_count(self) -> int:
        """Return the number of swaps performed."""
        return self.swaps

    def comparison_count(self) -> int:
        """Return the number of adjacent pairs inspected."""
        return self.comparisons

    def sweep_count(self) -> int:
        """Return the number of sweeps performed."""
        return self.sweeps
