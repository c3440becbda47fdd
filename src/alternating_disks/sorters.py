"""Sorting strategies for the alternating disks puzzle.

Both sorters use nothing but adjacent swaps, and both only swap a pair
that is out of order (a dark disk directly left of a light one).  They
differ in the *order* in which they visit pairs:

    - ``LeftToRightPolicy`` — repeated left-to-right passes.  Each pass
      carries a dark disk to the end of the unsettled region, so the
      right boundary shrinks by one per pass.  Passes also skip the
      run of light disks already settled on the left.
    - ``LawnmowerPolicy`` — sweep right, then sweep left, like mowing a
      lawn in strips.  A forward sweep settles a dark disk at the back
      of the window, a backward sweep settles a light disk at the
      front, and the window shrinks from both ends.

Because each swap fixes exactly one inversion, both sorters perform
the same number of swaps on the same row.  They differ in how many
pairs they inspect and how many sweeps they need.

All policies implement the ``SortPolicy`` protocol — the Strategy
pattern.  Policies copy the row on entry, so the caller's row is
never changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from alternating_disks.disks import DiskColor, PreconditionError
from alternating_disks.result import SortResult
from alternating_disks.trace import Sweep

if TYPE_CHECKING:
    from alternating_disks.disks import DiskRow
    from alternating_disks.trace import SortTrace


class SortPolicy(Protocol):
    """Protocol for disk sorting strategies (Strategy pattern)."""

    name: str

    def sort(self, row: DiskRow, *, trace: SortTrace | None = None) -> SortResult:
        """Sort a copy of *row* and report the cost.

        Args:
            row: The row to sort (left untouched).
            trace: Optional trace that receives one entry per sweep.

        Returns:
            The sorted row together with its swap count.

        """
        ...


def _out_of_order(row: DiskRow, left_index: int) -> bool:
    """Return True if the pair starting at *left_index* is dark-then-light."""
    return row.get(left_index) is DiskColor.DARK and row.get(left_index + 1) is DiskColor.LIGHT


def _check_start(name: str, row: DiskRow, trace: SortTrace | None) -> None:
    """Warn in *trace* when *row* is not the puzzle's alternating start."""
    if trace is not None and not row.is_alternating():
        trace.warn(name, f"input row {row} is not alternating")


class LeftToRightPolicy:
    """Repeated left-to-right passes (bubble-style).

    The policy runs ``light_count()`` passes.  Pass ``p`` scans pairs
    from the end of the settled light prefix up to index ``N - 2 - p``,
    swapping every dark-light pair it finds.  On the alternating row the
    light prefix after ``p`` passes is exactly ``p`` disks long, so the
    passes inspect ``k * k`` pairs in total for ``k`` light disks.
    """

    name = "left_to_right"

    def sort(self, row: DiskRow, *, trace: SortTrace | None = None) -> SortResult:
        """Sort a copy of *row* with left-to-right passes."""
        _check_start(self.name, row, trace)
        work = row.copy()
        total = work.total_count()
        swaps = 0
        comparisons = 0
        start = 0
        for pass_number in range(work.light_count()):
            last = total - 2 - pass_number
            # Light disks at the front never move again.
            while start <= last and work.get(start) is DiskColor.LIGHT:
                start += 1
            pass_swaps = 0
            for i in range(start, last + 1):
                comparisons += 1
                if _out_of_order(work, i):
                    work.swap(i)
                    pass_swaps += 1
            swaps += pass_swaps
            if trace is not None:
                trace.record_sweep(
                    self.name,
                    number=pass_number + 1,
                    direction=Sweep.FORWARD,
                    window=(start, last + 2),
                    swaps=pass_swaps,
                )
        if trace is not None:
            trace.record_summary(self.name, total_disks=total, swaps=swaps)
        return SortResult(work, swaps=swaps, comparisons=comparisons, sweeps=work.light_count())


@dataclass
class SweepWindow:
    """The unsettled part of the row, ``[front, back)``, plus the next sweep.

    State machine::

        FORWARD --(back -= 1)--> BACKWARD --(front += 1)--> FORWARD

    The machine halts once the window holds at most one disk.
    """

    front: int
    back: int
    direction: Sweep = Sweep.FORWARD

    @property
    def is_done(self) -> bool:
        """Return True once nothing is left to sort."""
        return self.back - self.front <= 1

    def contains(self, index: int) -> bool:
        """Return True if *index* lies inside the window."""
        return self.front <= index < self.back

    def indices(self) -> range:
        """Return the swap indices of the next sweep, in visiting order.

        Forward sweeps yield left indices for ``swap``; backward sweeps
        yield right indices for ``rev_swap``.
        """
        if self.direction is Sweep.FORWARD:
            return range(self.front, self.back - 1)
        return range(self.back - 1, self.front, -1)

    def advance(self) -> None:
        """Shrink the window behind the sweep just run and flip direction."""
        if self.direction is Sweep.FORWARD:
            self.back -= 1
            self.direction = Sweep.BACKWARD
        else:
            self.front += 1
            self.direction = Sweep.FORWARD


class LawnmowerPolicy:
    """Alternate forward and backward sweeps over a shrinking window."""

    name = "lawnmower"

    def sort(self, row: DiskRow, *, trace: SortTrace | None = None) -> SortResult:
        """Sort a copy of *row* with lawnmower sweeps."""
        _check_start(self.name, row, trace)
        work = row.copy()
        window = SweepWindow(front=0, back=work.total_count())
        swaps = 0
        comparisons = 0
        sweeps = 0
        while not window.is_done:
            sweeps += 1
            sweep_swaps = 0
            for i in window.indices():
                comparisons += 1
                if self._step(work, window, i):
                    sweep_swaps += 1
            swaps += sweep_swaps
            if trace is not None:
                trace.record_sweep(
                    self.name,
                    number=sweeps,
                    direction=window.direction,
                    window=(window.front, window.back),
                    swaps=sweep_swaps,
                )
            window.advance()
        if trace is not None:
            trace.record_summary(self.name, total_disks=work.total_count(), swaps=swaps)
        return SortResult(work, swaps=swaps, comparisons=comparisons, sweeps=sweeps)

    @staticmethod
    def _step(row: DiskRow, window: SweepWindow, index: int) -> bool:
        """Swap the pair at *index* if it is out of order; return True if swapped."""
        forward = window.direction is Sweep.FORWARD
        left = index if forward else index - 1
        if not (window.contains(left) and window.contains(left + 1)):
            msg = (
                f"{window.direction} sweep index {index} leaves window "
                f"[{window.front}, {window.back})"
            )
            raise PreconditionError(msg)
        if not _out_of_order(row, left):
            return False
        if forward:
            row.swap(index)
        else:
            row.rev_swap(index)
        return True


SORT_POLICIES: dict[str, SortPolicy] = {
    LeftToRightPolicy.name: LeftToRightPolicy(),
    LawnmowerPolicy.name: LawnmowerPolicy(),
}


def sort_left_to_right(row: DiskRow, *, trace: SortTrace | None = None) -> SortResult:
    """Sort a copy of *row* with the left-to-right algorithm."""
    return SORT_POLICIES[LeftToRightPolicy.name].sort(row, trace=trace)


def sort_lawnmower(row: DiskRow, *, trace: SortTrace | None = None) -> SortResult:
    """Sort a copy of *row* with the lawnmower algorithm."""
    return SORT_POLICIES[LawnmowerPolicy.name].sort(row, trace=trace)
