"""Tests for the left-to-right and lawnmower sorters.

Both sorters move disks only with adjacent swaps and only swap a dark
disk that sits directly left of a light one.  Each such swap removes
one inversion, so both sorters perform the same number of swaps on the
same row: ``k(k + 1) / 2`` for the alternating row of ``2k`` disks.
They differ in how many pairs they inspect and how many sweeps they
take.
"""

from collections.abc import Callable
from itertools import combinations

import pytest

from alternating_disks.disks import DiskColor, DiskRow, PreconditionError
from alternating_disks.result import SortResult
from alternating_disks.sorters import (
    SORT_POLICIES,
    LawnmowerPolicy,
    LeftToRightPolicy,
    SweepWindow,
    sort_lawnmower,
    sort_left_to_right,
)
from alternating_disks.trace import SortTrace, Sweep, TraceLevel

_Sorter = Callable[[DiskRow], SortResult]

_SORTERS: list[_Sorter] = [sort_left_to_right, sort_lawnmower]
_LIGHT_COUNTS = [1, 2, 3, 4, 5, 8, 13]


def _balanced_rows(light_count: int) -> list[DiskRow]:
    """Return every row with *light_count* disks of each colour."""
    total = 2 * light_count
    rows: list[DiskRow] = []
    for lights in combinations(range(total), light_count):
        colors = [DiskColor.LIGHT if i in lights else DiskColor.DARK for i in range(total)]
        rows.append(DiskRow.from_colors(colors))
    return rows


# -- Concrete scenarios -------------------------------------------------------


class TestScenarios:
    """Worked examples for small rows."""

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_one_light_disk(self, sorter: _Sorter) -> None:
        """D L becomes L D with a single swap."""
        result = sorter(DiskRow(1))
        assert result.after().to_string() == "L D"
        assert result.swap_count() == 1

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_two_light_disks(self, sorter: _Sorter) -> None:
        """D L D L becomes L L D D with three swaps."""
        result = sorter(DiskRow(2))
        expected_swaps = 3
        assert result.after().to_string() == "L L D D"
        assert result.swap_count() == expected_swaps

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_four_light_disks(self, sorter: _Sorter) -> None:
        """Eight alternating disks sort with ten swaps."""
        result = sorter(DiskRow(4))
        expected_swaps = 10
        assert result.after().to_string() == "L L L L D D D D"
        assert result.swap_count() == expected_swaps


# -- Properties shared by both sorters ----------------------------------------


class TestSharedProperties:
    """Properties every sorter must satisfy."""

    @pytest.mark.parametrize("sorter", _SORTERS)
    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_alternating_rows_end_sorted(self, sorter: _Sorter, light_count: int) -> None:
        """Every alternating row ends in the sorted configuration."""
        assert sorter(DiskRow(light_count)).after().is_sorted()

    @pytest.mark.parametrize("sorter", _SORTERS)
    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_swaps_equal_inversions(self, sorter: _Sorter, light_count: int) -> None:
        """On the alternating row the swap count is k(k + 1) / 2."""
        expected = light_count * (light_count + 1) // 2
        assert sorter(DiskRow(light_count)).swap_count() == expected

    @pytest.mark.parametrize("sorter", _SORTERS)
    def test_input_row_is_not_modified(self, sorter: _Sorter) -> None:
        """Sorters work on a copy; the caller's row stays alternating."""
        row = DiskRow(4)
        sorter(row)
        assert row == DiskRow(4)
        assert row.is_alternating()

    @pytest.mark.parametrize("sorter", _SORTERS)
    @pytest.mark.parametrize("light_count", [1, 2, 5])
    def test_sorted_input_needs_no_swaps(self, sorter: _Sorter, light_count: int) -> None:
        """Sorting an already sorted row is a no-op."""
        already = sorter(DiskRow(light_count)).after()
        again = sorter(already)
        assert again.swap_count() == 0
        assert again.after() == already

    @pytest.mark.parametrize("sorter", _SORTERS)
    @pytest.mark.parametrize("light_count", [1, 2, 3, 4])
    def test_every_balanced_row_sorts(self, sorter: _Sorter, light_count: int) -> None:
        """Sorters handle any balanced row, not only the alternating one."""
        for row in _balanced_rows(light_count):
            result = sorter(row)
            assert result.after().is_sorted(), row
            assert result.swap_count() == row.inversion_count(), row

    def test_fully_reversed_row(self) -> None:
        """D D D L L L needs k * k swaps from either sorter."""
        row = DiskRow.from_string("D D D L L L")
        expected_swaps = 9
        assert sort_left_to_right(row).swap_count() == expected_swaps
        assert sort_lawnmower(row).swap_count() == expected_swaps


class TestSorterEquivalence:
    """Both sorters agree on the outcome but not on the route."""

    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_same_final_row(self, light_count: int) -> None:
        """Both sorters produce identical sorted rows."""
        left = sort_left_to_right(DiskRow(light_count))
        mower = sort_lawnmower(DiskRow(light_count))
        assert left.after() == mower.after()

    @pytest.mark.parametrize("light_count", [2, 3, 4, 8])
    def test_traversals_differ(self, light_count: int) -> None:
        """The lawnmower inspects more pairs but settles both ends each round."""
        left = sort_left_to_right(DiskRow(light_count))
        mower = sort_lawnmower(DiskRow(light_count))
        assert left.swap_count() == mower.swap_count()
        assert left.comparison_count() < mower.comparison_count()
        assert left.sweep_count() < mower.sweep_count()

    def test_nearly_sorted_row(self) -> None:
        """A lone light disk at the far right costs both sorters the same swaps."""
        row = DiskRow.from_string("L L L D D D D L")
        left = sort_left_to_right(row)
        mower = sort_lawnmower(row)
        assert left.after() == mower.after()
        assert left.swap_count() == mower.swap_count() == row.inversion_count()


# -- Left-to-right ------------------------------------------------------------


class TestLeftToRight:
    """Verify the left-to-right pass structure."""

    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_comparisons_are_k_squared(self, light_count: int) -> None:
        """Pass p inspects 2k - 1 - 2p pairs, k * k in total."""
        result = sort_left_to_right(DiskRow(light_count))
        assert result.comparison_count() == light_count * light_count

    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_one_pass_per_light_disk(self, light_count: int) -> None:
        """The sorter runs exactly light_count() passes."""
        assert sort_left_to_right(DiskRow(light_count)).sweep_count() == light_count

    def test_pass_trace(self) -> None:
        """Each pass is a forward sweep whose window shrinks from both ends."""
        trace = SortTrace()
        sort_left_to_right(DiskRow(2), trace=trace)
        sweeps = trace.sweeps("left_to_right")
        assert [e.window for e in sweeps] == [(0, 4), (1, 3)]
        assert [e.direction for e in sweeps] == [Sweep.FORWARD, Sweep.FORWARD]
        assert trace.swaps_per_sweep("left_to_right") == [2, 1]


# -- Lawnmower ----------------------------------------------------------------


class TestLawnmower:
    """Verify the lawnmower sweeps and their window bookkeeping."""

    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_comparisons(self, light_count: int) -> None:
        """Windows of size 2k, 2k - 1, ..., 2 inspect k(2k - 1) pairs."""
        result = sort_lawnmower(DiskRow(light_count))
        assert result.comparison_count() == light_count * (2 * light_count - 1)

    @pytest.mark.parametrize("light_count", _LIGHT_COUNTS)
    def test_sweep_count(self, light_count: int) -> None:
        """The window shrinks by one per sweep until one disk remains."""
        assert sort_lawnmower(DiskRow(light_count)).sweep_count() == 2 * light_count - 1

    def test_sweep_trace(self) -> None:
        """Sweeps alternate direction over a shrinking window."""
        trace = SortTrace()
        sort_lawnmower(DiskRow(2), trace=trace)
        sweeps = trace.sweeps("lawnmower")
        assert [(e.direction, e.window, e.swaps) for e in sweeps] == [
            (Sweep.FORWARD, (0, 4), 2),
            (Sweep.BACKWARD, (0, 3), 1),
            (Sweep.FORWARD, (1, 3), 0),
        ]
        assert [e.sweep for e in sweeps] == [1, 2, 3]

    def test_step_outside_window_rejected(self) -> None:
        """A backward step at the window's front edge would leave the window."""
        row = DiskRow(2)
        window = SweepWindow(front=1, back=3, direction=Sweep.BACKWARD)
        with pytest.raises(PreconditionError, match="leaves window"):
            LawnmowerPolicy._step(row, window, 1)
        assert row == DiskRow(2)


class TestSweepWindow:
    """Verify the lawnmower's window state machine."""

    def test_forward_indices(self) -> None:
        """Forward sweeps visit left indices front .. back - 2."""
        window = SweepWindow(front=0, back=4)
        assert list(window.indices()) == [0, 1, 2]

    def test_backward_indices(self) -> None:
        """Backward sweeps visit right indices back - 1 down to front + 1."""
        window = SweepWindow(front=0, back=3, direction=Sweep.BACKWARD)
        assert list(window.indices()) == [2, 1]

    def test_advance_alternates_and_shrinks(self) -> None:
        """Forward shrinks the back, backward shrinks the front."""
        window = SweepWindow(front=0, back=4)
        window.advance()
        assert (window.front, window.back, window.direction) == (0, 3, Sweep.BACKWARD)
        window.advance()
        assert (window.front, window.back, window.direction) == (1, 3, Sweep.FORWARD)

    def test_done_at_one_disk(self) -> None:
        """A window of one disk needs no more sweeps."""
        assert SweepWindow(front=2, back=3).is_done
        assert not SweepWindow(front=2, back=4).is_done

    def test_contains(self) -> None:
        """The window is half-open."""
        window = SweepWindow(front=1, back=3)
        assert [i for i in range(5) if window.contains(i)] == [1, 2]


class TestPolicies:
    """Verify the policy registry (Strategy pattern)."""

    def test_registry_names(self) -> None:
        """Both sorters are registered under their names."""
        assert set(SORT_POLICIES) == {"left_to_right", "lawnmower"}
        assert isinstance(SORT_POLICIES["left_to_right"], LeftToRightPolicy)
        assert isinstance(SORT_POLICIES["lawnmower"], LawnmowerPolicy)

    def test_policies_match_functions(self) -> None:
        """The function API and the policy objects give the same result."""
        row = DiskRow(5)
        assert LeftToRightPolicy().sort(row) == sort_left_to_right(row)
        assert LawnmowerPolicy().sort(row) == sort_lawnmower(row)

    def test_shared_trace_separates_sorters(self) -> None:
        """Each sorter records under its own name, ending with one INFO summary."""
        trace = SortTrace()
        sort_left_to_right(DiskRow(3), trace=trace)
        sort_lawnmower(DiskRow(3), trace=trace)
        summaries = trace.at_least(TraceLevel.INFO)
        assert [(e.sorter, e.swaps) for e in summaries] == [
            ("left_to_right", 6),
            ("lawnmower", 6),
        ]

    @pytest.mark.parametrize("name", list(SORT_POLICIES))
    def test_non_alternating_input_warns(self, name: str) -> None:
        """A row other than the alternating start is sorted, with a warning."""
        trace = SortTrace()
        result = SORT_POLICIES[name].sort(DiskRow.from_string("D D L L"), trace=trace)
        assert result.after().is_sorted()
        warnings = [e for e in trace.entries if e.level is TraceLevel.WARNING]
        assert [str(e) for e in warnings] == [
            f"[WARNING] {name}: input row D D L L is not alternating",
        ]

    @pytest.mark.parametrize("name", list(SORT_POLICIES))
    def test_alternating_input_does_not_warn(self, name: str) -> None:
        """The puzzle's starting row is sorted without warnings."""
        trace = SortTrace()
        SORT_POLICIES[name].sort(DiskRow(4), trace=trace)
        assert trace.at_least(TraceLevel.WARNING) == []
