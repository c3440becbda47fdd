"""Alternating disks — sort a row of two-coloured disks with adjacent swaps.

Re-exports public symbols so callers can write::

    from alternating_disks import DiskRow, sort_lawnmower, sort_left_to_right
"""

from alternating_disks.analysis import (
    ComparisonConfig,
    ComparisonRow,
    compare_sorters,
    expected_swap_count,
    format_comparison,
)
from alternating_disks.disks import DiskColor, DiskRow, PreconditionError
from alternating_disks.result import SortResult
from alternating_disks.sorters import (
    SORT_POLICIES,
    LawnmowerPolicy,
    LeftToRightPolicy,
    SortPolicy,
    SweepWindow,
    sort_lawnmower,
    sort_left_to_right,
)
from alternating_disks.trace import SortTrace, Sweep, TraceEntry, TraceLevel

__all__ = [
    "SORT_POLICIES",
    "ComparisonConfig",
    "ComparisonRow",
    "DiskColor",
    "DiskRow",
    "LawnmowerPolicy",
    "LeftToRightPolicy",
    "PreconditionError",
    "SortPolicy",
    "SortResult",
    "SortTrace",
    "Sweep",
    "SweepWindow",
    "TraceEntry",
    "TraceLevel",
    "compare_sorters",
    "expected_swap_count",
    "format_comparison",
    "sort_lawnmower",
    "sort_left_to_right",
]
