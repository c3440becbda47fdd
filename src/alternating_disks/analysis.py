"""Comparing the sorters — closed forms and a side-by-side run.

Both sorters perform the same swaps on a given row, because each swap
removes exactly one inversion.  The alternating row of ``2k`` disks has

    1 + 2 + ... + k = k(k + 1) / 2

inversions: the light disk at index ``2j + 1`` has ``j + 1`` dark
disks to its left.  What differs between the sorters is the number of
pairs they inspect and the number of sweeps they take:

    ================  ===============  ==============
    sorter            comparisons      sweeps
    ================  ===============  ==============
    left_to_right     k * k            k
    lawnmower         k * (2k - 1)     2k - 1
    ================  ===============  ==============

``compare_sorters`` runs every configured policy on every configured
row size and records those numbers, so the closed forms can be checked
and the two traversal orders compared.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter

from alternating_disks.disks import DiskRow
from alternating_disks.sorters import SORT_POLICIES

DEFAULT_LIGHT_COUNTS: tuple[int, ...] = (1, 2, 4, 8, 16, 32)


def expected_swap_count(light_count: int) -> int:
    """Return the swaps needed to sort the alternating row of *light_count* light disks."""
    return light_count * (light_count + 1) // 2


def left_to_right_comparisons(light_count: int) -> int:
    """Return the pairs the left-to-right sorter inspects on the alternating row."""
    return light_count * light_count


def lawnmower_comparisons(light_count: int) -> int:
    """Return the pairs the lawnmower sorter inspects on the alternating row."""
    return light_count * (2 * light_count - 1)


@dataclass(frozen=True)
class ComparisonConfig:
    """Which row sizes and which sorters to compare.

    Attributes:
        light_counts: Light disk counts of the alternating rows to sort.
        policies: Names of the sorters to run (keys of ``SORT_POLICIES``).

    """

    light_counts: tuple[int, ...] = DEFAULT_LIGHT_COUNTS
    policies: tuple[str, ...] = tuple(SORT_POLICIES)

    def __post_init__(self) -> None:
        """Reject unknown sorters and non-positive sizes."""
        for name in self.policies:
            if name not in SORT_POLICIES:
                msg = f"Unknown sorter {name!r} (choose from {', '.join(SORT_POLICIES)})"
                raise ValueError(msg)
        for count in self.light_counts:
            if count <= 0:
                msg = f"light counts must be positive, got {count}"
                raise ValueError(msg)


@dataclass(frozen=True)
class ComparisonRow:
    """One sorter run in a comparison."""

    light_count: int
    policy: str
    swaps: int
    comparisons: int
    sweeps: int
    is_sorted: bool
    elapsed: float


def compare_sorters(config: ComparisonConfig | None = None) -> list[ComparisonRow]:
    """Run each configured sorter on each configured alternating row.

    Args:
        config: What to run.  Defaults to ``ComparisonConfig()``.

    Returns:
        One row per (light count, sorter) pair, grouped by light count.

    """
    config = config or ComparisonConfig()
    rows: list[ComparisonRow] = []
    for light_count in config.light_counts:
        before = DiskRow(light_count)
        for name in config.policies:
            started = perf_counter()
            result = SORT_POLICIES[name].sort(before)
            elapsed = perf_counter() - started
            rows.append(
                ComparisonRow(
                    light_count=light_count,
                    policy=name,
                    swaps=result.swap_count(),
                    comparisons=result.comparison_count(),
                    sweeps=result.sweep_count(),
                    is_sorted=result.after().is_sorted(),
                    elapsed=elapsed,
                )
            )
    return rows


def format_comparison(rows: list[ComparisonRow]) -> str:
    """Render comparison rows as a fixed-width text table."""
    lines = ["LIGHT  SORTER          SWAPS  COMPARES  SWEEPS  SORTED  MS"]
    lines.extend(
        f"{r.light_count:<6} {r.policy:<15} {r.swaps:>5}  {r.comparisons:>8}"
        f"  {r.sweeps:>6}  {'yes' if r.is_sorted else 'NO':<6}  {r.elapsed * 1000:.3f}"
        for r in rows
    )
    return "\n".join(lines)
