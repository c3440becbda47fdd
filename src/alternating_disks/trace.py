"""Sort traces — a structured record of how a sorter moved through the row.

Each sorter can be handed a ``SortTrace``.  While it runs, it records:

- one **sweep** entry per pass over the row, carrying the direction,
  the half-open window ``[front, back)`` it covered, and the swaps it
  made there (DEBUG);
- a **warning** when the input row is not in the alternating
  configuration.  The sorters still sort such a row, but the caller
  may have expected the puzzle's starting state (WARNING);
- a **summary** once the row is sorted (INFO).

Entries keep their numbers as typed fields, so tests and the analysis
code query the trace directly rather than parsing messages.  The
message is only for reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class TraceLevel(IntEnum):
    """How interesting an entry is; compares with ``<`` for filtering."""

    DEBUG = 0
    INFO = 1
    WARNING = 2


class Sweep(StrEnum):
    """Direction of a sweep over the row."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class TraceEntry:
    """One recorded event.

    Attributes:
        level: DEBUG for sweeps, WARNING for odd input, INFO for the summary.
        sorter: Name of the sorter that recorded the entry.
        message: Human-readable text.
        sweep: 1-based sweep number (0 for non-sweep entries).
        direction: Sweep direction, or None for non-sweep entries.
        window: The ``(front, back)`` bounds the sweep covered.
        swaps: Swaps made by this sweep, or in total for the summary.

    """

    level: TraceLevel
    sorter: str
    message: str
    sweep: int = 0
    direction: Sweep | None = None
    window: tuple[int, int] | None = None
    swaps: int = 0

    def __str__(self) -> str:
        """Format as ``[LEVEL] sorter: message``."""
        return f"[{self.level.name}] {self.sorter}: {self.message}"


class SortTrace:
    """Append-only record of sorter events, shared by any number of runs."""

    def __init__(self) -> None:
        """Create an empty trace."""
        self._entries: list[TraceEntry] = []

    @property
    def entries(self) -> list[TraceEntry]:
        """Return every entry in the order recorded."""
        return list(self._entries)

    def record_sweep(
        self,
        sorter: str,
        *,
        number: int,
        direction: Sweep,
        window: tuple[int, int],
        swaps: int,
    ) -> None:
        """Record one finished sweep over ``[window[0], window[1])``."""
        front, back = window
        self._entries.append(
            TraceEntry(
                level=TraceLevel.DEBUG,
                sorter=sorter,
                message=f"{direction} sweep over [{front}, {back}): {swaps} swaps",
                sweep=number,
                direction=direction,
                window=window,
                swaps=swaps,
            )
        )

    def warn(self, sorter: str, message: str) -> None:
        """Record something the sorter tolerated but the caller may not expect."""
        self._entries.append(TraceEntry(level=TraceLevel.WARNING, sorter=sorter, message=message))

    def record_summary(self, sorter: str, *, total_disks: int, swaps: int) -> None:
        """Record the end of a run."""
        self._entries.append(
            TraceEntry(
                level=TraceLevel.INFO,
                sorter=sorter,
                message=f"sorted {total_disks} disks with {swaps} swaps",
                swaps=swaps,
            )
        )

    def sweeps(self, sorter: str | None = None) -> list[TraceEntry]:
        """Return the sweep entries, optionally for a single sorter."""
        return [
            e
            for e in self._entries
            if e.direction is not None and (sorter is None or e.sorter == sorter)
        ]

    def at_least(self, level: TraceLevel) -> list[TraceEntry]:
        """Return the entries at *level* or above."""
        return [e for e in self._entries if e.level >= level]

    def swaps_per_sweep(self, sorter: str) -> list[int]:
        """Return how many swaps each sweep of *sorter* made, in order."""
        return [e.swaps for e in self.sweeps(sorter)]

    def clear(self) -> None:
        """Forget every entry."""
        self._entries.clear()
