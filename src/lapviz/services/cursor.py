"""Scrubber cursor to sample index, and per-sector time-loss aggregation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .constants import CURSOR_MAX, DELTA_PRECISION, SECTOR_COUNT


class DeltaSample(Protocol):
    @property
    def delta(self) -> float: ...


@dataclass(frozen=True)
class SectorWindow:
    """Samples of the active sector up to (not including) the cursor.

    ``number`` is the 1-based sector label. The few samples left over when
    the series length is not a multiple of three report as the last sector.
    """

    start: int
    end: int
    number: int

    def __len__(self) -> int:
        return self.end - self.start


def cursor_index(cursor: float, length: int) -> int | None:
    """Map a 0-100 scrubber position onto a series of *length* samples.

    Returns None for an empty series (no lap loaded yet).
    """
    if length <= 0:
        return None
    if math.isnan(cursor):
        cursor = 0.0
    clamped = min(CURSOR_MAX, max(0.0, cursor))
    index = math.floor(clamped / CURSOR_MAX * (length - 1))
    return min(length - 1, max(0, index))


def sector_size(length: int) -> int:
    return length // SECTOR_COUNT


def sector_window(index: int, length: int) -> SectorWindow:
    """Index range [start, end) of the sector containing *index*.

    start = (index // size) * size and end = min(start + size, index), so a
    cursor sitting exactly on a sector boundary yields an empty window.
    Series shorter than SECTOR_COUNT have no sectors and yield an empty
    window at 0.
    """
    size = sector_size(length)
    if size == 0:
        return SectorWindow(start=0, end=0, number=1)
    sector = index // size
    start = sector * size
    end = min(start + size, index)
    return SectorWindow(start=start, end=end, number=min(sector, SECTOR_COUNT - 1) + 1)


def time_lost(series: Sequence[DeltaSample], window: SectorWindow) -> float:
    """Sum of the delta signal over *window*; 0 for an empty window."""
    total = sum((s.delta for s in series[window.start:window.end]), 0.0)
    return round(total, DELTA_PRECISION)
