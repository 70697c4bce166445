"""Speed heatmap of a lap drawn on the track canvas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .constants import HEAT_COLORS
from .pipeline import NormalizedSample
from .projection import (
    ProjectedPosition,
    bounds_of,
    fallback_position,
    has_usable_gps,
    is_valid_fix,
)


@dataclass(frozen=True)
class HeatPoint:
    position: ProjectedPosition
    speed: int
    band: str

    @property
    def color(self) -> str:
        return HEAT_COLORS[self.band]


def speed_band(speed: float, low: float, high: float) -> str:
    """Classify *speed* into thirds of the lap's [low, high] speed range."""
    span = high - low
    if span <= 0:
        return "mid"
    ratio = (speed - low) / span
    if ratio >= 2 / 3:
        return "fast"
    if ratio >= 1 / 3:
        return "mid"
    return "slow"


def build_heatmap(series: Sequence[NormalizedSample]) -> list[HeatPoint]:
    """Place every chart sample on the canvas, tagged with its speed band.

    With usable GPS only samples carrying a fix are placed; otherwise every
    sample is spread along the procedural path by its index.
    """
    if not series:
        return []
    speeds = [s.current_speed for s in series]
    low, high = min(speeds), max(speeds)

    if has_usable_gps(series):
        fixes = [s for s in series if is_valid_fix(s)]
        bounds = bounds_of(fixes)
        placed = [(bounds.project(s.lat, s.lon), s) for s in fixes]
    else:
        last = max(len(series) - 1, 1)
        placed = [(fallback_position(i / last), s) for i, s in enumerate(series)]

    return [
        HeatPoint(position=pos, speed=s.current_speed, band=speed_band(s.current_speed, low, high))
        for pos, s in placed
    ]


def band_counts(points: Sequence[HeatPoint]) -> dict[str, int]:
    """Number of heat points per band, every band present."""
    counts = {band: 0 for band in HEAT_COLORS}
    for p in points:
        counts[p.band] += 1
    return counts
