"""Trace transformation pipeline — raw lap points to chart-ready records.

raw points -> reference + delta per point -> decimation -> projection,
then a cursor-driven read of the active sample and sector. Every function
here is pure: the same (points, cursor) always yields identical output.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lapviz.api_logging import log_service_call
from lapviz.models.telemetry_point import TelemetryPoint

from .constants import CURSOR_MAX, MAX_CHART_SAMPLES
from .cursor import SectorWindow, cursor_index, sector_window, time_lost
from .decimate import decimate_indices
from .projection import (
    ProjectedPosition,
    has_usable_gps,
    project_path,
    project_position,
    project_sample,
)
from .reference import compute_delta, reference_rpm, reference_speed


@dataclass(frozen=True)
class NormalizedSample:
    """One render-ready chart sample. Pedals are rescaled to 0-100."""

    distance: int
    distance_pct: float
    time: float
    current_speed: int
    current_rpm: int
    throttle: int
    brake: int
    ref_speed: int
    ref_rpm: int
    delta: float
    lat: float
    lon: float


@dataclass(frozen=True)
class CursorReadout:
    """Live values under the scrubber."""

    index: int
    sample: NormalizedSample
    sector: SectorWindow
    time_lost: float
    position: ProjectedPosition


@dataclass(frozen=True)
class LapAnalysis:
    series: tuple[NormalizedSample, ...]
    track_path: tuple[ProjectedPosition, ...]
    car_position: ProjectedPosition
    readout: CursorReadout | None
    max_distance: int
    uses_gps: bool

    @property
    def time_lost(self) -> float:
        """Time lost in the active sector, 0 when no lap is loaded."""
        return self.readout.time_lost if self.readout is not None else 0.0

    @property
    def is_empty(self) -> bool:
        return not self.series


def normalize_point(points: Sequence[TelemetryPoint], index: int) -> NormalizedSample:
    """Chart sample for ``points[index]`` against its synthetic reference."""
    point = points[index]
    ref = reference_speed(points, index)
    return NormalizedSample(
        distance=round(point.lap_dist),
        distance_pct=point.lap_dist_pct,
        time=point.time,
        current_speed=max(0, round(point.speed)),
        current_rpm=max(0, round(point.rpm)),
        throttle=round(point.throttle * 100),
        brake=round(point.brake * 100),
        ref_speed=max(0, round(ref)),
        ref_rpm=max(0, round(reference_rpm(point.rpm))),
        delta=compute_delta(point.speed, ref),
        lat=point.lat,
        lon=point.lon,
    )


def build_chart_series(
    points: Sequence[TelemetryPoint],
    cap: int = MAX_CHART_SAMPLES,
) -> tuple[NormalizedSample, ...]:
    """Normalize and decimate a lap trace; empty input gives an empty series.

    The reference window is evaluated over the full-resolution trace and
    only the retained indices are materialized.
    """
    if not points:
        return ()
    return tuple(normalize_point(points, i) for i in decimate_indices(len(points), cap))


def max_distance(series: Sequence[NormalizedSample]) -> int:
    return max((s.distance for s in series), default=0)


def read_cursor(series: Sequence[NormalizedSample], cursor: float) -> CursorReadout | None:
    """Sample, sector and time lost under the scrubber, or None if empty."""
    index = cursor_index(cursor, len(series))
    if index is None:
        return None
    window = sector_window(index, len(series))
    return CursorReadout(
        index=index,
        sample=series[index],
        sector=window,
        time_lost=time_lost(series, window),
        position=project_sample(series, index, cursor / CURSOR_MAX),
    )


def analyze_series(series: tuple[NormalizedSample, ...], cursor: float) -> LapAnalysis:
    """Cursor-dependent half of the pipeline over an already built series."""
    readout = read_cursor(series, cursor)
    return LapAnalysis(
        series=series,
        track_path=tuple(project_path(series)),
        car_position=(
            readout.position if readout is not None
            else project_position(series, cursor / CURSOR_MAX)
        ),
        readout=readout,
        max_distance=max_distance(series),
        uses_gps=has_usable_gps(series),
    )


def analyze_lap(points: Sequence[TelemetryPoint], cursor: float) -> LapAnalysis:
    """Full pipeline: raw lap points and scrubber position to chart records."""
    return analyze_series(build_chart_series(points), cursor)


class LapTraceService:
    """Pipeline front-end that reuses the chart series while the lap is unchanged.

    Scrubbing only re-runs the cursor read; a new points sequence (by
    identity) rebuilds the series.
    """

    def __init__(self, cap: int = MAX_CHART_SAMPLES) -> None:
        self._cap = cap
        self._points: Sequence[TelemetryPoint] | None = None
        self._series: tuple[NormalizedSample, ...] = ()

    def chart_series(self, points: Sequence[TelemetryPoint]) -> tuple[NormalizedSample, ...]:
        if points is not self._points:
            self._series = self._rebuild(points)
            self._points = points
        return self._series

    @log_service_call
    def _rebuild(self, points: Sequence[TelemetryPoint]) -> tuple[NormalizedSample, ...]:
        return build_chart_series(points, self._cap)

    def analyze(self, points: Sequence[TelemetryPoint], cursor: float) -> LapAnalysis:
        return analyze_series(self.chart_series(points), cursor)

    def reset(self) -> None:
        self._points = None
        self._series = ()
