"""Service layer — trace analysis and session figures."""

from .cursor import SectorWindow, cursor_index, sector_window, time_lost
from .decimate import decimate, decimate_indices, decimation_stride
from .heatmap import HeatPoint, band_counts, build_heatmap, speed_band
from .lap_view import AsyncLapViewController, LapViewController, LapViewState
from .pipeline import (
    CursorReadout,
    LapAnalysis,
    LapTraceService,
    NormalizedSample,
    analyze_lap,
    analyze_series,
    build_chart_series,
    read_cursor,
)
from .projection import (
    ProjectedPosition,
    TrackBounds,
    fallback_path,
    fallback_position,
    project_path,
    project_position,
    project_sample,
    track_bounds,
)
from .reference import compute_delta, reference_rpm, reference_speed
from .session_summary import LapRow, SessionSummary, SessionSummaryService

__all__ = [
    "AsyncLapViewController",
    "CursorReadout",
    "HeatPoint",
    "LapAnalysis",
    "LapRow",
    "LapTraceService",
    "LapViewController",
    "LapViewState",
    "NormalizedSample",
    "ProjectedPosition",
    "SectorWindow",
    "SessionSummary",
    "SessionSummaryService",
    "TrackBounds",
    "analyze_lap",
    "analyze_series",
    "band_counts",
    "build_chart_series",
    "build_heatmap",
    "compute_delta",
    "cursor_index",
    "decimate",
    "decimate_indices",
    "decimation_stride",
    "fallback_path",
    "fallback_position",
    "project_path",
    "project_position",
    "project_sample",
    "read_cursor",
    "reference_rpm",
    "reference_speed",
    "sector_window",
    "speed_band",
    "time_lost",
    "track_bounds",
]
