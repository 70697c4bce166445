"""Synthetic reference trace and delta against it.

The reference is the lap compared with a smoothed copy of itself: speed is a
moving average over a small sample window, RPM is a flat discount of the
current value. It is not a second recorded lap.
"""

from __future__ import annotations

from collections.abc import Sequence

from lapviz.exceptions import EmptyTraceError
from lapviz.models.telemetry_point import TelemetryPoint

from .constants import (
    DELTA_PRECISION,
    DELTA_SCALE,
    DELTA_SPEED_DIVISOR,
    REFERENCE_WINDOW,
    RPM_REFERENCE_FACTOR,
)


def reference_window(index: int, length: int, window: int = REFERENCE_WINDOW) -> tuple[int, int]:
    """Return the half-open index range [start, end) averaged for *index*.

    The range is truncated at the sequence boundaries, never padded.
    """
    return max(0, index - window), min(length, index + window)


def reference_speed(
    points: Sequence[TelemetryPoint],
    index: int,
    window: int = REFERENCE_WINDOW,
) -> float:
    """Mean speed over the reference window around *index*."""
    if not points:
        raise EmptyTraceError("Cannot build a reference from an empty trace")
    if not 0 <= index < len(points):
        raise IndexError(f"index {index} out of range for {len(points)} points")
    start, end = reference_window(index, len(points), window)
    # index < end always holds, so the window is never empty
    speeds = [p.speed for p in points[start:end]]
    return sum(speeds) / len(speeds)


def reference_rpm(rpm: float) -> float:
    return rpm * RPM_REFERENCE_FACTOR


def compute_delta(current_speed: float, ref_speed: float) -> float:
    """Scaled per-sample delta; positive means slower than the reference."""
    raw = (current_speed - ref_speed) / DELTA_SPEED_DIVISOR * DELTA_SCALE
    return round(raw, DELTA_PRECISION)
