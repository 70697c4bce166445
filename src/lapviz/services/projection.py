"""Geo-to-plane projection of GPS samples onto the track canvas.

Coordinates are normalized linearly between the lap's min/max latitude and
longitude and scaled into a fixed 300x200 region offset by a 50-unit margin
of a 400x300 canvas. Latitude is inverted so north is up. Laps with fewer
than MIN_VALID_FIXES usable samples fall back to a decorative procedural
figure-eight parameterized only by lap progress.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

from .constants import (
    CANVAS_MARGIN,
    FALLBACK_CENTER_X,
    FALLBACK_CENTER_Y,
    FALLBACK_HARMONIC_X,
    FALLBACK_HARMONIC_Y,
    FALLBACK_PATH_SAMPLES,
    FALLBACK_RADIUS_X,
    FALLBACK_RADIUS_Y,
    MIN_VALID_FIXES,
    TRACK_SPAN_X,
    TRACK_SPAN_Y,
)


class GeoSample(Protocol):
    @property
    def lat(self) -> float: ...

    @property
    def lon(self) -> float: ...


S = TypeVar("S", bound=GeoSample)


@dataclass(frozen=True)
class ProjectedPosition:
    x: float
    y: float


@dataclass(frozen=True)
class TrackBounds:
    """Lat/lon extent of the valid fixes of one lap."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def lat_span(self) -> float:
        """Latitude range, guarded to 1 when degenerate."""
        return (self.max_lat - self.min_lat) or 1.0

    @property
    def lon_span(self) -> float:
        """Longitude range, guarded to 1 when degenerate."""
        return (self.max_lon - self.min_lon) or 1.0

    def project(self, lat: float, lon: float) -> ProjectedPosition:
        x = CANVAS_MARGIN + (lon - self.min_lon) / self.lon_span * TRACK_SPAN_X
        y = CANVAS_MARGIN + (self.max_lat - lat) / self.lat_span * TRACK_SPAN_Y
        return ProjectedPosition(x=x, y=y)


def _clamp_progress(progress: float) -> float:
    if math.isnan(progress):
        return 0.0
    return min(1.0, max(0.0, progress))


def is_valid_fix(sample: GeoSample) -> bool:
    """A fix is usable when both latitude and longitude are non-zero."""
    return sample.lat != 0 and sample.lon != 0


def valid_fixes(samples: Sequence[S]) -> list[S]:
    return [s for s in samples if is_valid_fix(s)]


def has_usable_gps(samples: Sequence[GeoSample]) -> bool:
    return len(valid_fixes(samples)) >= MIN_VALID_FIXES


def fallback_position(progress: float) -> ProjectedPosition:
    """Point on the procedural figure-eight at lap *progress* in [0, 1]."""
    angle = 2 * math.pi * _clamp_progress(progress)
    x = (
        FALLBACK_CENTER_X
        + math.sin(angle) * FALLBACK_RADIUS_X
        + math.sin(2 * angle) * FALLBACK_HARMONIC_X
    )
    y = (
        FALLBACK_CENTER_Y
        + math.cos(angle) * FALLBACK_RADIUS_Y
        - math.cos(2 * angle) * FALLBACK_HARMONIC_Y
    )
    return ProjectedPosition(x=x, y=y)


def fallback_path(samples: int = FALLBACK_PATH_SAMPLES) -> list[ProjectedPosition]:
    """The full procedural figure-eight, closed (first and last points coincide)."""
    if samples < 2:
        return [fallback_position(0.0)]
    return [fallback_position(i / (samples - 1)) for i in range(samples)]


def bounds_of(fixes: Sequence[GeoSample]) -> TrackBounds:
    """Extent of *fixes*, which must be non-empty."""
    lats = [s.lat for s in fixes]
    lons = [s.lon for s in fixes]
    return TrackBounds(
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
    )


def track_bounds(samples: Sequence[GeoSample]) -> TrackBounds | None:
    """Min/max extent of the valid fixes, or None when GPS is unusable."""
    fixes = valid_fixes(samples)
    if len(fixes) < MIN_VALID_FIXES:
        return None
    return bounds_of(fixes)


def project_position(samples: Sequence[GeoSample], progress: float) -> ProjectedPosition:
    """Canvas position of the car at lap *progress* in [0, 1].

    Progress indexes the valid fixes (floor(p * (n - 1))), so samples without
    a fix are never drawn at the canvas origin.
    """
    fixes = valid_fixes(samples)
    if len(fixes) < MIN_VALID_FIXES:
        return fallback_position(progress)
    bounds = bounds_of(fixes)
    target = fixes[math.floor(_clamp_progress(progress) * (len(fixes) - 1))]
    return bounds.project(target.lat, target.lon)


def project_path(samples: Sequence[GeoSample]) -> list[ProjectedPosition]:
    """Canvas trajectory of every valid fix, in recorded order."""
    fixes = valid_fixes(samples)
    if len(fixes) < MIN_VALID_FIXES:
        return fallback_path()
    bounds = bounds_of(fixes)
    return [bounds.project(s.lat, s.lon) for s in fixes]


def project_sample(
    samples: Sequence[GeoSample],
    index: int,
    progress: float,
) -> ProjectedPosition:
    """Canvas position of ``samples[index]``.

    A sample without a fix is drawn at the nearest earlier fix, or at the
    first fix when none precedes it. Laps without usable GPS place the car
    on the fallback curve at *progress*.
    """
    bounds = track_bounds(samples)
    if bounds is None:
        return fallback_position(progress)
    for candidate in reversed(samples[: index + 1]):
        if is_valid_fix(candidate):
            return bounds.project(candidate.lat, candidate.lon)
    first = next(s for s in samples if is_valid_fix(s))
    return bounds.project(first.lat, first.lon)
