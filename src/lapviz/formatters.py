"""Formatting helpers for lap and session readouts."""

from __future__ import annotations


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as m:ss.fff or '—' if None."""
    if seconds is None:
        return "—"
    mins, millis = divmod(round(seconds * 1000), 60_000)
    return f"{mins}:{millis / 1000:06.3f}"


def format_duration(seconds: float | None) -> str:
    """Format a duration as '1h 2m 3s', '2m 3s' or '3s'."""
    if seconds is None:
        return "—"
    total = int(seconds)
    hours, rem = divmod(total, 3600)
    mins, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}h {mins}m {secs}s"
    if mins > 0:
        return f"{mins}m {secs}s"
    return f"{secs}s"


def format_distance(meters: float | None) -> str:
    """Format meters as kilometres with one decimal."""
    if meters is None:
        return "—"
    return f"{meters / 1000:.1f} km"


def format_speed(speed: float | None) -> str:
    if speed is None:
        return "—"
    return f"{round(speed)}"


def format_rpm(rpm: float | None) -> str:
    """Format RPM with thousands separators."""
    if rpm is None:
        return "—"
    return f"{round(rpm):,}"


def format_delta(delta: float | None) -> str:
    """Format a time delta as +s.fff / -s.fff; positive means time lost."""
    if delta is None:
        return "—"
    if abs(delta) < 0.0005:
        return "0.000s"
    sign = "+" if delta > 0 else ""
    return f"{sign}{delta:.3f}s"
