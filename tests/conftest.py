"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
import math

import pytest

from lapviz.models import TelemetryPoint

BASE_URL = "http://localhost:8000/api/v1/telemetry"


SAMPLE_LAP_SUMMARIES = [
    {
        "lap_number": 1,
        "lap_time": 95.234,
        "max_speed": 228.4,
        "avg_rpm": 5650.0,
        "distance": 4050.0,
        "fuel_used": 1.8,
        "fuel_use_per_hour_avg": 68.0,
    },
    {
        "lap_number": 2,
        "lap_time": 92.45,
        "max_speed": 242.1,
        "avg_rpm": 5950.0,
        "distance": 4050.0,
        "fuel_used": 1.9,
        "fuel_use_per_hour_avg": 74.0,
    },
    {
        "lap_number": 3,
        "lap_time": 93.567,
        "max_speed": 236.0,
        "avg_rpm": 5800.0,
        "distance": 4050.0,
        "fuel_used": 1.85,
        "fuel_use_per_hour_avg": 71.2,
    },
]

SAMPLE_SESSION = {
    "session_id": "abc123",
    "driver": "Lautaro",
    "vehicle": "Formula 2.0 - Renault F4R",
    "track": "Autodromo Oscar y Juan Galvez",
    "date": "2025-03-14T10:30:00",
    "duration_seconds": 1820.5,
    "lap_count": 3,
    "sample_rate_hz": 60.0,
    "laps": SAMPLE_LAP_SUMMARIES,
}

SAMPLE_POINT = {
    "time": 12.5,
    "speed": 187.3,
    "rpm": 6420.0,
    "throttle": 0.92,
    "brake": 0.0,
    "lat": -34.6951,
    "lon": -58.4592,
    "lap_dist": 1012.4,
    "lap_dist_pct": 0.25,
}

SAMPLE_LAP_DETAIL = {
    "lap_number": 2,
    "lap_time": 92.45,
    "points": [
        {**SAMPLE_POINT, "time": 0.0, "lap_dist": 0.0, "lap_dist_pct": 0.0},
        SAMPLE_POINT,
    ],
}

SAMPLE_SESSION_LIST = {
    "sessions": [
        {
            "session_id": "abc123",
            "driver": "Lautaro",
            "vehicle": "Formula 2.0 - Renault F4R",
            "track": "Autodromo Oscar y Juan Galvez",
            "date": "2025-03-14T10:30:00",
            "lap_count": 3,
        },
    ],
}


def _make_point(
    index: int,
    speed: float = 150.0,
    rpm: float = 6000.0,
    throttle: float = 0.5,
    brake: float = 0.0,
    lat: float = 0.0,
    lon: float = 0.0,
    lap_dist: float | None = None,
    total: int = 100,
) -> TelemetryPoint:
    return TelemetryPoint(
        time=index * 0.1,
        speed=speed,
        rpm=rpm,
        throttle=throttle,
        brake=brake,
        lat=lat,
        lon=lon,
        lap_dist=float(index) if lap_dist is None else lap_dist,
        lap_dist_pct=index / max(total - 1, 1),
    )


def _make_trace(
    n: int,
    gps: bool = False,
    speed_fn=None,
) -> tuple[TelemetryPoint, ...]:
    """*n* points over 0..n metres; GPS (optional) runs diagonally across a 0.01 degree box."""
    points = []
    for i in range(n):
        frac = i / max(n - 1, 1)
        speed = speed_fn(i) if speed_fn is not None else 150.0
        lat = -34.70 + 0.01 * (1 - frac) if gps else 0.0
        lon = -58.46 + 0.01 * frac if gps else 0.0
        points.append(_make_point(i, speed=speed, lat=lat, lon=lon, total=n))
    return tuple(points)


def sinusoidal_speed(n: int):
    """Speed oscillating between 100 and 200 km/h over *n* samples."""
    return lambda i: 150.0 + 50.0 * math.sin(2 * math.pi * 4 * i / n)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Keep tests off real settings and write the call log under tmp_path."""
    import lapviz.api_logging as mod

    for var in ("LAPVIZ_API_URL", "LAPVIZ_TIMEOUT", "LAPVIZ_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)

    named_logger = logging.getLogger("lapviz.api")
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

    monkeypatch.setattr(mod, "_logger", None)
    monkeypatch.setattr(mod, "_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(mod, "_LOG_FILE", str(tmp_path / "api_calls.log"))

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def make_point():
    """Factory fixture for creating telemetry points."""
    return _make_point


@pytest.fixture
def make_trace():
    """Factory fixture for creating synthetic lap traces."""
    return _make_trace
