"""Per-sample telemetry point model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TelemetryPoint(BaseModel):
    """One recorded sample within a lap.

    ``lat``/``lon`` of 0 mean the logger had no GPS fix for this sample.
    """

    model_config = ConfigDict(frozen=True)

    time: float = 0.0
    speed: float = 0.0
    rpm: float = 0.0
    throttle: float = 0.0
    brake: float = 0.0
    lat: float = 0.0
    lon: float = 0.0
    lap_dist: float = 0.0
    lap_dist_pct: float = 0.0

    @property
    def has_fix(self) -> bool:
        """True when both latitude and longitude are non-zero."""
        return self.lat != 0 and self.lon != 0
