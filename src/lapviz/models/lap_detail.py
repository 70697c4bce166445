"""Lap detail model (full per-sample trace for one lap)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from lapviz.models.telemetry_point import TelemetryPoint


class LapDetail(BaseModel):
    """Full recorded trace for a single lap."""

    model_config = ConfigDict(frozen=True)

    lap_number: int
    lap_time: float | None = None
    points: tuple[TelemetryPoint, ...] = ()

    @property
    def sample_count(self) -> int:
        return len(self.points)
