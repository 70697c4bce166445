"""Session and lap summary models."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict


class LapSummary(BaseModel):
    """Aggregate figures for one lap of a session."""

    model_config = ConfigDict(frozen=True)

    lap_number: int
    lap_time: float | None = None
    max_speed: float | None = None
    avg_rpm: float | None = None
    distance: float | None = None
    fuel_used: float | None = None
    fuel_use_per_hour_avg: float | None = None

    @property
    def lap_timedelta(self) -> timedelta | None:
        """Lap time as a timedelta, or None if missing."""
        if self.lap_time is None:
            return None
        return timedelta(seconds=self.lap_time)


class Session(BaseModel):
    """A recorded session as returned by the ingestion service."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    driver: str | None = None
    vehicle: str | None = None
    track: str | None = None
    date: str | None = None
    duration_seconds: float | None = None
    lap_count: int | None = None
    sample_rate_hz: float | None = None
    laps: tuple[LapSummary, ...] = ()

    def lap(self, lap_number: int) -> LapSummary | None:
        """Return the summary for *lap_number*, or None if not recorded."""
        for summary in self.laps:
            if summary.lap_number == lap_number:
                return summary
        return None


class SessionListItem(BaseModel):
    """Entry of the stored-session listing."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    driver: str | None = None
    vehicle: str | None = None
    track: str | None = None
    date: str | None = None
    lap_count: int | None = None
