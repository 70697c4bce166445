"""Session dashboard figures: lap table and headline KPIs."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from lapviz.api_logging import log_service_call
from lapviz.models.session import LapSummary, Session


@dataclass(frozen=True)
class LapRow:
    lap_number: int
    lap_time: float | None
    gap_to_best: float | None
    is_best: bool


@dataclass(frozen=True)
class SessionSummary:
    best_lap: LapSummary | None
    top_speed: float | None
    avg_rpm: float | None
    total_distance: float | None
    fuel_used: float | None
    lap_count: int
    rows: tuple[LapRow, ...]

    @property
    def best_lap_time(self) -> float | None:
        return self.best_lap.lap_time if self.best_lap is not None else None


def filter_timed_laps(laps: Sequence[LapSummary]) -> list[LapSummary]:
    """Return laps with a positive lap_time (out-laps and aborted laps excluded)."""
    return [lap for lap in laps if lap.lap_time is not None and lap.lap_time > 0]


def compute_best_lap(laps: Sequence[LapSummary]) -> LapSummary | None:
    """Fastest timed lap; the earlier lap wins a tie."""
    return min(filter_timed_laps(laps), key=lambda lap: lap.lap_time, default=None)  # type: ignore[arg-type, return-value]


def compute_top_speed(laps: Sequence[LapSummary]) -> float | None:
    return max((lap.max_speed for lap in laps if lap.max_speed is not None), default=None)


def compute_avg_rpm(laps: Sequence[LapSummary]) -> float | None:
    """Mean of the per-lap average RPM."""
    values = [lap.avg_rpm for lap in laps if lap.avg_rpm is not None]
    return statistics.mean(values) if values else None


def _sum_field(laps: Sequence[LapSummary], field: str) -> float | None:
    values = [getattr(lap, field) for lap in laps if getattr(lap, field) is not None]
    return sum(values) if values else None


def build_lap_rows(laps: Sequence[LapSummary]) -> list[LapRow]:
    """Lap table in lap-number order, flagging the best lap."""
    best = compute_best_lap(laps)
    best_time = best.lap_time if best is not None else None
    rows: list[LapRow] = []
    for lap in sorted(laps, key=lambda l: l.lap_number):
        timed = lap.lap_time is not None and lap.lap_time > 0
        gap = (
            round(lap.lap_time - best_time, 3)  # type: ignore[operator]
            if timed and best_time is not None
            else None
        )
        rows.append(LapRow(
            lap_number=lap.lap_number,
            lap_time=lap.lap_time,
            gap_to_best=gap,
            is_best=best is not None and lap.lap_number == best.lap_number,
        ))
    return rows


class SessionSummaryService:
    """Headline figures for the session dashboard."""

    @log_service_call
    def summarize(self, session: Session) -> SessionSummary:
        laps = session.laps
        return SessionSummary(
            best_lap=compute_best_lap(laps),
            top_speed=compute_top_speed(laps),
            avg_rpm=compute_avg_rpm(laps),
            total_distance=_sum_field(laps, "distance"),
            fuel_used=_sum_field(laps, "fuel_used"),
            lap_count=session.lap_count if session.lap_count is not None else len(laps),
            rows=tuple(build_lap_rows(laps)),
        )
