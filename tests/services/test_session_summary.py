"""Tests for services/session_summary.py."""

from __future__ import annotations

import pytest

from lapviz.models import LapSummary, Session
from lapviz.services.session_summary import (
    SessionSummaryService,
    build_lap_rows,
    compute_avg_rpm,
    compute_best_lap,
    compute_top_speed,
    filter_timed_laps,
)
from tests.conftest import SAMPLE_SESSION


@pytest.fixture
def session() -> Session:
    return Session.model_validate(SAMPLE_SESSION)


@pytest.fixture
def laps(session) -> tuple[LapSummary, ...]:
    return session.laps


def _lap(n: int, lap_time: float | None) -> LapSummary:
    return LapSummary(lap_number=n, lap_time=lap_time)


class TestHelpers:
    def test_filter_timed_laps(self):
        laps = [_lap(1, None), _lap(2, 0.0), _lap(3, 91.2)]
        assert [lap.lap_number for lap in filter_timed_laps(laps)] == [3]

    def test_best_lap(self, laps):
        assert compute_best_lap(laps).lap_number == 2

    def test_best_lap_tie_keeps_earlier(self):
        assert compute_best_lap([_lap(4, 90.0), _lap(5, 90.0)]).lap_number == 4

    def test_best_lap_none_timed(self):
        assert compute_best_lap([_lap(1, None)]) is None
        assert compute_best_lap([]) is None

    def test_top_speed(self, laps):
        assert compute_top_speed(laps) == 242.1
        assert compute_top_speed([_lap(1, 90.0)]) is None

    def test_avg_rpm(self, laps):
        assert compute_avg_rpm(laps) == pytest.approx(5800.0)
        assert compute_avg_rpm([]) is None


class TestLapRows:
    def test_rows_in_lap_order_with_gaps(self, laps):
        rows = build_lap_rows(list(reversed(laps)))
        assert [r.lap_number for r in rows] == [1, 2, 3]
        assert rows[0].gap_to_best == pytest.approx(2.784)
        assert rows[1].gap_to_best == 0.0
        assert rows[1].is_best
        assert rows[2].gap_to_best == pytest.approx(1.117)
        assert not rows[0].is_best

    def test_untimed_lap_has_no_gap(self):
        rows = build_lap_rows([_lap(1, None), _lap(2, 90.0)])
        assert rows[0].gap_to_best is None
        assert not rows[0].is_best
        assert rows[1].is_best


class TestSessionSummaryService:
    def test_summarize(self, session):
        summary = SessionSummaryService().summarize(session)
        assert summary.best_lap_time == 92.45
        assert summary.top_speed == 242.1
        assert summary.avg_rpm == pytest.approx(5800.0)
        assert summary.total_distance == pytest.approx(12150.0)
        assert summary.fuel_used == pytest.approx(5.55)
        assert summary.lap_count == 3
        assert len(summary.rows) == 3

    def test_lap_count_falls_back_to_laps(self):
        session = Session(session_id="x", laps=(_lap(1, 90.0), _lap(2, 91.0)))
        assert SessionSummaryService().summarize(session).lap_count == 2

    def test_empty_session(self):
        summary = SessionSummaryService().summarize(Session(session_id="x"))
        assert summary.best_lap is None
        assert summary.best_lap_time is None
        assert summary.total_distance is None
        assert summary.lap_count == 0
        assert summary.rows == ()

    def test_logs_service_call(self, session, _isolate_environment):
        SessionSummaryService().summarize(session)
        content = (_isolate_environment / "api_calls.log").read_text()
        assert "SERVICE OK: SessionSummaryService.summarize" in content
