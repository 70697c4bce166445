"""Lap view state: session, selected lap, chart series and scrubber cursor.

Lap requests are numbered; only the result of the newest request is applied,
so a slow response for an earlier lap can never overwrite a later selection.
A failed fetch clears the chart instead of leaving the previous lap on screen.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

from lapviz.api_logging import log_service_call
from lapviz.client import AsyncTelemetryClient
from lapviz.data.base import TelemetryRepository
from lapviz.data.errors import TelemetryDataError
from lapviz.exceptions import LapVizError, UnsupportedFileError
from lapviz.models import LapDetail, Session

from .pipeline import LapAnalysis, LapTraceService, NormalizedSample, analyze_series

DEFAULT_CURSOR = 50.0


@dataclass
class LapViewState:
    session: Session | None = None
    lap_number: int | None = None
    detail: LapDetail | None = None
    series: tuple[NormalizedSample, ...] = field(default_factory=tuple)
    cursor: float = DEFAULT_CURSOR
    loading: bool = False
    error: str | None = None


class _LapViewBase:
    def __init__(self, trace_service: LapTraceService | None = None) -> None:
        self.state = LapViewState()
        self._trace = trace_service or LapTraceService()
        self._latest_request = 0
        self._lock = threading.Lock()

    # ── Lap request bookkeeping ────────────────────────────────

    def begin_lap_request(self, lap_number: int) -> int:
        """Register a new lap fetch and return its request token."""
        with self._lock:
            self._latest_request += 1
            self.state.lap_number = lap_number
            self.state.loading = True
            self.state.error = None
            return self._latest_request

    def is_current(self, token: int) -> bool:
        return token == self._latest_request

    def complete_lap_request(self, token: int, detail: LapDetail) -> bool:
        """Apply *detail* if *token* is still the newest request."""
        with self._lock:
            if not self.is_current(token):
                return False
            self.state.detail = detail
            self.state.series = self._trace.chart_series(detail.points)
            self.state.loading = False
            self.state.error = None
            return True

    def fail_lap_request(self, token: int, exc: Exception) -> bool:
        """Record a fetch failure for *token* and clear the chart."""
        with self._lock:
            if not self.is_current(token):
                return False
            self._clear_lap()
            self.state.loading = False
            self.state.error = str(exc)
            return True

    def _clear_lap(self) -> None:
        self.state.detail = None
        self.state.series = ()
        self._trace.reset()

    # ── Readouts ───────────────────────────────────────────────

    def set_cursor(self, cursor: float) -> LapAnalysis:
        self.state.cursor = cursor
        return self.analysis()

    def analysis(self) -> LapAnalysis:
        """Chart records and readouts for the current series and cursor."""
        return analyze_series(self.state.series, self.state.cursor)

    def clear_error(self) -> None:
        self.state.error = None

    def clear_session(self) -> None:
        with self._lock:
            # Invalidate any in-flight lap request
            self._latest_request += 1
            self.state.session = None
            self.state.lap_number = None
            self.state.loading = False
            self._clear_lap()

    def _require_session_id(self) -> str | None:
        if self.state.session is None:
            self.state.error = "No session loaded."
            return None
        return self.state.session.session_id


class LapViewController(_LapViewBase):
    """Synchronous lap view over a telemetry repository."""

    def __init__(
        self,
        repo: TelemetryRepository,
        trace_service: LapTraceService | None = None,
    ) -> None:
        super().__init__(trace_service)
        self._repo = repo

    @log_service_call
    def load_session(self, session_id: str) -> Session | None:
        self.state.loading = True
        self.state.error = None
        try:
            session = self._repo.get_session(session_id)
        except TelemetryDataError as exc:
            self.clear_session()
            self.state.error = str(exc)
            return None
        self.clear_session()
        self.state.session = session
        return session

    @log_service_call
    def upload(self, path: str | Path) -> Session | None:
        self.state.loading = True
        self.state.error = None
        try:
            session = self._repo.upload_file(path)
        except (UnsupportedFileError, TelemetryDataError) as exc:
            self.state.loading = False
            self.state.error = str(exc)
            return None
        self.clear_session()
        self.state.session = session
        return session

    @log_service_call
    def select_lap(self, lap_number: int) -> LapAnalysis | None:
        """Fetch *lap_number* of the loaded session and build its chart."""
        session_id = self._require_session_id()
        if session_id is None:
            return None
        token = self.begin_lap_request(lap_number)
        try:
            detail = self._repo.get_lap_detail(session_id, lap_number)
        except TelemetryDataError as exc:
            self.fail_lap_request(token, exc)
            return None
        if not self.complete_lap_request(token, detail):
            return None
        return self.analysis()


class AsyncLapViewController(_LapViewBase):
    """Lap view driven by the async client; overlapping selections resolve to the newest."""

    def __init__(
        self,
        client: AsyncTelemetryClient,
        trace_service: LapTraceService | None = None,
    ) -> None:
        super().__init__(trace_service)
        self._client = client

    async def load_session(self, session_id: str) -> Session | None:
        self.state.loading = True
        self.state.error = None
        try:
            session = await self._client.session(session_id)
        except LapVizError as exc:
            self.clear_session()
            self.state.error = str(exc)
            return None
        self.clear_session()
        self.state.session = session
        return session

    async def select_lap(self, lap_number: int) -> LapAnalysis | None:
        """Fetch *lap_number*; returns None on failure or if superseded."""
        session_id = self._require_session_id()
        if session_id is None:
            return None
        token = self.begin_lap_request(lap_number)
        try:
            detail = await self._client.lap_detail(session_id, lap_number)
        except LapVizError as exc:
            self.fail_lap_request(token, exc)
            return None
        if not self.complete_lap_request(token, detail):
            return None
        return self.analysis()
