"""Telemetry service repository implementation over HTTP."""

from __future__ import annotations

from pathlib import Path

from lapviz.api_logging import log_api_call
from lapviz.client import TelemetryClient
from lapviz.exceptions import LapVizError
from lapviz.models import LapDetail, Session, SessionListItem
from lapviz.uploads import validate_upload_path

from .base import TelemetryRepository
from .errors import TelemetryDataError


class HttpTelemetryRepository(TelemetryRepository):
    """Repository backed by the ingestion service's REST API.

    A client may be injected (tests, shared connection pools); otherwise a
    short-lived client is opened per call.
    """

    def __init__(
        self,
        client: TelemetryClient | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._base_url = base_url
        self._timeout = timeout

    def _open(self) -> TelemetryClient:
        return TelemetryClient(base_url=self._base_url, timeout=self._timeout)

    @log_api_call
    def list_sessions(self) -> list[SessionListItem]:
        try:
            if self._client is not None:
                return self._client.sessions()
            with self._open() as client:
                return client.sessions()
        except LapVizError as exc:
            raise TelemetryDataError(f"Failed to list sessions: {exc}") from exc

    @log_api_call
    def get_session(self, session_id: str) -> Session:
        try:
            if self._client is not None:
                return self._client.session(session_id)
            with self._open() as client:
                return client.session(session_id)
        except LapVizError as exc:
            raise TelemetryDataError(f"Failed to fetch session {session_id}: {exc}") from exc

    @log_api_call
    def get_lap_detail(self, session_id: str, lap_number: int) -> LapDetail:
        try:
            if self._client is not None:
                return self._client.lap_detail(session_id, lap_number)
            with self._open() as client:
                return client.lap_detail(session_id, lap_number)
        except LapVizError as exc:
            raise TelemetryDataError(
                f"Failed to fetch lap {lap_number} of session {session_id}: {exc}",
            ) from exc

    @log_api_call
    def upload_file(self, path: str | Path) -> Session:
        # Rejected files raise UnsupportedFileError before any request is made
        file_path = validate_upload_path(path)
        try:
            if self._client is not None:
                return self._client.upload(file_path)
            with self._open() as client:
                return client.upload(file_path)
        except LapVizError as exc:
            raise TelemetryDataError(f"Failed to upload {path}: {exc}") from exc
