"""Public client classes for the telemetry ingestion service."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from lapviz._http import AsyncTransport, SyncTransport
from lapviz.config import load_settings
from lapviz.exceptions import LapVizValidationError
from lapviz.models.lap_detail import LapDetail
from lapviz.models.session import Session, SessionListItem
from lapviz.uploads import validate_upload_path


def _validate(model_type: Any, data: Any, label: str) -> Any:
    """Validate response data against a Pydantic model or type."""
    try:
        return TypeAdapter(model_type).validate_python(data)
    except Exception as exc:
        raise LapVizValidationError(f"Failed to validate {label} response: {exc}") from exc


def _unwrap_sessions(data: Any) -> Any:
    # The listing endpoint wraps its items: {"sessions": [...]}
    if isinstance(data, dict):
        return data.get("sessions", [])
    return data


def _session_path(session_id: str) -> str:
    return f"/sessions/{session_id}/laps"


def _lap_detail_path(session_id: str, lap_number: int) -> str:
    return f"/sessions/{session_id}/laps/{lap_number}/details"


class TelemetryClient:
    """Synchronous client for the telemetry ingestion service.

    Usage:
        client = TelemetryClient()
        session = client.session("abc123")
        client.close()

        # Or as a context manager:
        with TelemetryClient() as client:
            detail = client.lap_detail("abc123", 5)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = load_settings()
        self._transport = SyncTransport(
            base_url=base_url or settings.api_url,
            timeout=timeout if timeout is not None else settings.timeout,
        )

    def __enter__(self) -> TelemetryClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    def sessions(self) -> list[SessionListItem]:
        """List stored sessions."""
        data = self._transport.get("/sessions")
        return _validate(list[SessionListItem], _unwrap_sessions(data), "SessionListItem")

    def session(self, session_id: str) -> Session:
        """Get a session with its lap summaries."""
        data = self._transport.get(_session_path(session_id))
        return _validate(Session, data, "Session")

    def lap_detail(self, session_id: str, lap_number: int) -> LapDetail:
        """Get the full per-sample trace for one lap."""
        data = self._transport.get(_lap_detail_path(session_id, lap_number))
        return _validate(LapDetail, data, "LapDetail")

    def upload(self, path: str | Path) -> Session:
        """Upload a telemetry file; the service parses it into a session."""
        file_path = validate_upload_path(path)
        data = self._transport.post_file("/upload", file_path)
        return _validate(Session, data, "Session")


class AsyncTelemetryClient:
    """Asynchronous client for the telemetry ingestion service.

    Usage:
        async with AsyncTelemetryClient() as client:
            detail = await client.lap_detail("abc123", 5)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        settings = load_settings()
        self._transport = AsyncTransport(
            base_url=base_url or settings.api_url,
            timeout=timeout if timeout is not None else settings.timeout,
        )

    async def __aenter__(self) -> AsyncTelemetryClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    # ── Endpoints ──────────────────────────────────────────────

    async def sessions(self) -> list[SessionListItem]:
        """List stored sessions."""
        data = await self._transport.get("/sessions")
        return _validate(list[SessionListItem], _unwrap_sessions(data), "SessionListItem")

    async def session(self, session_id: str) -> Session:
        """Get a session with its lap summaries."""
        data = await self._transport.get(_session_path(session_id))
        return _validate(Session, data, "Session")

    async def lap_detail(self, session_id: str, lap_number: int) -> LapDetail:
        """Get the full per-sample trace for one lap."""
        data = await self._transport.get(_lap_detail_path(session_id, lap_number))
        return _validate(LapDetail, data, "LapDetail")

    async def upload(self, path: str | Path) -> Session:
        """Upload a telemetry file; the service parses it into a session."""
        file_path = validate_upload_path(path)
        data = await self._transport.post_file("/upload", file_path)
        return _validate(Session, data, "Session")
