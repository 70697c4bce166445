"""Data layer — repository factory and re-exports."""

from __future__ import annotations

from .base import TelemetryRepository
from .errors import TelemetryDataError
from .http_repo import HttpTelemetryRepository


def get_repository(base_url: str | None = None, timeout: float | None = None) -> TelemetryRepository:
    """Return the repository for the configured telemetry service."""
    return HttpTelemetryRepository(base_url=base_url, timeout=timeout)


__all__ = [
    "HttpTelemetryRepository",
    "TelemetryDataError",
    "TelemetryRepository",
    "get_repository",
]
