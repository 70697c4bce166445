"""Custom exceptions for the lapviz client and analysis engine."""

from __future__ import annotations


class LapVizError(Exception):
    """Base exception for all lapviz errors."""


class LapVizConnectionError(LapVizError):
    """Raised when the client cannot connect to the telemetry service."""


class LapVizTimeoutError(LapVizError):
    """Raised when a request to the telemetry service times out."""


class LapVizAPIError(LapVizError):
    """Raised when the service returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str, detail: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {message}")


class LapVizValidationError(LapVizError):
    """Raised when response data fails model validation."""


class UnsupportedFileError(LapVizError):
    """Raised when an upload is rejected before it reaches the network."""


class EmptyTraceError(LapVizError):
    """Raised when a reference is requested for an empty point sequence."""
