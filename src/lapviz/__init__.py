"""lapviz — telemetry session client and lap trace analysis engine."""

from lapviz.client import AsyncTelemetryClient, TelemetryClient
from lapviz.exceptions import (
    EmptyTraceError,
    LapVizAPIError,
    LapVizConnectionError,
    LapVizError,
    LapVizTimeoutError,
    LapVizValidationError,
    UnsupportedFileError,
)

__all__ = [
    "AsyncTelemetryClient",
    "EmptyTraceError",
    "LapVizAPIError",
    "LapVizConnectionError",
    "LapVizError",
    "LapVizTimeoutError",
    "LapVizValidationError",
    "TelemetryClient",
    "UnsupportedFileError",
]

__version__ = "0.1.0"
