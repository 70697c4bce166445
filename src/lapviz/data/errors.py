"""Source-agnostic data fetch error."""

from __future__ import annotations


class TelemetryDataError(Exception):
    """Source-agnostic data fetch error. Callers catch only this."""
