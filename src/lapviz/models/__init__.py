"""lapviz data models."""

from lapviz.models.lap_detail import LapDetail
from lapviz.models.session import LapSummary, Session, SessionListItem
from lapviz.models.telemetry_point import TelemetryPoint

__all__ = [
    "LapDetail",
    "LapSummary",
    "Session",
    "SessionListItem",
    "TelemetryPoint",
]
