"""Abstract base repository for telemetry session data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from lapviz.models import LapDetail, Session, SessionListItem


class TelemetryRepository(ABC):
    """Source-agnostic interface for recorded session access."""

    @abstractmethod
    def list_sessions(self) -> list[SessionListItem]: ...

    @abstractmethod
    def get_session(self, session_id: str) -> Session: ...

    @abstractmethod
    def get_lap_detail(self, session_id: str, lap_number: int) -> LapDetail: ...

    @abstractmethod
    def upload_file(self, path: str | Path) -> Session: ...
