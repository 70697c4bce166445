"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_DIR = "logs"
API_PREFIX = "/api/v1/telemetry"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_dir: str = DEFAULT_LOG_DIR

    @property
    def api_url(self) -> str:
        """Base URL with the telemetry API prefix appended."""
        return f"{self.base_url}{API_PREFIX}"


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def load_settings() -> Settings:
    """Build settings from LAPVIZ_* environment variables."""
    base_url = os.environ.get("LAPVIZ_API_URL") or DEFAULT_BASE_URL
    return Settings(
        base_url=base_url.rstrip("/"),
        timeout=_parse_timeout(os.environ.get("LAPVIZ_TIMEOUT")),
        log_dir=os.environ.get("LAPVIZ_LOG_DIR") or DEFAULT_LOG_DIR,
    )
