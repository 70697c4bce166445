"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import httpx

from lapviz.config import DEFAULT_TIMEOUT, load_settings
from lapviz.exceptions import (
    LapVizAPIError,
    LapVizConnectionError,
    LapVizTimeoutError,
    UnsupportedFileError,
)

PAYLOAD_TOO_LARGE_MESSAGE = "The file is too large for the server (limit 4.5MB)."


def _error_detail(response: httpx.Response) -> str | None:
    """Extract the FastAPI-style ``detail`` field from an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail") is not None:
        return str(body["detail"])
    return None


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        # 413 comes from the proxy in front of the service, not the service itself
        if response.status_code == 413:
            raise LapVizAPIError(status_code=413, message=PAYLOAD_TOO_LARGE_MESSAGE)
        detail = _error_detail(response)
        raise LapVizAPIError(
            status_code=response.status_code,
            message=detail or f"Server error: {response.status_code}",
            detail=detail,
        )
    return response.json()


def _unreadable(path: Path, exc: OSError) -> UnsupportedFileError:
    return UnsupportedFileError(f"Cannot read {path}: {exc}")


def _default_base_url() -> str:
    return load_settings().api_url


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url or _default_base_url(),
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise LapVizConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise LapVizTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def post_file(self, endpoint: str, path: Path) -> Any:
        """Upload *path* as multipart field ``file`` and return parsed JSON."""
        try:
            with path.open("rb") as fh:
                response = self._client.post(endpoint, files={"file": (path.name, fh)})
        except httpx.ConnectError as exc:
            raise LapVizConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise LapVizTimeoutError(str(exc)) from exc
        except OSError as exc:
            raise _unreadable(path, exc) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or _default_base_url(),
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise LapVizConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise LapVizTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def post_file(self, endpoint: str, path: Path) -> Any:
        """Upload *path* as multipart field ``file`` and return parsed JSON."""
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise _unreadable(path, exc) from exc
        try:
            response = await self._client.post(endpoint, files={"file": (path.name, content)})
        except httpx.ConnectError as exc:
            raise LapVizConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise LapVizTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
