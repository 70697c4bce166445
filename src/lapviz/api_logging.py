"""Call logging for the lapviz repository and service layers.

Every decorated call writes a start line and an outcome line (with elapsed
time) to ``<log dir>/api_calls.log``. Exceptions are logged and re-raised
unchanged.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from lapviz.config import load_settings

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "lapviz.api"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_LOG_DIR = load_settings().log_dir
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_file_handler(logger: logging.Logger) -> bool:
    # Other handlers (test capture, host application) may already be attached
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(_LOG_FILE)
        for h in logger.handlers
    )


def _get_logger() -> logging.Logger:
    """Return the call logger, attaching the file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is None:
            logger = logging.getLogger(LOGGER_NAME)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
            if not _has_file_handler(logger):
                os.makedirs(_LOG_DIR, exist_ok=True)
                handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(handler)
            _logger = logger

    return _logger


def _result_count(result: Any) -> int:
    """Items in a repository result: list length, lap samples or session laps."""
    if isinstance(result, (list, tuple)):
        return len(result)
    for attr in ("points", "laps"):
        items = getattr(result, attr, None)
        if isinstance(items, tuple):
            return len(items)
    return 1


def _describe_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # args[0] is the bound instance
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def log_api_call(fn: F) -> F:
    """Log a repository method: CALL, then OK with the item count or FAIL."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        call = f"{fn.__qualname__}({_describe_args(args, kwargs)})"
        logger.info("CALL: %s", call)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "FAIL: %s -> %s: %s (%.3fs)",
                call, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info(
            "OK: %s -> %d items (%.3fs)",
            call, _result_count(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_service_call(fn: F) -> F:
    """Log a service method: SERVICE CALL, then SERVICE OK or SERVICE FAIL."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        name = fn.__qualname__
        logger.info("SERVICE CALL: %s", name)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                name, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info("SERVICE OK: %s -> %.3fs", name, time.monotonic() - start)
        return result

    return wrapper  # type: ignore[return-value]
