"""Tests for lapviz/api_logging.py — decorators and file logging."""

from __future__ import annotations

import logging

import pytest

from lapviz.api_logging import log_api_call, log_service_call
from lapviz.models import LapDetail, TelemetryPoint


class _FakeRepo:
    """Minimal class to test logging decorators."""

    @log_api_call
    def get_items(self, session_id: str) -> list[dict]:
        return [{"name": "item1"}, {"name": "item2"}]

    @log_api_call
    def get_detail(self, session_id: str, lap_number: int) -> LapDetail:
        return LapDetail(lap_number=lap_number, points=(TelemetryPoint(), TelemetryPoint()))

    @log_api_call
    def get_failing(self, key: str) -> list[dict]:
        raise ValueError("test error")

    @log_service_call
    def compute_stuff(self, data: list) -> dict:
        return {"result": len(data)}

    @log_service_call
    def compute_failing(self) -> None:
        raise RuntimeError("service error")


@pytest.fixture
def fake_repo():
    return _FakeRepo()


@pytest.fixture
def log_file(_isolate_environment):
    return _isolate_environment / "api_calls.log"


class TestLogApiCall:
    def test_returns_result(self, fake_repo):
        assert fake_repo.get_items("abc") == [{"name": "item1"}, {"name": "item2"}]

    def test_logs_call_and_ok(self, fake_repo, log_file):
        fake_repo.get_items("abc")
        content = log_file.read_text()
        assert "CALL: _FakeRepo.get_items('abc')" in content
        assert "OK: _FakeRepo.get_items('abc') -> 2 items" in content

    def test_counts_lap_points(self, fake_repo, log_file):
        fake_repo.get_detail("abc", lap_number=3)
        content = log_file.read_text()
        assert "get_detail('abc', lap_number=3) -> 2 items" in content

    def test_logs_failure_and_reraises(self, fake_repo, log_file):
        with pytest.raises(ValueError, match="test error"):
            fake_repo.get_failing("k")
        content = log_file.read_text()
        assert "FAIL: _FakeRepo.get_failing('k') -> ValueError: test error" in content


class TestLogServiceCall:
    def test_returns_result(self, fake_repo, log_file):
        assert fake_repo.compute_stuff([1, 2, 3]) == {"result": 3}
        content = log_file.read_text()
        assert "SERVICE CALL: _FakeRepo.compute_stuff" in content
        assert "SERVICE OK: _FakeRepo.compute_stuff" in content

    def test_logs_failure_and_reraises(self, fake_repo, log_file):
        with pytest.raises(RuntimeError):
            fake_repo.compute_failing()
        content = log_file.read_text()
        assert "SERVICE FAIL: _FakeRepo.compute_failing -> RuntimeError: service error" in content


class TestLoggerSetup:
    def test_file_written_alongside_other_handlers(self, fake_repo, log_file):
        other = logging.NullHandler()
        logging.getLogger("lapviz.api").addHandler(other)
        fake_repo.get_items("abc")

        assert log_file.exists()
        assert "CALL: _FakeRepo.get_items('abc')" in log_file.read_text()
        assert other in logging.getLogger("lapviz.api").handlers

    def test_single_file_handler(self, fake_repo, log_file):
        fake_repo.get_items("a")
        fake_repo.compute_stuff([])
        handlers = logging.getLogger("lapviz.api").handlers
        assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1
        assert log_file.read_text().count("CALL: _FakeRepo.get_items('a')") == 1
