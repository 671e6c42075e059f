"""Tests for loguru sink configuration and the timing decorator."""

import pytest
from loguru import logger

from cl_geometry.utils import configure_logging, timed


@pytest.fixture
def captured_logs():
    """Route loguru to a list for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def test_configure_logging_returns_handler_id() -> None:
    handler_id = configure_logging("warning")
    assert isinstance(handler_id, int)
    logger.remove(handler_id)


def test_configure_logging_uses_settings_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CL_GEOMETRY_LOG_LEVEL", "error")
    handler_id = configure_logging()
    assert isinstance(handler_id, int)
    logger.remove(handler_id)


def test_timed_logs_and_returns(captured_logs: list[str]) -> None:
    @timed
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert any("[PROFILE]" in m and "add" in m for m in captured_logs)


def test_timed_logs_when_raising(captured_logs: list[str]) -> None:
    @timed
    def fail() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError):
        fail()
    assert any("[PROFILE]" in m for m in captured_logs)
