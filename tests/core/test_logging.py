from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest

from servicehub.core.logging import _ContainerFormatter, _JsonFormatter, setup_logging

_QUIETED = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpcore",
    "httpx",
    "sqlalchemy.engine",
)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """setup_logging mutates process-wide state; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    quieted = {name: logging.getLogger(name).level for name in _QUIETED}
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
    for name, lvl in quieted.items():
        logging.getLogger(name).setLevel(lvl)


def test_setup_logging_sets_root_level() -> None:
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG

    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_defaults_to_info_for_unknown_level() -> None:
    setup_logging("nonexistent")
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_installs_single_handler() -> None:
    setup_logging("info")
    setup_logging("info")
    assert len(logging.getLogger().handlers) == 1


def test_setup_logging_picks_json_formatter() -> None:
    setup_logging("info", json_format=True)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, _JsonFormatter)

    setup_logging("info")
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, _ContainerFormatter)


def test_setup_logging_quiets_third_party_at_debug() -> None:
    setup_logging("debug")
    assert logging.getLogger("uvicorn").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_setup_logging_allows_uvicorn_at_error() -> None:
    setup_logging("error")
    assert logging.getLogger("uvicorn").level == logging.ERROR


def test_formatter_excludes_location_for_info() -> None:
    fmt = _ContainerFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="test.py",
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )
    output = fmt.format(record)
    assert "hello" in output
    assert "[test.py:" not in output


def test_formatter_includes_location_for_warning() -> None:
    fmt = _ContainerFormatter()
    record = logging.LogRecord(
        name="test",
        level=logging.WARNING,
        pathname="user_directory.py",
        lineno=42,
        msg="Login failed",
        args=(),
        exc_info=None,
    )
    output = fmt.format(record)
    assert "Login failed" in output
    assert "[user_directory.py:42]" in output


def test_formatter_timestamp_has_milliseconds() -> None:
    fmt = _ContainerFormatter()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(fmt)
    log = logging.getLogger("test.timestamp")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    try:
        log.warning("tick")
    finally:
        log.removeHandler(handler)
        log.propagate = True

    timestamp = stream.getvalue().split(" ", 1)[0]
    # 2026-01-01T12:00:00.123+0000
    assert timestamp[19] == "."
    assert timestamp[20:23].isdigit()
