"""Tests for structlog wiring."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from reflectctl.config.logging import APP_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _saved_logging_state() -> Generator[None]:
    root = logging.getLogger()
    app = logging.getLogger(APP_LOGGER)
    handlers, root_level, app_level = root.handlers[:], root.level, app.level
    yield
    root.handlers = handlers
    root.setLevel(root_level)
    app.setLevel(app_level)


def _last_json_line(capfd: pytest.CaptureFixture[str]) -> dict[str, object]:
    return json.loads(capfd.readouterr().err.strip().splitlines()[-1])


@pytest.mark.parametrize(
    ("verbose", "level"), [(True, logging.DEBUG), (False, logging.WARNING)]
)
def test_app_logger_level(verbose: bool, level: int) -> None:
    configure_logging(verbose=verbose)
    assert logging.getLogger(APP_LOGGER).level == level
    assert logging.getLogger().level == logging.WARNING


def test_structlog_event_as_json(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True, log_json=True)
    structlog.get_logger("reflectctl.services.goals").warning("draft kept", timeframe="1-year")
    record = _last_json_line(capfd)
    assert record["event"] == "draft kept"
    assert record["timeframe"] == "1-year"
    assert record["level"] == "warning"
    assert record["logger"] == "reflectctl.services.goals"
    assert "timestamp" in record


def test_stdlib_record_as_json(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True, log_json=True)
    logging.getLogger("reflectctl.infrastructure.filestore").debug("Wrote goals/1_year.md")
    record = _last_json_line(capfd)
    assert record["event"] == "Wrote goals/1_year.md"
    assert record["level"] == "debug"


def test_debug_hidden_without_verbose(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_json=True)
    logging.getLogger("reflectctl.domain.aggregate").debug("Skipping entry")
    assert capfd.readouterr().err == ""


def test_third_party_stays_at_warning(capfd: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True, log_json=True)
    logging.getLogger("jinja2").debug("template noise")
    assert capfd.readouterr().err == ""


def test_reconfiguring_replaces_handler() -> None:
    configure_logging()
    configure_logging(log_json=True)
    assert len(logging.getLogger().handlers) == 1
