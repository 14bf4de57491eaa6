"""
Tests for Logality's internal diagnostics logging
"""

import logging

import pytest
import structlog

from logality import ConfigurationError, Logality
from logality.core.logging.logger import get_logger, setup_logging


def _tagged_handlers():
    package_logger = logging.getLogger("logality")
    return [
        h for h in package_logger.handlers if getattr(h, "_logality_handler", False)
    ]


def test_setup_is_idempotent():
    setup_logging()
    setup_logging()

    assert len(_tagged_handlers()) == 1


def test_diagnostics_do_not_reach_root_logger():
    setup_logging()
    assert logging.getLogger("logality").propagate is False


def test_get_logger_returns_bound_logger():
    logger = get_logger("logality.tests")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "bind")


def test_foreign_names_are_nested_under_package_logger(caplog):
    setup_logging()
    package_logger = logging.getLogger("logality")
    package_logger.addHandler(caplog.handler)
    try:
        get_logger("elsewhere").warning("nested diagnostic")
    finally:
        package_logger.removeHandler(caplog.handler)

    assert [r.name for r in caplog.records] == ["logality.elsewhere"]
    assert "nested diagnostic" in caplog.records[0].getMessage()


def test_host_structlog_configuration_is_left_alone(sink, host_metadata):
    before_configured = structlog.is_configured()
    before_config = structlog.get_config()

    logality = Logality(app_name="host", wstream=sink, host_metadata=host_metadata)
    logality.get().info("hello")
    get_logger("logality.tests").warning("diagnostic")

    assert structlog.is_configured() == before_configured
    assert structlog.get_config() == before_config


def test_host_structlog_loggers_keep_their_output(sink, host_metadata, capsys):
    Logality(app_name="host", wstream=sink, host_metadata=host_metadata)

    structlog.get_logger("host").info("host event")

    assert "host event" in capsys.readouterr().out


def test_invalid_environment_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("LOGALITY_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError) as exc_info:
        setup_logging()
    assert exc_info.value.error_code == "INVALID_SETTINGS"
