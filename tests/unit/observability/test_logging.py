"""Unit tests for authflow.observability.logging module."""

from __future__ import annotations

import json
import logging
from logging.handlers import TimedRotatingFileHandler
import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
import structlog

from authflow.observability.logging import (
    LoggingConfig,
    LogMode,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    get_mode_from_env,
    reset_logging,
    set_console_logging,
    unbind_context,
)


@pytest.fixture(autouse=True)
def reset_logging_state() -> Any:
    """Reset logging state before and after each test."""
    reset_logging()
    set_console_logging(True)
    yield
    reset_logging()
    set_console_logging(True)
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler, TimedRotatingFileHandler):
            handler.close()
            root.removeHandler(handler)


def _json_lines(text: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in text.strip().splitlines() if line]


class TestLoggingConfig:
    """Test LoggingConfig model."""

    def test_default_config(self) -> None:
        config = LoggingConfig()

        assert config.mode == LogMode.DEV
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.max_log_days == 7

    def test_config_is_frozen(self) -> None:
        from pydantic import ValidationError as PydanticValidationError

        config = LoggingConfig()
        with pytest.raises(PydanticValidationError):
            config.mode = LogMode.PROD  # type: ignore[misc]

    def test_max_log_days_validation(self) -> None:
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            LoggingConfig(max_log_days=0)
        with pytest.raises(PydanticValidationError):
            LoggingConfig(max_log_days=366)


class TestModeFromEnv:
    def test_prod(self) -> None:
        with patch.dict(os.environ, {"AUTHFLOW_LOG_MODE": "PROD"}):
            assert get_mode_from_env() == LogMode.PROD

    def test_unset_defaults_to_dev(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert get_mode_from_env() == LogMode.DEV

    def test_invalid_defaults_to_dev(self) -> None:
        with patch.dict(os.environ, {"AUTHFLOW_LOG_MODE": "verbose"}):
            assert get_mode_from_env() == LogMode.DEV


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_configure_with_defaults(self) -> None:
        configure_logging()

        assert structlog.is_configured()

    def test_configure_uses_env_mode(self, capsys: Any) -> None:
        with patch.dict(os.environ, {"AUTHFLOW_LOG_MODE": "prod"}):
            configure_logging()
        get_logger().info("config.loaded")

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "config.loaded"

    def test_debug_level_passes_debug_events(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="DEBUG"))
        get_logger().debug("api.request.started")

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["level"] == "debug"

    def test_get_logger_auto_configures(self) -> None:
        assert not structlog.is_configured()

        get_logger()

        assert structlog.is_configured()


class TestOutput:
    def test_dev_mode_human_readable(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.DEV))
        get_logger().info("api.users.completed", count=6)

        captured = capsys.readouterr()
        assert "api.users.completed" in captured.err
        assert "count" in captured.err

    def test_prod_mode_json_output(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        get_logger().info("api.register.completed", user_id=4)

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "api.register.completed"
        assert entry["user_id"] == 4
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_info_level_filters_debug(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="INFO"))
        log = get_logger()
        log.debug("hidden.debug.event")
        log.info("visible.info.event")

        captured = capsys.readouterr()
        assert "hidden.debug.event" not in captured.err
        assert "visible.info.event" in captured.err

    def test_console_logging_can_be_disabled(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        set_console_logging(False)
        get_logger().info("tui.navigation.user_list")

        assert capsys.readouterr().err == ""

    def test_exception_info_logged(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        try:
            raise RuntimeError("transport exploded")
        except RuntimeError:
            get_logger().exception("api.request.unexpected_error")

        [entry] = _json_lines(capsys.readouterr().err)
        assert "transport exploded" in entry["exception"]


class TestContext:
    def test_bind_and_unbind(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        log = get_logger()

        bind_context(screen="registration")
        log.info("first.event")
        unbind_context("screen")
        log.info("second.event")

        first, second = _json_lines(capsys.readouterr().err)
        assert first["screen"] == "registration"
        assert "screen" not in second

    def test_clear_context(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        bind_context(a=1, b=2)
        clear_context()
        get_logger().info("cleared.event")

        [entry] = _json_lines(capsys.readouterr().err)
        assert "a" not in entry
        assert "b" not in entry


class TestFileLogging:
    def test_log_file_contains_json(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "authflow.log"
        configure_logging(LoggingConfig(mode=LogMode.DEV, log_file=log_file))
        set_console_logging(False)

        get_logger().info("flow.registration.transitioned", status="submitting")

        assert log_file.exists()
        assert "flow.registration.transitioned" in log_file.read_text()


class TestSensitiveDataMasking:
    """Credentials must never reach log output in clear text."""

    def test_password_and_token_fields_redacted(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        get_logger().info("api.register.sent", password="pistol", token="QpwL5tke4Pnpja7X4")

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["password"] == "<REDACTED>"
        assert entry["token"] == "<REDACTED>"
        assert "pistol" not in json.dumps(entry)

    def test_sensitive_value_pattern_masked(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        get_logger().info("api.request.headers", header="reqres-free-v1-abcdef")

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["header"] == "...cdef"

    def test_nested_fields_masked(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        get_logger().info("config.loaded", api={"api_key": "secret-value", "timeout": 10})

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["api"] == {"api_key": "<REDACTED>", "timeout": 10}

    def test_normal_fields_untouched(self, capsys: Any) -> None:
        configure_logging(LoggingConfig(mode=LogMode.PROD))
        get_logger().info("api.register.sent", email="eve.holt@reqres.in")

        [entry] = _json_lines(capsys.readouterr().err)
        assert entry["email"] == "eve.holt@reqres.in"
