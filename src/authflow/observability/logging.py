"""Structured logging configuration for authflow.

structlog is configured once at startup with a shared processor chain:
contextvars merge, credential masking, log level, ISO 8601 timestamps and
call-site info. Console output is human-readable in dev mode and JSON in
prod mode; the optional file log is always JSON with daily rotation.

While the Textual app owns the terminal, console output is switched off
with ``set_console_logging(False)`` so log lines do not tear the screen.

Event naming convention:
- dot.notation, domain.entity.verb_past_tense
- e.g. "api.register.completed", "flow.user_list.transitioned"

Usage:
    from authflow.observability import configure_logging, get_logger

    configure_logging(LoggingConfig(mode=LogMode.DEV))
    log = get_logger()
    log.info("api.users.completed", count=6)
"""

from __future__ import annotations

from enum import Enum
import logging
from logging.handlers import TimedRotatingFileHandler
import os
from pathlib import Path
import sys
from typing import Any

from pydantic import BaseModel, Field
import structlog

from authflow.core.security import (
    is_sensitive_field,
    is_sensitive_value,
    mask_secret,
    sanitize_for_logging,
)


class LogMode(str, Enum):
    """Logging output mode."""

    DEV = "dev"
    PROD = "prod"


class LoggingConfig(BaseModel):
    """Runtime configuration for structured logging.

    Attributes:
        mode: Output mode (dev for human-readable, prod for JSON).
        log_level: Minimum log level to output.
        log_file: JSON log file with daily rotation; None disables it.
        max_log_days: Number of rotated files to keep.
    """

    mode: LogMode = Field(default=LogMode.DEV)
    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)
    max_log_days: int = Field(default=7, ge=1, le=365)

    model_config = {"frozen": True}


_configured: bool = False
_console_logging_enabled: bool = True


def get_mode_from_env() -> LogMode:
    """Read AUTHFLOW_LOG_MODE; anything but "prod" means dev."""
    env_mode = os.environ.get("AUTHFLOW_LOG_MODE", "dev").lower()
    if env_mode == "prod":
        return LogMode.PROD
    return LogMode.DEV


def _get_log_level(level_str: str) -> int:
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_str.upper(), logging.INFO)


def _setup_file_handler(config: LoggingConfig) -> TimedRotatingFileHandler | None:
    if config.log_file is None:
        return None

    config.log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = TimedRotatingFileHandler(
        filename=str(config.log_file),
        when="midnight",
        interval=1,
        backupCount=config.max_log_days,
        encoding="utf-8",
        utc=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(_get_log_level(config.log_level))
    return handler


def _mask_sensitive_data(
    _logger: Any,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor that redacts passwords, tokens and API keys."""
    for key, value in list(event_dict.items()):
        if key in ("event", "level", "timestamp", "filename", "lineno"):
            continue

        if is_sensitive_field(key):
            event_dict[key] = "<REDACTED>"
        elif isinstance(value, str) and is_sensitive_value(value):
            event_dict[key] = mask_secret(value)
        elif isinstance(value, dict):
            event_dict[key] = sanitize_for_logging(value)

    return event_dict


def _get_shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        # Must run before any renderer sees the event dict
        _mask_sensitive_data,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.format_exc_info,
    ]


def _get_processors(mode: LogMode) -> list[Any]:
    processors = _get_shared_processors()
    if mode == LogMode.DEV:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def set_console_logging(enabled: bool) -> None:
    """Enable or disable log output on stderr."""
    global _console_logging_enabled
    _console_logging_enabled = enabled


class _FileWritingPrintLogger:
    """Logger that prints to stderr and mirrors each line to a file handler."""

    def __init__(self, file_handler: TimedRotatingFileHandler | None = None) -> None:
        self._file_handler = file_handler

    def _log(self, message: str, level: int = logging.INFO) -> None:
        if _console_logging_enabled:
            print(message, file=sys.stderr)

        if self._file_handler:
            record = logging.LogRecord(
                name="authflow",
                level=level,
                pathname="",
                lineno=0,
                msg=message,
                args=(),
                exc_info=None,
            )
            self._file_handler.emit(record)

    def msg(self, message: str) -> None:
        self._log(message, logging.INFO)

    __call__ = msg

    def debug(self, message: str) -> None:
        self._log(message, logging.DEBUG)

    def info(self, message: str) -> None:
        self._log(message, logging.INFO)

    def warning(self, message: str) -> None:
        self._log(message, logging.WARNING)

    warn = warning

    def error(self, message: str) -> None:
        self._log(message, logging.ERROR)

    def critical(self, message: str) -> None:
        self._log(message, logging.CRITICAL)

    fatal = critical

    def exception(self, message: str) -> None:
        self._log(message, logging.ERROR)


class _FileWritingPrintLoggerFactory:
    def __init__(self, file_handler: TimedRotatingFileHandler | None = None) -> None:
        self._file_handler = file_handler

    def __call__(self, *_args: Any) -> _FileWritingPrintLogger:
        return _FileWritingPrintLogger(self._file_handler)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for the application.

    Call once at startup. Reconfiguring replaces the root handlers, so it
    is safe to call again with a different config (the CLI does this after
    loading config.yaml).

    Args:
        config: Logging configuration. If None, uses defaults with the mode
            taken from AUTHFLOW_LOG_MODE.
    """
    global _configured

    if config is None:
        config = LoggingConfig(mode=get_mode_from_env())

    log_level = _get_log_level(config.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = _setup_file_handler(config)
    if file_handler:
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=_get_processors(config.mode),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_FileWritingPrintLoggerFactory(file_handler),
        cache_logger_on_first_use=True,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a bound logger, configuring defaults on first use."""
    if not _configured:
        configure_logging()

    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in every subsequent log entry.

    Never bind credentials; the masking processor is a backstop, not a
    licence.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def reset_logging() -> None:
    """Reset module state and structlog defaults (for tests)."""
    global _configured
    _configured = False
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
