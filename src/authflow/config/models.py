"""Pydantic models for authflow configuration.

Classes:
    ApiConfig: REST API host, timeout and optional API key
    LoggingConfig: Log level and optional file output
    AuthflowConfig: Top-level configuration combining all sections
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://reqres.in/api/"


class ApiConfig(BaseModel, frozen=True):
    """REST API configuration.

    Attributes:
        base_url: Base URL that endpoint paths are joined onto.
        timeout: Per-request timeout in seconds.
        api_key: Optional key sent as the ``x-api-key`` header.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=10.0, gt=0)
    api_key: str | None = None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and normalise it to end with a slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"base_url must be an http(s) URL, got {v!r}"
            raise ValueError(msg)
        return v if v.endswith("/") else f"{v}/"


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration.

    Attributes:
        level: Log level (debug, info, warning, error)
        log_path: Path to log file (relative to config dir)
        enable_file_logging: Whether to also write JSON logs to log_path
    """

    level: Literal["debug", "info", "warning", "error"] = "info"
    log_path: str = "logs/authflow.log"
    enable_file_logging: bool = False


class AuthflowConfig(BaseModel, frozen=True):
    """Top-level authflow configuration, validated against config.yaml.

    Attributes:
        api: REST API configuration
        logging: Logging configuration
    """

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config() -> AuthflowConfig:
    """Return the configuration used when no config file exists."""
    return AuthflowConfig()


def get_config_dir() -> Path:
    """Return the authflow configuration directory (~/.authflow/)."""
    return Path.home() / ".authflow"
