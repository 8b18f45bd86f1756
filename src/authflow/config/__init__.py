"""Configuration module for authflow.

Configuration is optional: without ~/.authflow/config.yaml the app talks to
the public demo API with default settings.

Usage:
    from authflow.config import load_config

    config = load_config()
    base_url = config.api.base_url
"""

from authflow.config.loader import (
    create_default_config,
    ensure_config_dir,
    load_config,
)
from authflow.config.models import (
    DEFAULT_BASE_URL,
    ApiConfig,
    AuthflowConfig,
    LoggingConfig,
    get_config_dir,
    get_default_config,
)

__all__ = [
    # Models
    "AuthflowConfig",
    "ApiConfig",
    "LoggingConfig",
    "DEFAULT_BASE_URL",
    # Loader functions
    "load_config",
    "create_default_config",
    "ensure_config_dir",
    # Model helpers
    "get_config_dir",
    "get_default_config",
]
