"""Configuration loading and management for authflow.

Functions:
    load_config: Load configuration from ~/.authflow/config.yaml
    create_default_config: Write a default config.yaml
    ensure_config_dir: Ensure ~/.authflow/ exists
"""

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError
import yaml

# Load .env file from current directory and ~/.authflow/
load_dotenv()
load_dotenv(Path.home() / ".authflow" / ".env")

from authflow.config.models import (  # noqa: E402
    AuthflowConfig,
    get_config_dir,
    get_default_config,
)
from authflow.core.errors import ConfigError  # noqa: E402


def ensure_config_dir() -> Path:
    """Create ~/.authflow/ and its logs/ subdirectory if missing.

    Returns:
        Path to the configuration directory.
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "logs").mkdir(exist_ok=True)
    return config_dir


def _format_validation_errors(e: PydanticValidationError) -> str:
    error_messages = []
    for error in e.errors():
        loc = ".".join(str(x) for x in error["loc"])
        error_messages.append(f"  - {loc}: {error['msg']}")
    return "\n".join(error_messages)


def create_default_config(
    config_dir: Path | None = None,
    *,
    overwrite: bool = False,
) -> Path:
    """Write config.yaml populated with defaults.

    Args:
        config_dir: Directory to create the file in. Defaults to ~/.authflow/
        overwrite: If True, replace an existing file.

    Returns:
        Path to the written config file.

    Raises:
        ConfigError: If the file exists and overwrite=False.
    """
    if config_dir is None:
        config_dir = ensure_config_dir()
    else:
        config_dir.mkdir(parents=True, exist_ok=True)

    config_path = config_dir / "config.yaml"
    if config_path.exists() and not overwrite:
        raise ConfigError(
            f"Configuration file already exists: {config_path}",
            config_file=str(config_path),
        )

    config_dict: dict[str, Any] = get_default_config().model_dump(mode="json")
    with config_path.open("w") as f:
        yaml.dump(
            config_dict,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    return config_path


def load_config(config_path: Path | None = None) -> AuthflowConfig:
    """Load and validate configuration.

    When no path is given and ~/.authflow/config.yaml does not exist the
    defaults are returned, so the app runs without any setup.

    Args:
        config_path: Explicit config file. Must exist when given.

    Returns:
        Validated AuthflowConfig instance.

    Raises:
        ConfigError: If an explicit file is missing, is malformed, or fails
            validation.
    """
    if config_path is None:
        config_path = get_config_dir() / "config.yaml"
        if not config_path.exists():
            return get_default_config()

    if not config_path.exists():
        raise ConfigError(
            f"Configuration file not found: {config_path}. "
            "Run `authflow config init` to create default configuration.",
            config_file=str(config_path),
        )

    try:
        with config_path.open() as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse configuration file: {e}",
            config_file=str(config_path),
            details={"yaml_error": str(e)},
        ) from e

    if config_dict is None:
        config_dict = {}

    try:
        return AuthflowConfig.model_validate(config_dict)
    except PydanticValidationError as e:
        raise ConfigError(
            "Configuration validation failed:\n" + _format_validation_errors(e),
            config_file=str(config_path),
            details={"validation_errors": e.errors()},
        ) from e
