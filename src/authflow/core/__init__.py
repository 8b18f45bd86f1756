"""authflow core module - Result type, error hierarchy, and masking helpers."""

from authflow.core.errors import ApiError, ApiErrorKind, AuthflowError, ConfigError
from authflow.core.security import (
    is_sensitive_field,
    is_sensitive_value,
    mask_secret,
    sanitize_for_logging,
)
from authflow.core.types import Result

__all__ = [
    # Types
    "Result",
    # Errors
    "AuthflowError",
    "ApiError",
    "ApiErrorKind",
    "ConfigError",
    # Security utilities
    "is_sensitive_field",
    "is_sensitive_value",
    "mask_secret",
    "sanitize_for_logging",
]
