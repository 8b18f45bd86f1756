"""Masking helpers for credentials that pass through authflow.

Passwords are typed into the registration form, tokens come back from the
API, and an optional API key is sent as a header. None of them may appear
in logs or error output in clear text.
"""

from typing import Any

# Field names whose values are never logged
SENSITIVE_FIELD_NAMES = frozenset(
    {
        "password",
        "token",
        "api_key",
        "apikey",
        "api-key",
        "x-api-key",
        "secret",
        "authorization",
    }
)

# Value prefixes that look like secrets regardless of the field name
SENSITIVE_PREFIXES = (
    "bearer ",
    "token ",
    "reqres-",
)


def mask_secret(secret: str, visible_chars: int = 4) -> str:
    """Mask a secret, keeping only its last few characters.

    Example:
        >>> mask_secret("QpwL5tke4Pnpja7X4")
        '...a7X4'
    """
    if not secret:
        return "<empty>"

    if len(secret) <= visible_chars + 4:
        return "*" * len(secret)

    return f"...{secret[-visible_chars:]}"


def is_sensitive_field(field_name: str) -> bool:
    """Return True if ``field_name`` names a credential."""
    if not field_name:
        return False

    field_lower = field_name.lower()
    return any(sensitive in field_lower for sensitive in SENSITIVE_FIELD_NAMES)


def is_sensitive_value(value: Any) -> bool:
    """Return True if ``value`` looks like a credential."""
    if not isinstance(value, str):
        return False

    value_lower = value.lower()
    return any(value_lower.startswith(prefix) for prefix in SENSITIVE_PREFIXES)


def sanitize_for_logging(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with credentials redacted, recursing into dicts."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if is_sensitive_field(key):
            result[key] = "<REDACTED>"
        elif isinstance(value, str) and is_sensitive_value(value):
            result[key] = mask_secret(value)
        elif isinstance(value, dict):
            result[key] = sanitize_for_logging(value)
        else:
            result[key] = value
    return result
