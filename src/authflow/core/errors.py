"""Error hierarchy for authflow.

These exceptions double as error values inside ``Result`` for expected
failures (an API call that did not succeed) and are raised only for
configuration problems or programming errors.

Exception Hierarchy:
    AuthflowError (base)
    ├── ApiError     - A request to the REST API did not succeed
    └── ConfigError  - Configuration loading or validation failed
"""

from enum import StrEnum
from typing import Any


class AuthflowError(Exception):
    """Base exception for all authflow errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ApiErrorKind(StrEnum):
    """Why a request failed."""

    SERVER_REJECTED = "server_rejected"
    MALFORMED_RESPONSE = "malformed_response"
    NETWORK_FAILURE = "network_failure"


class ApiError(AuthflowError):
    """A request to the REST API that did not produce a usable payload.

    Attributes:
        kind: Failure category (rejected status, bad body, transport).
        status_code: HTTP status code when the server answered.
        endpoint: Relative endpoint that was called (e.g. "register").
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ApiErrorKind,
        status_code: int | None = None,
        endpoint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.kind = kind
        self.status_code = status_code
        self.endpoint = endpoint

    @classmethod
    def server_rejected(
        cls, status_code: int, *, endpoint: str, body: str | None = None
    ) -> "ApiError":
        """Build the error for a non-2xx response."""
        details = {"body": body[:200]} if body else None
        return cls(
            f"Server rejected request with status {status_code}",
            kind=ApiErrorKind.SERVER_REJECTED,
            status_code=status_code,
            endpoint=endpoint,
            details=details,
        )

    @classmethod
    def malformed_response(
        cls, reason: str, *, endpoint: str, status_code: int | None = None
    ) -> "ApiError":
        """Build the error for a missing or unparseable body."""
        return cls(
            f"Malformed response: {reason}",
            kind=ApiErrorKind.MALFORMED_RESPONSE,
            status_code=status_code,
            endpoint=endpoint,
        )

    @classmethod
    def from_exception(cls, exc: Exception, *, endpoint: str) -> "ApiError":
        """Wrap a transport exception, keeping it as ``__cause__``.

        The message is the underlying failure description so that it can be
        shown to the user verbatim.
        """
        description = str(exc) or type(exc).__name__
        error = cls(
            description,
            kind=ApiErrorKind.NETWORK_FAILURE,
            endpoint=endpoint,
            details={"original_exception": type(exc).__name__},
        )
        error.__cause__ = exc
        return error


class ConfigError(AuthflowError):
    """Error from configuration loading or validation.

    Attributes:
        config_key: The configuration key that caused the error.
        config_file: Path to the config file if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        config_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file
