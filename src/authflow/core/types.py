"""Result type shared by the API client and the screen flows.

Every network operation in authflow resolves to a ``Result``: either the
decoded payload or an ``ApiError``. The screen state machines consume that
value directly in their transition functions, so no request failure ever
reaches the UI as an exception.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import cast


@dataclass(frozen=True, slots=True)
class Result[T, E]:
    """Either a success payload (Ok) or a typed error (Err).

    Usage:
        result = await client.register("eve.holt@reqres.in", "pistol")
        if result.is_ok:
            token = result.value.token
        else:
            message = result.error.message

        ids = (await client.list_users()).map(lambda users: [u.id for u in users])
    """

    _value: T | None
    _error: E | None
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        """Wrap a success value."""
        return cls(_value=value, _error=None, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        """Wrap an error value."""
        return cls(_value=None, _error=error, _is_ok=False)

    @property
    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def is_err(self) -> bool:
        return not self._is_ok

    def __repr__(self) -> str:
        if self._is_ok:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    @property
    def value(self) -> T:
        """Return the Ok value.

        Raises:
            ValueError: If this Result is Err.
        """
        if not self._is_ok:
            msg = "Cannot access value on Err result"
            raise ValueError(msg)
        return cast(T, self._value)

    @property
    def error(self) -> E:
        """Return the Err value.

        Raises:
            ValueError: If this Result is Ok.
        """
        if self._is_ok:
            msg = "Cannot access error on Ok result"
            raise ValueError(msg)
        return cast(E, self._error)

    def map[U](self, fn: Callable[[T], U]) -> "Result[U, E]":
        """Apply ``fn`` to the Ok value; pass an Err through untouched."""
        if self._is_ok:
            return Result.ok(fn(cast(T, self._value)))
        return Result.err(cast(E, self._error))

    def and_then[U](self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain a Result-producing step after an Ok value.

        The API client uses this to decode a response body only after the
        status check passed.
        """
        if self._is_ok:
            return fn(cast(T, self._value))
        return Result.err(cast(E, self._error))
