"""Shared fixtures for authflow unit tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from authflow.api.models import RegisterResponse, User
from authflow.core.errors import ApiError
from authflow.core.types import Result

SAMPLE_USERS_PAYLOAD: dict[str, Any] = {
    "page": 1,
    "per_page": 6,
    "total": 12,
    "total_pages": 2,
    "data": [
        {
            "id": 1,
            "email": "george.bluth@reqres.in",
            "first_name": "George",
            "last_name": "Bluth",
            "avatar": "https://reqres.in/img/faces/1-image.jpg",
        },
        {
            "id": 2,
            "email": "janet.weaver@reqres.in",
            "first_name": "Janet",
            "last_name": "Weaver",
            "avatar": "https://reqres.in/img/faces/2-image.jpg",
        },
    ],
}


class FakeAuthApi:
    """In-memory AuthApi that records calls and returns canned results.

    Set ``hold`` to keep ``register`` pending until the event is set.
    """

    def __init__(
        self,
        *,
        register_result: Result[RegisterResponse, ApiError] | None = None,
        users_result: Result[list[User], ApiError] | None = None,
    ) -> None:
        self.register_result = register_result or Result.ok(
            RegisterResponse(id=4, token="QpwL5tke4Pnpja7X4")
        )
        self.users_result = users_result or Result.ok(
            [User.model_validate(item) for item in SAMPLE_USERS_PAYLOAD["data"]]
        )
        self.register_calls: list[tuple[str, str]] = []
        self.list_users_calls = 0
        self.hold: asyncio.Event | None = None

    async def register(self, email: str, password: str) -> Result[RegisterResponse, ApiError]:
        self.register_calls.append((email, password))
        if self.hold is not None:
            await self.hold.wait()
        return self.register_result

    async def list_users(self) -> Result[list[User], ApiError]:
        self.list_users_calls += 1
        return self.users_result


@pytest.fixture
def sample_users_payload() -> dict[str, Any]:
    """A GET users body as served by reqres.in."""
    return SAMPLE_USERS_PAYLOAD


@pytest.fixture
def fake_api() -> FakeAuthApi:
    """AuthApi double succeeding on every call."""
    return FakeAuthApi()


@pytest.fixture
def rejecting_api() -> FakeAuthApi:
    """AuthApi double whose calls are all rejected with HTTP 400."""
    return FakeAuthApi(
        register_result=Result.err(ApiError.server_rejected(400, endpoint="register")),
        users_result=Result.err(ApiError.server_rejected(400, endpoint="users")),
    )


@pytest.fixture
def offline_api() -> FakeAuthApi:
    """AuthApi double whose calls all fail at the transport."""
    return FakeAuthApi(
        register_result=Result.err(
            ApiError.from_exception(ConnectionError("Connection refused"), endpoint="register")
        ),
        users_result=Result.err(
            ApiError.from_exception(ConnectionError("Connection refused"), endpoint="users")
        ),
    )
