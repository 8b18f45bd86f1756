"""Protocol the screen flows use to reach the REST API.

The flows depend on this protocol rather than on ``ApiClient`` so that they
can be driven by any object with the same two coroutines (the TUI and CLI
pass the shared client; tests pass fakes).
"""

from typing import Protocol

from authflow.api.models import RegisterResponse, User
from authflow.core.errors import ApiError
from authflow.core.types import Result


class AuthApi(Protocol):
    """Registration and user listing, each a single non-retried attempt.

    Example:
        api: AuthApi = get_api_client()
        result = await api.register("eve.holt@reqres.in", "pistol")
        if result.is_err:
            log.warning("register failed", kind=result.error.kind)
    """

    async def register(
        self, email: str, password: str
    ) -> Result[RegisterResponse, ApiError]:
        """Create an account. Not idempotent: two calls create two accounts."""
        ...

    async def list_users(self) -> Result[list[User], ApiError]:
        """Fetch the first page of users in server order."""
        ...
