"""User list screen state machine.

States::

    LOADING --Ok--> LOADED
       |
       +---Err---> FAILED

The fetch is issued once per controller (i.e. per screen instance), never
per render.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import StrEnum

from authflow.api.base import AuthApi
from authflow.api.models import User
from authflow.core.errors import ApiError, ApiErrorKind
from authflow.core.types import Result
from authflow.observability.logging import get_logger

log = get_logger(__name__)


class UserListStatus(StrEnum):
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class UserListState:
    """Everything the user list screen shows.

    Attributes:
        status: Current state machine state.
        users: Users in the order the server returned them.
        message: Error text; empty unless FAILED.
    """

    status: UserListStatus = UserListStatus.LOADING
    users: tuple[User, ...] = ()
    message: str = ""


@dataclass(frozen=True, slots=True)
class UserRow:
    user_id: int
    title: str
    subtitle: str
    avatar_url: str


@dataclass(frozen=True, slots=True)
class UserListView:
    """Render output: exactly one of progress, message, or rows is populated."""

    show_progress: bool
    message: str
    rows: tuple[UserRow, ...]


def user_list_error_message(error: ApiError) -> str:
    if error.kind is ApiErrorKind.NETWORK_FAILURE:
        return f"Network Error: {error.message}"
    return "Failed to load users"


def resolve_fetch(
    state: UserListState, result: Result[list[User], ApiError]
) -> UserListState:
    """LOADING -> LOADED or FAILED.

    Raises:
        ValueError: If the fetch already resolved.
    """
    if state.status is not UserListStatus.LOADING:
        msg = f"Fetch already resolved (status: {state.status})"
        raise ValueError(msg)
    if result.is_ok:
        return replace(
            state, status=UserListStatus.LOADED, users=tuple(result.value), message=""
        )
    return replace(
        state,
        status=UserListStatus.FAILED,
        users=(),
        message=user_list_error_message(result.error),
    )


def render(state: UserListState) -> UserListView:
    match state.status:
        case UserListStatus.LOADING:
            return UserListView(show_progress=True, message="", rows=())
        case UserListStatus.FAILED:
            return UserListView(show_progress=False, message=state.message, rows=())
        case UserListStatus.LOADED:
            rows = tuple(
                UserRow(
                    user_id=user.id,
                    title=user.full_name,
                    subtitle=user.email,
                    avatar_url=user.avatar_url,
                )
                for user in state.users
            )
            return UserListView(show_progress=False, message="", rows=rows)


class UserListController:
    """Owns ``UserListState`` and issues the single ``list_users`` call."""

    def __init__(
        self,
        api: AuthApi,
        *,
        on_change: Callable[[UserListState], None] | None = None,
    ) -> None:
        self._api = api
        self._on_change = on_change
        self._state = UserListState()
        self._started = False

    @property
    def state(self) -> UserListState:
        return self._state

    @property
    def has_started(self) -> bool:
        return self._started

    async def load(self) -> Result[list[User], ApiError] | None:
        """Fetch the users; later calls on the same controller do nothing.

        Returns:
            The list result, or None if the fetch was already issued.
        """
        if self._started:
            return None
        self._started = True

        result = await self._api.list_users()
        self._state = resolve_fetch(self._state, result)
        log.info(
            "flow.user_list.transitioned",
            to_status=self._state.status.value,
            count=len(self._state.users),
        )
        if self._on_change is not None:
            self._on_change(self._state)
        return result
