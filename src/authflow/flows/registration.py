"""Registration screen state machine.

States::

    IDLE --submit--> SUBMITTING --Ok--> SUCCESS (navigate, terminal)
      ^                   |
      |                  Err
      +--submit-- FAILED <+

A submit attempt from FAILED first returns to IDLE, clearing the message,
whether or not a request follows.

``RegistrationState`` is the single source of truth for the screen. The
transition functions and ``render`` are pure; ``RegistrationController``
is the only place that awaits the API and fires navigation.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import StrEnum

from authflow.api.base import AuthApi
from authflow.api.models import RegisterResponse
from authflow.core.errors import ApiError, ApiErrorKind
from authflow.core.types import Result
from authflow.observability.logging import get_logger

log = get_logger(__name__)


class RegistrationStatus(StrEnum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RegistrationState:
    """Everything the registration screen shows.

    Attributes:
        status: Current state machine state.
        email: Email field contents.
        password: Password field contents.
        message: Error text shown under the form; empty when none.
    """

    status: RegistrationStatus = RegistrationStatus.IDLE
    email: str = ""
    password: str = field(default="", repr=False)
    message: str = ""

    @property
    def has_required_fields(self) -> bool:
        return bool(self.email.strip()) and bool(self.password.strip())

    @property
    def can_submit(self) -> bool:
        return (
            self.status in (RegistrationStatus.IDLE, RegistrationStatus.FAILED)
            and self.has_required_fields
        )


@dataclass(frozen=True, slots=True)
class RegistrationView:
    """Render output for the registration screen."""

    email: str
    password: str = field(repr=False)
    inputs_enabled: bool
    submit_enabled: bool
    show_progress: bool
    message: str


def registration_error_message(error: ApiError) -> str:
    """Turn a failed register call into the text shown on the form."""
    match error.kind:
        case ApiErrorKind.SERVER_REJECTED:
            return "Registration Failed"
        case ApiErrorKind.MALFORMED_RESPONSE:
            return "Unknown error occurred"
        case ApiErrorKind.NETWORK_FAILURE:
            return f"Network Error: {error.message}"


def edit_email(state: RegistrationState, email: str) -> RegistrationState:
    if state.status is RegistrationStatus.SUBMITTING:
        return state
    return replace(state, email=email)


def edit_password(state: RegistrationState, password: str) -> RegistrationState:
    if state.status is RegistrationStatus.SUBMITTING:
        return state
    return replace(state, password=password)


def clear_failure(state: RegistrationState) -> RegistrationState:
    """FAILED -> IDLE with the message cleared; any other state is returned as is."""
    if state.status is not RegistrationStatus.FAILED:
        return state
    return replace(state, status=RegistrationStatus.IDLE, message="")


def begin_submit(state: RegistrationState) -> RegistrationState:
    """IDLE/FAILED -> SUBMITTING, clearing any previous message.

    Raises:
        ValueError: If the state does not allow a submit.
    """
    if not state.can_submit:
        msg = f"Cannot submit from {state.status} (fields present: {state.has_required_fields})"
        raise ValueError(msg)
    return replace(state, status=RegistrationStatus.SUBMITTING, message="")


def resolve_submit(
    state: RegistrationState, result: Result[RegisterResponse, ApiError]
) -> RegistrationState:
    """SUBMITTING -> SUCCESS or FAILED. Fields keep their values either way.

    Raises:
        ValueError: If no submit is in flight.
    """
    if state.status is not RegistrationStatus.SUBMITTING:
        msg = f"No submit in flight (status: {state.status})"
        raise ValueError(msg)
    if result.is_ok:
        return replace(state, status=RegistrationStatus.SUCCESS, message="")
    return replace(
        state,
        status=RegistrationStatus.FAILED,
        message=registration_error_message(result.error),
    )


def render(state: RegistrationState) -> RegistrationView:
    return RegistrationView(
        email=state.email,
        password=state.password,
        inputs_enabled=state.status is not RegistrationStatus.SUBMITTING,
        submit_enabled=state.can_submit,
        show_progress=state.status is RegistrationStatus.SUBMITTING,
        message=state.message,
    )


class RegistrationController:
    """Drives ``RegistrationState`` through one register call per submit.

    Example:
        controller = RegistrationController(
            get_api_client(),
            on_registered=lambda response: app.switch_screen(UserListScreen()),
        )
        controller.update_email("eve.holt@reqres.in")
        controller.update_password("pistol")
        await controller.submit()
    """

    def __init__(
        self,
        api: AuthApi,
        *,
        on_registered: Callable[[RegisterResponse], None],
        on_change: Callable[[RegistrationState], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            api: Client used for the register call.
            on_registered: Navigation hook, called once on success.
            on_change: Called with the new state after every transition.
        """
        self._api = api
        self._on_registered = on_registered
        self._on_change = on_change
        self._state = RegistrationState()

    @property
    def state(self) -> RegistrationState:
        return self._state

    def _set_state(self, new_state: RegistrationState) -> None:
        if new_state == self._state:
            return
        if new_state.status is not self._state.status:
            log.info(
                "flow.registration.transitioned",
                from_status=self._state.status.value,
                to_status=new_state.status.value,
            )
        self._state = new_state
        if self._on_change is not None:
            self._on_change(new_state)

    def update_email(self, email: str) -> None:
        self._set_state(edit_email(self._state, email))

    def update_password(self, password: str) -> None:
        self._set_state(edit_password(self._state, password))

    async def submit(self) -> Result[RegisterResponse, ApiError] | None:
        """Run one registration attempt.

        Returns:
            The register result, or None when no request was issued (a field
            is blank, a submit is already in flight, or registration already
            succeeded).
        """
        self._set_state(clear_failure(self._state))
        if not self._state.can_submit:
            log.debug(
                "flow.registration.submit_ignored",
                status=self._state.status.value,
                has_required_fields=self._state.has_required_fields,
            )
            return None

        self._set_state(begin_submit(self._state))
        result = await self._api.register(self._state.email, self._state.password)
        self._set_state(resolve_submit(self._state, result))

        if result.is_ok:
            self._on_registered(result.value)
        return result
