"""Registration form screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, LoadingIndicator, Static

from authflow.flows.registration import (
    RegistrationController,
    RegistrationState,
    RegistrationStatus,
    RegistrationView,
    render,
)

if TYPE_CHECKING:
    from authflow.api.base import AuthApi
    from authflow.api.models import RegisterResponse


class RegistrationScreen(Screen[None]):
    """Email/password form that registers and then hands off to the user list.

    The screen owns no state of its own: inputs feed the controller, and
    every controller transition repaints the widgets from ``render``.
    """

    DEFAULT_CSS = """
    RegistrationScreen {
        align: center middle;
    }

    RegistrationScreen > #registration-form {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $primary;
        background: $surface;
    }

    RegistrationScreen .form-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    RegistrationScreen Input {
        margin-bottom: 1;
    }

    RegistrationScreen #register {
        width: 100%;
    }

    RegistrationScreen #progress {
        height: 3;
    }

    RegistrationScreen #message {
        color: $error;
        margin-top: 1;
    }
    """

    class Registered(Message):
        """Posted once when the register call succeeds."""

        def __init__(self, response: RegisterResponse) -> None:
            self.response = response
            super().__init__()

    def __init__(self, api: AuthApi, name: str | None = None, id: str | None = None) -> None:
        super().__init__(name=name, id=id)
        self._controller = RegistrationController(
            api,
            on_registered=self._handle_registered,
            on_change=self._handle_state_change,
        )

    @property
    def state(self) -> RegistrationState:
        return self._controller.state

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="registration-form"):
            yield Label("Create Account!", classes="form-title")
            yield Input(placeholder="Email Address", id="email")
            yield Input(placeholder="Password", password=True, id="password")
            yield Button("Register", variant="primary", id="register")
            yield LoadingIndicator(id="progress")
            yield Static("", id="message")
        yield Footer()

    def on_mount(self) -> None:
        self._paint(render(self._controller.state))
        self.query_one("#email", Input).focus()

    def _paint(self, view: RegistrationView) -> None:
        for input_id in ("#email", "#password"):
            self.query_one(input_id, Input).disabled = not view.inputs_enabled
        self.query_one("#register", Button).disabled = not view.submit_enabled
        self.query_one("#progress", LoadingIndicator).display = view.show_progress
        message = self.query_one("#message", Static)
        message.update(Text(view.message))
        message.display = bool(view.message)

    def _handle_state_change(self, state: RegistrationState) -> None:
        if self.is_mounted:
            self._paint(render(state))

    def _handle_registered(self, response: RegisterResponse) -> None:
        self.post_message(self.Registered(response))

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "email":
            self._controller.update_email(event.value)
        elif event.input.id == "password":
            self._controller.update_password(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "register":
            self.action_submit()

    def action_submit(self) -> None:
        """Hand a submit attempt to the controller in a worker.

        The controller decides whether a request is issued; a FAILED form
        is reset to IDLE even when a field is blank.
        """
        if self._controller.state.status in (
            RegistrationStatus.SUBMITTING,
            RegistrationStatus.SUCCESS,
        ):
            return
        # Not exclusive: an in-flight register is never cancelled; the
        # controller drops duplicate submits.
        self.run_worker(self._controller.submit(), group="register")


__all__ = ["RegistrationScreen"]
