"""Main TUI application using the Textual framework.

AuthflowApp:
- starts on the registration screen
- switches (one way, no back navigation) to the user list on success
- shares a single API client between both screens
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.app import App
from textual.binding import Binding

from authflow.api.client import close_api_client, get_api_client
from authflow.observability.logging import get_logger
from authflow.tui.screens import RegistrationScreen, UserListScreen

if TYPE_CHECKING:
    from authflow.api.base import AuthApi

log = get_logger(__name__)


class AuthflowApp(App[None]):
    """Registration followed by the user list."""

    TITLE = "authflow"
    SUB_TITLE = "reqres.in demo"

    CSS = """
    Screen {
        background: $background;
    }

    Header {
        background: $primary;
        color: $text;
        text-style: bold;
        dock: top;
    }

    Footer {
        background: $surface;
        color: $text-muted;
        dock: bottom;
        height: 1;
    }
    """

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        api: AuthApi | None = None,
        *,
        driver_class: type | None = None,
    ) -> None:
        """Initialize AuthflowApp.

        Args:
            api: Client for both screens. Defaults to the shared ApiClient,
                which the app then closes on exit.
            driver_class: Optional Textual driver class for testing.
        """
        super().__init__(driver_class=driver_class)
        self._owns_api = api is None
        self._api: AuthApi = api if api is not None else get_api_client()
        self._registered_user_id: int | None = None

    @property
    def api(self) -> AuthApi:
        return self._api

    @property
    def registered_user_id(self) -> int | None:
        """Id returned by a successful registration in this session."""
        return self._registered_user_id

    def on_mount(self) -> None:
        self.push_screen(RegistrationScreen(self._api))

    def on_registration_screen_registered(self, message: RegistrationScreen.Registered) -> None:
        """Leave the form for the user list; the form is discarded."""
        self._registered_user_id = message.response.id
        log.info("tui.navigation.user_list", user_id=message.response.id)
        self.switch_screen(UserListScreen(self._api))

    async def on_unmount(self) -> None:
        if self._owns_api:
            await close_api_client()
