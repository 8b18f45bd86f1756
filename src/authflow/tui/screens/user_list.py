"""User list screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Label, LoadingIndicator, Static

from authflow.flows.user_list import (
    UserListController,
    UserListState,
    UserListView,
    render,
)

if TYPE_CHECKING:
    from authflow.api.base import AuthApi

# Column header -> UserRow attribute
USER_COLUMNS = {
    "Name": "title",
    "Email": "subtitle",
    "Avatar": "avatar_url",
}


class UserListScreen(Screen[None]):
    """Shows a progress indicator, then either the users or an error."""

    DEFAULT_CSS = """
    UserListScreen {
        padding: 1 2;
    }

    UserListScreen .list-title {
        text-style: bold;
        margin-bottom: 1;
    }

    UserListScreen #message {
        color: $error;
    }

    UserListScreen #users {
        height: 1fr;
    }
    """

    def __init__(self, api: AuthApi, name: str | None = None, id: str | None = None) -> None:
        super().__init__(name=name, id=id)
        self._controller = UserListController(api, on_change=self._handle_state_change)

    @property
    def state(self) -> UserListState:
        return self._controller.state

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label("Users", classes="list-title")
        yield LoadingIndicator(id="progress")
        yield Static("", id="message")
        yield DataTable(id="users", cursor_type="row")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#users", DataTable).add_columns(*USER_COLUMNS.keys())
        self._paint(render(self._controller.state))
        self.run_worker(self._controller.load(), group="users")

    def _paint(self, view: UserListView) -> None:
        self.query_one("#progress", LoadingIndicator).display = view.show_progress

        message = self.query_one("#message", Static)
        message.update(Text(view.message))
        message.display = bool(view.message)

        table = self.query_one("#users", DataTable)
        table.clear()
        for row in view.rows:
            # Row keys are left to the table; ids may repeat within a response
            table.add_row(*(Text(str(getattr(row, attr))) for attr in USER_COLUMNS.values()))
        table.display = not view.show_progress and not view.message

    def _handle_state_change(self, state: UserListState) -> None:
        if self.is_mounted:
            self._paint(render(state))


__all__ = ["UserListScreen"]
