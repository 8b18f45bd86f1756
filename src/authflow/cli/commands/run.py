"""Launch the interactive registration + user list app."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from authflow.api.client import get_api_client
from authflow.observability.logging import set_console_logging

if TYPE_CHECKING:
    from authflow.config.models import AuthflowConfig


def run(ctx: typer.Context) -> None:
    """Open the registration screen; the user list follows on success.

    Keys: Tab moves between fields, Enter submits, Ctrl+Q quits.
    """
    from authflow.tui import AuthflowApp

    settings: AuthflowConfig = ctx.obj
    # Build the shared client from the loaded config before the app asks for it
    get_api_client(settings.api)

    # Textual owns the terminal; stderr log lines would corrupt the screen
    set_console_logging(False)
    try:
        AuthflowApp().run()
    finally:
        set_console_logging(True)


__all__ = ["run"]
