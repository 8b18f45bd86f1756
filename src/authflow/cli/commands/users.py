"""Headless user listing through the user list flow."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from rich.markup import escape
import typer

from authflow.api.client import close_api_client, get_api_client
from authflow.cli.formatters.panels import print_error, print_info
from authflow.cli.formatters.tables import create_user_table, print_table
from authflow.flows.user_list import UserListController, UserListState, render

if TYPE_CHECKING:
    from authflow.api.base import AuthApi
    from authflow.config.models import AuthflowConfig


async def _load(api: AuthApi) -> UserListState:
    controller = UserListController(api)
    try:
        await controller.load()
    finally:
        await close_api_client()
    return controller.state


def users(ctx: typer.Context) -> None:
    """List users, as the user list screen would."""
    settings: AuthflowConfig = ctx.obj
    state = asyncio.run(_load(get_api_client(settings.api)))
    view = render(state)

    if view.message:
        print_error(escape(view.message), title="Users")
        raise typer.Exit(1)

    if not view.rows:
        print_info("No users found.", title="Users")
        return

    print_table(create_user_table(view.rows))


__all__ = ["users"]
