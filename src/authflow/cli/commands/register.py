"""Headless registration through the registration flow."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Annotated

from rich.markup import escape
import typer

from authflow.api.client import close_api_client, get_api_client
from authflow.cli.formatters.panels import print_error, print_success
from authflow.core.security import mask_secret
from authflow.flows.registration import RegistrationController, RegistrationStatus

if TYPE_CHECKING:
    from authflow.api.base import AuthApi
    from authflow.api.models import RegisterResponse
    from authflow.config.models import AuthflowConfig
    from authflow.flows.registration import RegistrationState


async def _submit(
    api: AuthApi, email: str, password: str
) -> tuple[RegistrationState, RegisterResponse | None]:
    registered: list[RegisterResponse] = []
    controller = RegistrationController(api, on_registered=registered.append)
    controller.update_email(email)
    controller.update_password(password)
    try:
        await controller.submit()
    finally:
        await close_api_client()
    return controller.state, registered[0] if registered else None


def register(
    ctx: typer.Context,
    email: Annotated[str, typer.Argument(help="Email address to register.")],
    password: Annotated[
        str,
        typer.Option(
            "--password",
            "-p",
            prompt=True,
            hide_input=True,
            help="Account password (prompted when omitted).",
        ),
    ],
) -> None:
    """Register an account, as the registration screen would.

    Examples:

        authflow register eve.holt@reqres.in

        authflow register eve.holt@reqres.in --password pistol
    """
    settings: AuthflowConfig = ctx.obj
    api = get_api_client(settings.api)
    state, response = asyncio.run(_submit(api, email, password))

    if state.status is RegistrationStatus.SUCCESS and response is not None:
        print_success(
            f"Registered user [bold]{response.id}[/] (token {mask_secret(response.token)})",
            title="Registration Successful",
        )
        return

    if state.status is RegistrationStatus.FAILED:
        print_error(escape(state.message), title="Registration")
    else:
        print_error("Email and password are required.", title="Registration")
    raise typer.Exit(1)


__all__ = ["register"]
