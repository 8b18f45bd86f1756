"""authflow CLI main entry point.

Defines the main Typer application, loads configuration and logging once in
the root callback, and registers all commands.
"""

from pathlib import Path
from typing import Annotated

from rich.markup import escape
import typer

from authflow import __version__
from authflow.cli.commands import config, register, run, users
from authflow.cli.formatters import console
from authflow.cli.formatters.panels import print_error
from authflow.config import (
    AuthflowConfig,
    get_config_dir,
    get_default_config,
    load_config,
)
from authflow.core.errors import ConfigError
from authflow.observability.logging import (
    LoggingConfig,
    configure_logging,
    get_mode_from_env,
    set_console_logging,
)

app = typer.Typer(
    name="authflow",
    help="authflow - Register an account and browse users on the reqres.in demo API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("run")(run.run)
app.command("register")(register.register)
app.command("users")(users.users)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]authflow[/] version [green]{__version__}[/]")
        raise typer.Exit()


def _configure_logging(settings: AuthflowConfig, *, debug: bool) -> None:
    log_file = None
    if settings.logging.enable_file_logging:
        log_file = get_config_dir() / settings.logging.log_path

    configure_logging(
        LoggingConfig(
            mode=get_mode_from_env(),
            log_level="DEBUG" if debug else settings.logging.level.upper(),
            log_file=log_file,
        )
    )
    set_console_logging(debug)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Config file to use instead of ~/.authflow/config.yaml.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show debug log output on stderr."),
    ] = False,
) -> None:
    """authflow - registration and user listing against reqres.in.

    Use [bold cyan]authflow COMMAND --help[/] for command-specific help.
    """
    settings: AuthflowConfig | None
    try:
        settings = load_config(config_path)
    except ConfigError as e:
        # `config` subcommands stay usable so a broken file can be replaced
        if ctx.invoked_subcommand != "config":
            print_error(escape(e.message), title="Configuration Error")
            raise typer.Exit(1) from e
        settings = None

    _configure_logging(settings or get_default_config(), debug=debug)
    ctx.obj = settings


__all__ = ["app", "main"]
