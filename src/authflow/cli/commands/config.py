"""Config command group for authflow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from rich.markup import escape
import typer

from authflow.cli.formatters.panels import print_error, print_success
from authflow.cli.formatters.tables import create_key_value_table, print_table
from authflow.config.loader import create_default_config, load_config
from authflow.core.errors import ConfigError
from authflow.core.security import sanitize_for_logging

if TYPE_CHECKING:
    from authflow.config.models import AuthflowConfig

app = typer.Typer(
    name="config",
    help="Manage authflow configuration.",
    no_args_is_help=True,
)


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


@app.command()
def show(ctx: typer.Context) -> None:
    """Display the effective configuration (secrets redacted)."""
    settings: AuthflowConfig | None = ctx.obj
    if settings is None:
        # The root callback let an invalid file through; report it here
        try:
            settings = load_config(ctx.find_root().params.get("config_path"))
        except ConfigError as e:
            print_error(escape(e.message), title="Configuration Error")
            raise typer.Exit(1) from e
    data = sanitize_for_logging(settings.model_dump(mode="json"))
    print_table(create_key_value_table(_flatten(data), "Current Configuration"))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config.yaml."),
    ] = False,
) -> None:
    """Write ~/.authflow/config.yaml with default values."""
    try:
        path = create_default_config(overwrite=force)
    except ConfigError as e:
        print_error(f"{escape(e.message)}\nUse --force to overwrite.")
        raise typer.Exit(1) from e
    print_success(f"Configuration written to {escape(str(path))}")


__all__ = ["app"]
