"""Rich tables for structured CLI output."""

from typing import Any

from rich.markup import escape
from rich.table import Table

from authflow.cli.formatters import console
from authflow.flows.user_list import UserRow


def create_table(
    title: str | None = None,
    *,
    show_header: bool = True,
    border_style: str = "blue",
    header_style: str = "bold cyan",
) -> Table:
    """Create a Rich Table with the shared authflow styling.

    Rows alternate between plain and dim.
    """
    return Table(
        title=title,
        show_header=show_header,
        border_style=border_style,
        header_style=header_style,
        row_styles=["", "dim"],
    )


def create_key_value_table(
    data: dict[str, Any],
    title: str | None = None,
    *,
    key_style: str = "cyan",
) -> Table:
    """Create a two-column table for flat key-value data.

    Example:
        table = create_key_value_table({"api.base_url": "https://reqres.in/api/"})
        print_table(table)
    """
    table = create_table(title, show_header=False)
    table.add_column("Key", style=key_style, no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(str(key)), escape(str(value)))

    return table


def create_user_table(
    rows: tuple[UserRow, ...] | list[UserRow],
    title: str | None = "Users",
) -> Table:
    """Create a table with one line per rendered user row, in order."""
    table = create_table(title)
    table.add_column("ID", justify="right", style="muted")
    table.add_column("Name", style="highlight")
    table.add_column("Email")
    table.add_column("Avatar", style="muted", overflow="fold")

    for row in rows:
        table.add_row(
            str(row.user_id),
            escape(row.title),
            escape(row.subtitle),
            escape(row.avatar_url),
        )

    return table


def print_table(table: Table) -> None:
    console.print(table)


__all__ = [
    "create_table",
    "create_key_value_table",
    "create_user_table",
    "print_table",
]
