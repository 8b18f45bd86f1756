"""Rich panels for outcome messages."""

from rich.panel import Panel

from authflow.cli.formatters import console


def _panel(message: str, title: str, style: str, colour: str, expand: bool) -> Panel:
    return Panel(
        f"[{style}]{message}[/]",
        title=f"[bold {colour}]{title}[/]",
        border_style=colour,
        expand=expand,
    )


def info_panel(message: str, title: str = "Info", *, expand: bool = False) -> Panel:
    return _panel(message, title, "info", "blue", expand)


def error_panel(message: str, title: str = "Error", *, expand: bool = False) -> Panel:
    return _panel(message, title, "error", "red", expand)


def success_panel(message: str, title: str = "Success", *, expand: bool = False) -> Panel:
    return _panel(message, title, "success", "green", expand)


def print_info(message: str, title: str = "Info") -> None:
    console.print(info_panel(message, title))


def print_error(message: str, title: str = "Error") -> None:
    console.print(error_panel(message, title))


def print_success(message: str, title: str = "Success") -> None:
    console.print(success_panel(message, title))


__all__ = [
    "info_panel",
    "error_panel",
    "success_panel",
    "print_info",
    "print_error",
    "print_success",
]
