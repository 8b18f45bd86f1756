"""authflow CLI module.

Command-line interface built with Typer, with Rich for terminal output.
"""

from authflow.cli.main import app

__all__ = ["app"]
