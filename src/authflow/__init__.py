"""authflow - account registration and user browsing for the reqres.in demo API.

A small client that registers an account against the reqres.in demo service
and, once registered, lists the users the service returns. It ships both an
interactive terminal app and headless commands.

Example:
    # Using CLI
    authflow run
    authflow register eve.holt@reqres.in -p cityslicka
    authflow users

    # Using Python
    from authflow.api import ApiClient
    from authflow.flows import RegistrationController
"""

__version__ = "0.1.0"

__all__ = ["__version__", "main"]


def main() -> None:
    """Main entry point for the authflow CLI.

    This function invokes the Typer app from authflow.cli.main.
    """
    from authflow.cli.main import app

    app()
