"""authflow Terminal User Interface module.

Textual screens bound to the state machines in ``authflow.flows``.

Usage:
    from authflow.tui import AuthflowApp

    app = AuthflowApp()
    await app.run_async()
"""

from authflow.tui.app import AuthflowApp

__all__ = ["AuthflowApp"]
