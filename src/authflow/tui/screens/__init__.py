"""TUI screens: the registration form and the user list it leads to."""

from authflow.tui.screens.registration import RegistrationScreen
from authflow.tui.screens.user_list import UserListScreen

__all__ = [
    "RegistrationScreen",
    "UserListScreen",
]
