"""Screen state machines, independent of any UI toolkit.

- registration: IDLE -> SUBMITTING -> SUCCESS | FAILED
- user_list: LOADING -> LOADED | FAILED
"""

from authflow.flows.registration import (
    RegistrationController,
    RegistrationState,
    RegistrationStatus,
    RegistrationView,
)
from authflow.flows.user_list import (
    UserListController,
    UserListState,
    UserListStatus,
    UserListView,
    UserRow,
)

__all__ = [
    "RegistrationController",
    "RegistrationState",
    "RegistrationStatus",
    "RegistrationView",
    "UserListController",
    "UserListState",
    "UserListStatus",
    "UserListView",
    "UserRow",
]
