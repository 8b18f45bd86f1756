"""REST API access for authflow."""

from authflow.api.base import AuthApi
from authflow.api.client import ApiClient, close_api_client, get_api_client
from authflow.api.models import (
    RegisterRequest,
    RegisterResponse,
    User,
    UserListResponse,
)

__all__ = [
    "AuthApi",
    "ApiClient",
    "get_api_client",
    "close_api_client",
    "RegisterRequest",
    "RegisterResponse",
    "User",
    "UserListResponse",
]
