"""HTTP client for the reqres.in REST API.

``ApiClient`` wraps a single ``httpx.AsyncClient`` with a fixed base URL and
JSON encoding. Every call is a single attempt and every failure comes back
as ``Result.err(ApiError)``:

- non-2xx status            -> ApiErrorKind.SERVER_REJECTED
- missing/unparseable body  -> ApiErrorKind.MALFORMED_RESPONSE
- call could not complete   -> ApiErrorKind.NETWORK_FAILURE

One client is shared by the whole process (``get_api_client``); screens never
build their own.
"""

from typing import Any, Self

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from authflow.api.models import (
    RegisterRequest,
    RegisterResponse,
    User,
    UserListResponse,
)
from authflow.config.models import DEFAULT_BASE_URL, ApiConfig
from authflow.core.errors import ApiError
from authflow.core.types import Result
from authflow.observability.logging import get_logger

log = get_logger(__name__)

REGISTER_ENDPOINT = "register"
USERS_ENDPOINT = "users"


class ApiClient:
    """Async client exposing ``register`` and ``list_users``.

    The client is immutable once built; configuration is read through
    properties only.

    Example:
        async with ApiClient() as client:
            result = await client.list_users()
            if result.is_ok:
                for user in result.value:
                    print(user.full_name)
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL endpoint paths are joined onto.
            timeout: Per-request timeout in seconds.
            api_key: Optional value for the ``x-api-key`` header.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
        """
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"

        headers = {"Accept": "application/json"}
        if api_key:
            headers["x-api-key"] = api_key

        self._base_url = base_url
        self._timeout = timeout
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: ApiConfig, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> Self:
        """Build a client from the ``api`` config section."""
        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            api_key=config.api_key,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *_exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def _send(
        self,
        method: str,
        endpoint: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> Result[httpx.Response, ApiError]:
        """Send one request and classify the outcome by status."""
        log.debug("api.request.started", method=method, endpoint=endpoint)

        try:
            response = await self._http.request(method, endpoint, json=json)
        except httpx.HTTPError as e:
            log.warning(
                "api.request.failed.network",
                method=method,
                endpoint=endpoint,
                error=str(e),
                error_type=type(e).__name__,
            )
            return Result.err(ApiError.from_exception(e, endpoint=endpoint))
        except Exception as e:
            # Anything else from the transport still ends the attempt
            log.exception(
                "api.request.failed.unexpected",
                method=method,
                endpoint=endpoint,
                error=str(e),
            )
            return Result.err(ApiError.from_exception(e, endpoint=endpoint))

        if not response.is_success:
            log.warning(
                "api.request.failed.rejected",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            return Result.err(
                ApiError.server_rejected(
                    response.status_code, endpoint=endpoint, body=response.text
                )
            )

        log.debug(
            "api.request.completed",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
        )
        return Result.ok(response)

    @staticmethod
    def _decode[M: BaseModel](
        response: httpx.Response, model: type[M], endpoint: str
    ) -> Result[M, ApiError]:
        """Parse a success body into ``model``."""
        if not response.content:
            return Result.err(
                ApiError.malformed_response(
                    "empty body", endpoint=endpoint, status_code=response.status_code
                )
            )
        try:
            return Result.ok(model.model_validate_json(response.content))
        except PydanticValidationError as e:
            log.warning(
                "api.response.malformed",
                endpoint=endpoint,
                error_count=e.error_count(),
            )
            return Result.err(
                ApiError.malformed_response(
                    f"{e.error_count()} validation error(s) in {model.__name__}",
                    endpoint=endpoint,
                    status_code=response.status_code,
                )
            )

    async def register(
        self, email: str, password: str
    ) -> Result[RegisterResponse, ApiError]:
        """POST ``register`` with ``{email, password}``.

        Returns:
            Ok(RegisterResponse) with the new id and token, or Err(ApiError).
        """
        body = RegisterRequest(email=email, password=password).model_dump(mode="json")
        result = (await self._send("POST", REGISTER_ENDPOINT, json=body)).and_then(
            lambda response: self._decode(response, RegisterResponse, REGISTER_ENDPOINT)
        )
        if result.is_ok:
            log.info("api.register.completed", user_id=result.value.id)
        return result

    async def list_users(self) -> Result[list[User], ApiError]:
        """GET ``users``.

        Returns:
            Ok(list of User) in received order (possibly empty), or Err(ApiError).
        """
        result = (await self._send("GET", USERS_ENDPOINT)).and_then(
            lambda response: self._decode(response, UserListResponse, USERS_ENDPOINT)
        )
        if result.is_ok:
            log.info("api.users.completed", count=len(result.value.data))
        return result.map(lambda payload: list(payload.data))


_shared_client: ApiClient | None = None


def get_api_client(config: ApiConfig | None = None) -> ApiClient:
    """Return the process-wide client, building it on first call.

    Args:
        config: Used only on the first call. Defaults to the ``api`` section
            of ``load_config()``.
    """
    global _shared_client

    if _shared_client is None:
        if config is None:
            from authflow.config.loader import load_config

            config = load_config().api
        _shared_client = ApiClient.from_config(config)
        log.debug("api.client.created", base_url=_shared_client.base_url)
    return _shared_client


async def close_api_client() -> None:
    """Close and forget the process-wide client, if one was built."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
