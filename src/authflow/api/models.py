"""Wire models for the reqres.in REST API.

Request bodies are serialised with ``model_dump(mode="json")`` and response
bodies are parsed with ``model_validate``; a body that fails validation is
reported by the client as a malformed response.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel, frozen=True):
    """Body of ``POST register``.

    Attributes:
        email: Address to register.
        password: Plain password; never logged.
    """

    email: str
    password: str = Field(repr=False)


class RegisterResponse(BaseModel, frozen=True):
    """Successful ``POST register`` body.

    Attributes:
        id: Server-assigned account id.
        token: Session token; kept in memory only.
    """

    id: int
    token: str = Field(repr=False)


class User(BaseModel):
    """A user as returned by ``GET users``.

    The API names the avatar field ``avatar``; it is exposed here as
    ``avatar_url``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    email: str
    first_name: str
    last_name: str
    avatar_url: str = Field(alias="avatar")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class UserListResponse(BaseModel, frozen=True):
    """Successful ``GET users`` body. Only ``data`` is consumed."""

    data: list[User]
