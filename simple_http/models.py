"""Data models for simple-http-utilities."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field


class HttpMethod(str, Enum):
    """Supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


# =============================================================================
# Request Models
# =============================================================================


class RequestDescriptor(BaseModel):
    """Caller input for building request options.

    host, port and path are optional here so that a missing value is reported
    by the validator with the field name instead of by pydantic.
    """

    host: str | None = None
    port: int | None = None
    path: str | None = None
    content_type: str | None = Field(
        None,
        validation_alias=AliasChoices("content_type", "contentType"),
        description="Sent as the Content-Type header",
    )
    auth: str | None = Field(None, description="Connection-level credential, used verbatim")
    username: str | None = Field(
        None,
        validation_alias=AliasChoices("username", "userName"),
        description="Basic auth user name",
    )
    password: str | None = Field(None, description="Basic auth password")
    use_auth_header: bool = Field(
        False,
        validation_alias=AliasChoices("use_auth_header", "useAuthHeader", "useHeader"),
        description="Send Basic credentials as an Authorization header instead of auth",
    )
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")

    model_config = {"populate_by_name": True, "extra": "forbid"}


class RequestOptions(BaseModel):
    """Normalized request configuration handed to the transport."""

    host: str
    port: int
    path: str
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = Field(default_factory=dict)
    auth: str | None = None

    model_config = {"frozen": True}

    def header(self, name: str) -> str | None:
        """Look up a header value case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


# =============================================================================
# Response Models
# =============================================================================


class ResponseResult(BaseModel):
    """Status code and fully buffered body of one response."""

    status_code: int
    body: str

    model_config = {"frozen": True}
