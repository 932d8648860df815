"""Basic credential encoding and connection-level auth for httpx."""

import base64
from collections.abc import Generator

import httpx


def basic_credential(username: str, password: str | None) -> str:
    """Encode ``username:password`` as a Basic authorization value.

    A missing password encodes as an empty string.
    """
    raw = f"{username}:{password or ''}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class ConnectionAuth(httpx.Auth):
    """Applies a RequestOptions.auth value to every outgoing request.

    A value that already carries a scheme (``Basic ...``, ``Bearer ...``) is
    sent as the Authorization header unchanged. A bare ``user:password`` value
    is Basic-encoded first, and a bare token without a colon is Basic-encoded
    as it stands (``base64(token)``, no trailing colon). An Authorization
    header already present on the request is left alone.
    """

    def __init__(self, credential: str) -> None:
        self._header_value = self._to_header_value(credential)

    @staticmethod
    def _to_header_value(credential: str) -> str:
        scheme, sep, _ = credential.partition(" ")
        if sep and scheme and ":" not in scheme:
            return credential
        if ":" not in credential:
            return "Basic " + base64.b64encode(credential.encode("utf-8")).decode("ascii")
        username, _, password = credential.partition(":")
        return basic_credential(username, password)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if "Authorization" not in request.headers:
            request.headers["Authorization"] = self._header_value
        yield request
