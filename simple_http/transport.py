"""One request/response exchange over httpx.

The response is streamed and every text chunk buffered; the caller only sees
the result once the stream has ended.
"""

import httpx
import structlog

from .auth import ConnectionAuth
from .exceptions import TransportError
from .models import HttpMethod, RequestOptions, ResponseResult

logger = structlog.get_logger(__name__)


def build_url(options: RequestOptions, use_https: bool) -> str:
    """Build the absolute URL for the options and the chosen channel."""
    scheme = "https" if use_https else "http"
    host = options.host
    # IPv6 literals must be bracketed in the authority
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    path = options.path if options.path.startswith("/") else f"/{options.path}"
    return f"{scheme}://{host}:{options.port}{path}"


async def send(
    client: httpx.AsyncClient,
    options: RequestOptions,
    method: HttpMethod,
    content: str | bytes | None = None,
    *,
    use_https: bool = False,
    headers: dict[str, str] | None = None,
    encoding: str | None = None,
) -> ResponseResult:
    """
    Issue one request and buffer the whole response.

    Args:
        client: Open httpx client
        options: Request options (host, port, path, headers, auth)
        method: HTTP method
        content: Encoded body, None for no body
        use_https: Use the TLS channel instead of plain HTTP
        headers: Headers to send, defaults to options.headers
        encoding: Forced response text encoding

    Returns:
        ResponseResult with the status code and concatenated body

    Raises:
        TransportError: If the connection or the response stream fails
    """
    url = build_url(options, use_https)
    auth = ConnectionAuth(options.auth) if options.auth else None

    logger.debug("Request issued", method=method.value, url=url, has_body=content is not None)

    try:
        async with client.stream(
            method.value,
            url,
            headers=headers if headers is not None else options.headers,
            content=content,
            auth=auth,
        ) as response:
            if encoding:
                response.encoding = encoding
            chunks: list[str] = []
            async for chunk in response.aiter_text():
                chunks.append(chunk)
            status_code = response.status_code

    except httpx.InvalidURL as e:
        logger.error("Invalid request URL", method=method.value, url=url, error=str(e))
        raise TransportError(f"{method.value} {url} failed: invalid URL: {e}") from e
    except (httpx.RequestError, httpx.StreamError) as e:
        logger.error("Request failed", method=method.value, url=url, error=str(e))
        raise TransportError(f"{method.value} {url} failed: {e}") from e

    body = "".join(chunks)
    logger.info(
        "Request completed",
        method=method.value,
        url=url,
        status_code=status_code,
        length=len(body),
    )
    return ResponseResult(status_code=status_code, body=body)
