"""simple-http-utilities client implementation."""

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .config import HttpUtilitiesConfig
from .models import HttpMethod, RequestDescriptor, RequestOptions, ResponseResult
from .options import REQUIRED_FIELDS, DescriptorLike, build_options
from .serialization import parse_json, serialize_body
from .transport import send
from .validation import validate_not_empty

logger = structlog.get_logger(__name__)

OptionsLike = RequestOptions | DescriptorLike


class SimpleHttpClient:
    """
    Async helper for simple GET/POST/PUT request/response exchanges.

    Every call opens its own httpx client and closes it once the response has
    been buffered, so one SimpleHttpClient can be shared freely.

    Example:
        ```python
        from simple_http import SimpleHttpClient

        client = SimpleHttpClient()
        options = client.build_options({
            "host": "localhost",
            "port": 8080,
            "path": "/api/items",
            "content_type": "application/json",
            "username": "admin",
            "password": "secret",
        })

        items = await client.get_json(options)
        created = await client.post_json(options, {"name": "widget"})
        ```
    """

    def __init__(
        self,
        config: HttpUtilitiesConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration. If None, uses default config.
            transport: httpx transport to send requests through. If None,
                httpx's network transport is used.
        """
        self.config = config or HttpUtilitiesConfig()
        self._transport = transport
        logger.info("SimpleHttpClient initialized", verify_ssl=self.config.verify_ssl)

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            verify=self.config.verify_ssl,
            timeout=None,
        )

    def _resolve_options(self, options: OptionsLike, function_name: str) -> RequestOptions:
        """Validate the required fields and normalise the input to RequestOptions."""
        validate_not_empty(options, REQUIRED_FIELDS, function_name)
        if isinstance(options, RequestOptions):
            return options
        if isinstance(options, (RequestDescriptor, Mapping)):
            return build_options(options)
        raise TypeError(f"{function_name}: unsupported options type {type(options).__name__}")

    def _request_headers(self, options: RequestOptions) -> dict[str, str]:
        headers = dict(options.headers)
        if options.header("User-Agent") is None:
            headers["User-Agent"] = self.config.user_agent
        return headers

    def build_options(self, descriptor: DescriptorLike) -> RequestOptions:
        """Build request options from a descriptor. See options.build_options."""
        return build_options(descriptor)

    async def perform_request(
        self,
        options: RequestOptions,
        method: HttpMethod,
        body: Any = None,
        *,
        use_https: bool = False,
    ) -> ResponseResult:
        """
        Serialize the body, send the request and buffer the response.

        Args:
            options: Request options
            method: GET, POST or PUT
            body: Request body; ignored for GET
            use_https: Send over TLS instead of plain HTTP

        Returns:
            ResponseResult with status code and body text

        Raises:
            ValidationError: If host, port or path is missing or empty
            TransportError: If the connection or response stream fails
        """
        validate_not_empty(options, REQUIRED_FIELDS, "perform_request")
        method = HttpMethod(method)

        content = None
        if method != HttpMethod.GET:
            content = serialize_body(body, options.header("Content-Type"))

        async with self._new_client() as client:
            return await send(
                client,
                options,
                method,
                content,
                use_https=use_https,
                headers=self._request_headers(options),
                encoding=self.config.encoding,
            )

    # =========================================================================
    # Convenience wrappers
    # =========================================================================

    async def get(self, options: OptionsLike, *, use_https: bool = False) -> str:
        """Send a GET request and return the response body text."""
        resolved = self._resolve_options(options, "get")
        result = await self.perform_request(
            resolved.model_copy(update={"method": HttpMethod.GET}),
            HttpMethod.GET,
            use_https=use_https,
        )
        return result.body

    async def get_json(self, options: OptionsLike, *, use_https: bool = False) -> Any:
        """
        Send a GET request and parse the response body as JSON.

        Raises:
            ParseError: If the response body is not valid JSON
        """
        resolved = self._resolve_options(options, "get_json")
        return parse_json(await self.get(resolved, use_https=use_https))

    async def post(
        self,
        options: OptionsLike,
        body: Any = None,
        *,
        use_https: bool = False,
    ) -> str:
        """Send a POST request and return the response body text.

        An omitted body is sent as an empty structure.
        """
        resolved = self._resolve_options(options, "post")
        result = await self.perform_request(
            resolved.model_copy(update={"method": HttpMethod.POST}),
            HttpMethod.POST,
            {} if body is None else body,
            use_https=use_https,
        )
        return result.body

    async def post_json(
        self,
        options: OptionsLike,
        body: Any = None,
        *,
        use_https: bool = False,
    ) -> Any:
        """
        Send a POST request and parse the response body as JSON.

        Raises:
            ParseError: If the response body is not valid JSON
        """
        resolved = self._resolve_options(options, "post_json")
        return parse_json(await self.post(resolved, body, use_https=use_https))

    async def put(
        self,
        options: OptionsLike,
        body: Any = None,
        *,
        use_https: bool = False,
    ) -> str:
        """Send a PUT request and return the response body text."""
        resolved = self._resolve_options(options, "put")
        result = await self.perform_request(
            resolved.model_copy(update={"method": HttpMethod.PUT}),
            HttpMethod.PUT,
            {} if body is None else body,
            use_https=use_https,
        )
        return result.body
