"""
simple-http-utilities - async helpers for simple HTTP request/response calls.

Builds request options (host, port, path, content type, credentials) and
issues GET/POST/PUT requests over plain HTTP or TLS, returning the body text
or the parsed JSON.

Example usage:
    import simple_http

    options = simple_http.build_options({
        "host": "localhost",
        "port": 80,
        "path": "/some/endpoint",
        "content_type": "application/json",
        "username": "someUserName",
        "password": "somePassword",
        "use_auth_header": True,
    })

    data = await simple_http.get_json(options)
    reply = await simple_http.post(options, {"some": "var"}, use_https=True)
"""

from .api import get, get_default_client, get_json, post, post_json, put
from .auth import ConnectionAuth, basic_credential
from .client import SimpleHttpClient
from .config import HttpUtilitiesConfig
from .exceptions import (
    ConfigError,
    ParseError,
    SimpleHttpError,
    TransportError,
    ValidationError,
)
from .models import HttpMethod, RequestDescriptor, RequestOptions, ResponseResult
from .options import build_options
from .serialization import parse_json, serialize_body
from .version import __version__

__all__ = [
    # Functions
    "build_options",
    "get",
    "get_json",
    "post",
    "post_json",
    "put",
    "get_default_client",
    # Client
    "SimpleHttpClient",
    # Config
    "HttpUtilitiesConfig",
    # Auth
    "ConnectionAuth",
    "basic_credential",
    # Serialization
    "serialize_body",
    "parse_json",
    # Exceptions
    "SimpleHttpError",
    "ConfigError",
    "ValidationError",
    "ParseError",
    "TransportError",
    # Models
    "HttpMethod",
    "RequestDescriptor",
    "RequestOptions",
    "ResponseResult",
    # Version
    "__version__",
]
