"""Module-level shortcuts backed by a default SimpleHttpClient."""

from functools import lru_cache
from typing import Any

from .client import OptionsLike, SimpleHttpClient
from .config import HttpUtilitiesConfig
from .options import build_options


@lru_cache(maxsize=1)
def get_default_client() -> SimpleHttpClient:
    """Return the shared client configured from SIMPLE_HTTP_* environment variables."""
    return SimpleHttpClient(HttpUtilitiesConfig.from_env())


async def get(options: OptionsLike, *, use_https: bool = False) -> str:
    """Send a GET request and return the response body text."""
    return await get_default_client().get(options, use_https=use_https)


async def get_json(options: OptionsLike, *, use_https: bool = False) -> Any:
    """Send a GET request and return the parsed JSON response."""
    return await get_default_client().get_json(options, use_https=use_https)


async def post(options: OptionsLike, body: Any = None, *, use_https: bool = False) -> str:
    """Send a POST request and return the response body text."""
    return await get_default_client().post(options, body, use_https=use_https)


async def post_json(options: OptionsLike, body: Any = None, *, use_https: bool = False) -> Any:
    """Send a POST request and return the parsed JSON response."""
    return await get_default_client().post_json(options, body, use_https=use_https)


async def put(options: OptionsLike, body: Any = None, *, use_https: bool = False) -> str:
    """Send a PUT request and return the response body text."""
    return await get_default_client().put(options, body, use_https=use_https)


__all__ = ["build_options", "get", "get_json", "post", "post_json", "put", "get_default_client"]
