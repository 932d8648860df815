"""Configuration for simple-http-utilities."""

import codecs
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .version import __version__

DEFAULT_USER_AGENT = f"simple-http-utilities/{__version__}"


class EnvSettings(BaseSettings):
    """SIMPLE_HTTP_* environment variables.

    Booleans are parsed strictly, so an unrecognised SIMPLE_HTTP_VERIFY_SSL
    value is rejected instead of turning verification off.
    """

    verify_ssl: bool = True
    encoding: str | None = None
    user_agent: str = DEFAULT_USER_AGENT

    model_config = SettingsConfigDict(env_prefix="SIMPLE_HTTP_", env_ignore_empty=True)


@dataclass
class HttpUtilitiesConfig:
    """
    Configuration for SimpleHttpClient.

    Attributes:
        verify_ssl: Whether to verify TLS certificates on https requests (default: True)
        encoding: Text encoding forced onto responses. None lets the
            response headers decide (default: None)
        user_agent: User-Agent header sent unless the request options set one

    Example:
        ```python
        config = HttpUtilitiesConfig(verify_ssl=False, encoding="latin-1")
        client = SimpleHttpClient(config)
        ```
    """

    verify_ssl: bool = True
    encoding: str | None = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.user_agent:
            raise ConfigError("user_agent is required")

        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                raise ConfigError(f"unknown encoding: {self.encoding}")

    @classmethod
    def from_env(cls) -> "HttpUtilitiesConfig":
        """Build a configuration from SIMPLE_HTTP_* environment variables.

        Raises:
            ConfigError: If a variable cannot be parsed
        """
        try:
            settings = EnvSettings()
        except PydanticValidationError as e:
            raise ConfigError(f"invalid SIMPLE_HTTP_* environment: {e}") from e

        return cls(**settings.model_dump())
