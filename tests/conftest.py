"""Pytest configuration for simple-http-utilities tests."""

import pytest

from simple_http import SimpleHttpClient

from .helpers import RecordingTransport


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def minimal_descriptor():
    """Descriptor with only the required fields."""
    return {"host": "localhost", "port": 80, "path": "/some/path"}


@pytest.fixture
def transport():
    """Transport answering 200 with an empty body."""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """Client sending through the recording transport."""
    return SimpleHttpClient(transport=transport)
