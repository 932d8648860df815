"""Request body serialization and JSON response parsing."""

import json
from typing import Any
from urllib.parse import urlencode

import structlog

from .exceptions import ParseError

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "text/xml"


def media_type(content_type: str | None) -> str | None:
    """Strip parameters such as charset from a Content-Type value."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower()


def serialize_body(body: Any, content_type: str | None) -> str | bytes:
    """
    Serialize a request body according to its declared content type.

    - application/json: JSON encoded
    - text/xml: passed through unchanged, the caller supplies the XML text
    - anything else: form-url-encoded key/value pairs

    Args:
        body: Body value
        content_type: Declared Content-Type header value, if any

    Returns:
        The encoded body

    Raises:
        TypeError: If an XML body is not already text
    """
    kind = media_type(content_type)

    if kind == JSON_CONTENT_TYPE:
        return json.dumps(body)

    if kind == XML_CONTENT_TYPE:
        if isinstance(body, (str, bytes)):
            return body
        if not body:
            return ""
        raise TypeError("text/xml bodies must be pre-formed XML text")

    if isinstance(body, (str, bytes)):
        return body
    return urlencode(body or {}, doseq=True)


def parse_json(response: str) -> Any:
    """
    Parse a response body as JSON.

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return json.loads(response)
    except json.JSONDecodeError as e:
        logger.warning("Response is not valid JSON", error=str(e), length=len(response))
        raise ParseError(str(e), response) from e
