"""Request options builder.

Turns a RequestDescriptor (or a mapping with the same keys) into the
RequestOptions consumed by the transport. Credentials are resolved in order:
an explicit ``auth`` value, then ``username``/``password`` encoded as Basic
auth, then nothing.
"""

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from .auth import basic_credential
from .exceptions import ValidationError
from .models import RequestDescriptor, RequestOptions
from .validation import is_empty, validate_not_empty

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("host", "port", "path")

DescriptorLike = RequestDescriptor | Mapping[str, Any]


def build_options(descriptor: DescriptorLike) -> RequestOptions:
    """
    Build request options from a descriptor.

    Args:
        descriptor: RequestDescriptor or mapping with host, port, path and
            optional content_type, auth, username, password, use_auth_header

    Returns:
        RequestOptions with headers and auth resolved

    Raises:
        ValidationError: If host, port or path is missing or empty,
            or a mapping carries an unknown or malformed key
    """
    validate_not_empty(descriptor, REQUIRED_FIELDS, "build_options")

    if not isinstance(descriptor, RequestDescriptor):
        descriptor = _parse_descriptor(descriptor)

    headers = dict(descriptor.headers)
    auth: str | None = None

    if not is_empty(descriptor.content_type):
        headers["Content-Type"] = descriptor.content_type

    if not is_empty(descriptor.auth):
        auth = descriptor.auth
    elif not is_empty(descriptor.username):
        credential = basic_credential(descriptor.username, descriptor.password)
        if descriptor.use_auth_header:
            headers["Authorization"] = credential
        else:
            auth = credential

    options = RequestOptions(
        host=descriptor.host,
        port=descriptor.port,
        path=descriptor.path,
        headers=headers,
        auth=auth,
    )
    logger.debug(
        "Request options built",
        host=options.host,
        port=options.port,
        path=options.path,
        has_auth=options.auth is not None or "Authorization" in headers,
    )
    return options


def _parse_descriptor(descriptor: Mapping[str, Any]) -> RequestDescriptor:
    """Validate a mapping into a RequestDescriptor.

    Unknown keys are rejected so a misspelled credential key cannot silently
    send an unauthenticated request.
    """
    try:
        return RequestDescriptor.model_validate(dict(descriptor))
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "descriptor"
        reason = "unknown input field" if error["type"] == "extra_forbidden" else "invalid input"
        raise ValidationError(field, "build_options", reason) from e
