"""Required-field checks shared by the builder and the request wrappers."""

from collections.abc import Iterable, Mapping, Sized
from typing import Any

from .exceptions import ValidationError


def is_empty(value: Any) -> bool:
    """Return True for None, empty strings and empty containers.

    Numbers and booleans are never empty, so port 0 counts as present.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _lookup(inputs: Any, field: str) -> Any:
    if inputs is None:
        return None
    if isinstance(inputs, Mapping):
        return inputs.get(field)
    return getattr(inputs, field, None)


def validate_not_empty(
    inputs: Any,
    fields: Iterable[str],
    function_name: str,
) -> None:
    """
    Assert that every named field is present and non-empty.

    Args:
        inputs: A mapping or an object exposing the fields as attributes
        fields: Field names, checked in order
        function_name: Name reported in the error message

    Raises:
        ValidationError: For the first missing or empty field
    """
    for field in fields:
        if is_empty(_lookup(inputs, field)):
            raise ValidationError(field, function_name)
