"""Request value parsing utilities."""

import secrets
import time
from pathlib import PurePath

from sharehub.core.constants import OBJECT_KEY_RANDOM_RANGE
from sharehub.core.errors import ValidationError


def parse_id(value: str | int, field: str = "id") -> int:
    """Parse a path identifier into a positive integer.

    Args:
        value: Raw identifier taken from the URL
        field: Field name reported in the error

    Returns:
        The identifier as an int

    Raises:
        ValidationError: If the value is not a positive integer

    Examples:
        >>> parse_id("42")
        42
    """
    if isinstance(value, bool):
        raise _invalid_id(field, value)
    if isinstance(value, int):
        number = value
    else:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise _invalid_id(field, value)
        number = int(text)
    if number <= 0:
        raise _invalid_id(field, value)
    return number


def _invalid_id(field: str, value: object) -> ValidationError:
    return ValidationError(
        f"Invalid {field}",
        error_code="invalid_identifier",
        errors=[{"field": field, "message": f"'{value}' is not a valid identifier"}],
    )


def to_boolean(value: bool | str | None) -> bool:
    """Interpret a form field as a boolean.

    Only ``True`` and the string ``"true"`` (any case) count as true;
    anything else, including a missing value, is false.
    """
    if isinstance(value, bool):
        return value
    return isinstance(value, str) and value.strip().lower() == "true"


def generate_object_key(original_name: str) -> str:
    """Build a unique storage key that keeps the upload's extension.

    Examples:
        >>> generate_object_key("report.pdf")  # doctest: +SKIP
        '1732700000000-482913113.pdf'
    """
    millis = int(time.time() * 1000)
    suffix = PurePath(original_name).suffix
    return f"{millis}-{secrets.randbelow(OBJECT_KEY_RANDOM_RANGE)}{suffix}"
