"""Shared validation utilities for from_dict configuration loading."""

from collections.abc import Mapping

from largemessage.errors import ConfigurationError


def as_str_object_dict(value: object, *, field_name: str) -> dict[str, object]:
    """Validate and normalize a mapping value into ``dict[str, object]``."""
    if not isinstance(value, Mapping):
        msg = f"{field_name} must be a mapping."
        raise ConfigurationError(msg)
    return {str(key): item for key, item in value.items()}


def optional_string(value: object, *, field_name: str) -> str | None:
    """Validate an optional string field."""
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{field_name} must be a string or None."
        raise ConfigurationError(msg)
    return value


def optional_int(value: object, *, field_name: str) -> int | None:
    """Validate an optional integer field (rejects booleans)."""
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{field_name} must be an int or None."
        raise ConfigurationError(msg)
    return value
