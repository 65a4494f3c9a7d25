"""IdGenerator: names offloaded objects."""

import hashlib
import uuid
from typing import Protocol, runtime_checkable

from largemessage.errors import ConfigurationError


@runtime_checkable
class IdGenerator(Protocol):
    """Produce the final path segment for an offloaded payload."""

    def generate_id(self, data: bytes) -> str:
        """Return an identifier for ``data``."""
        ...


class RandomUUIDGenerator:
    """Random identifiers, independent of payload content."""

    def generate_id(self, data: bytes) -> str:  # noqa: ARG002
        """Return a random UUID4 hex string."""
        return uuid.uuid4().hex


class Sha256IdGenerator:
    """Content-addressed identifiers: equal payloads map to the same object."""

    def generate_id(self, data: bytes) -> str:
        """Return the hex SHA-256 digest of ``data``."""
        return hashlib.sha256(data).hexdigest()


_GENERATORS: dict[str, type[IdGenerator]] = {
    "uuid": RandomUUIDGenerator,
    "sha256": Sha256IdGenerator,
}


def id_generator_from_name(name: str) -> IdGenerator:
    """Build a registered id generator by name (``uuid`` or ``sha256``)."""
    generator_type = _GENERATORS.get(name)
    if generator_type is None:
        known = ", ".join(sorted(_GENERATORS))
        msg = f"Unknown id generator {name!r}; expected one of: {known}."
        raise ConfigurationError(msg)
    return generator_type()
