"""Typed errors for largemessage."""


class LargeMessageError(Exception):
    """Base exception for all largemessage errors."""


class ConfigurationError(LargeMessageError):
    """Raised when a configuration value is missing or has the wrong type."""


class PreconditionError(LargeMessageError, ValueError):
    """Raised when an offload is attempted without the inputs it requires."""


class MissingTopicError(PreconditionError):
    """Raised when an oversized payload is stored without a topic."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("Topic must not be null")


class MissingBasePathError(PreconditionError):
    """Raised when blob storage is needed but no base path is configured."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("Base path must not be null")


class MissingIdGeneratorError(PreconditionError):
    """Raised when an oversized payload is stored without an id generator."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("Id generator must not be null")


class UnknownSchemeError(ConfigurationError):
    """Raised when no blob storage client factory is registered for a URI scheme."""

    def __init__(self, scheme: str) -> None:
        """Initialize with the unregistered scheme."""
        self.scheme = scheme
        super().__init__(f"No blob storage client registered for scheme: {scheme}")


class InvalidFlagError(LargeMessageError, ValueError):
    """Raised when a framed payload starts with an unknown flag byte."""

    def __init__(self, flag: int | None) -> None:
        """Initialize with the offending flag byte (``None`` for an empty frame)."""
        self.flag = flag
        super().__init__(f"Message can only be marked as backed or non-backed, got flag {flag!r}")


class InvalidURIError(LargeMessageError, ValueError):
    """Raised when a string cannot be parsed as ``scheme://bucket/key``."""

    def __init__(self, raw: str, reason: str) -> None:
        """Initialize with the raw URI and the parse failure reason."""
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid blob storage URI {raw!r}: {reason}")


class BlobNotFoundError(LargeMessageError):
    """Raised when an object does not exist in a blob storage client."""

    def __init__(self, bucket: str, key: str) -> None:
        """Initialize with the missing object's bucket and key."""
        self.bucket = bucket
        self.key = key
        super().__init__(f"Blob not found: {bucket}/{key}")


class InvalidReferenceError(LargeMessageError, ValueError):
    """Raised when a backed frame does not carry a UTF-8 encoded URI."""

    def __init__(self, body: bytes) -> None:
        """Initialize with the undecodable frame body."""
        self.body = body
        super().__init__(f"Backed message body of {len(body)} bytes is not a UTF-8 encoded URI")
