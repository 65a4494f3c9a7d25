"""BlobStorageClient: protocol for blob storage backends."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class BlobStorageClient(Protocol):
    """Blob storage protocol.

    Implementations own all transport concerns (connections, retries,
    timeouts). I/O failures are raised to the caller unchanged.
    """

    def put_object(self, data: bytes, bucket: str, key: str) -> str:
        """Store bytes at ``bucket``/``key`` and return the object's URI string."""
        ...

    def get_object(self, bucket: str, key: str) -> bytes:
        """Return the bytes stored at ``bucket``/``key``."""
        ...

    def delete_all_objects(self, bucket: str, prefix: str) -> None:
        """Delete every object in ``bucket`` whose key starts with ``prefix``."""
        ...


BlobStorageClientFactory = Callable[[], BlobStorageClient]


def object_uri(scheme: str, bucket: str, key: str) -> str:
    """Format the URI string a client returns from ``put_object``."""
    return f"{scheme}://{bucket}/{key}"
