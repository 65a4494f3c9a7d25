"""InMemoryBlobStorageClient: dict-based blob storage for development and testing."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from largemessage.blobs._client import object_uri
from largemessage.errors import BlobNotFoundError

if TYPE_CHECKING:
    from collections.abc import Mapping


class InMemoryBlobStorageClient:
    """In-memory blob storage client for development and testing."""

    def __init__(self, scheme: str = "memory") -> None:
        """Initialize an empty in-memory store answering for ``scheme``."""
        self._scheme = scheme
        self._objects: dict[tuple[str, str], bytes] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_preloaded(
        cls,
        objects: Mapping[tuple[str, str], bytes],
        *,
        scheme: str = "memory",
    ) -> InMemoryBlobStorageClient:
        """Build a client from preloaded ``{(bucket, key): bytes}`` data."""
        client = cls(scheme)
        client._objects.update(objects)
        return client

    @property
    def scheme(self) -> str:
        """Return the URI scheme this client answers for."""
        return self._scheme

    def put_object(self, data: bytes, bucket: str, key: str) -> str:
        """Store bytes and return their URI string."""
        with self._lock:
            self._objects[(bucket, key)] = bytes(data)
        return object_uri(self._scheme, bucket, key)

    def get_object(self, bucket: str, key: str) -> bytes:
        """Return stored bytes."""
        with self._lock:
            data = self._objects.get((bucket, key))
        if data is None:
            raise BlobNotFoundError(bucket, key)
        return data

    def delete_all_objects(self, bucket: str, prefix: str) -> None:
        """Delete every object in ``bucket`` under ``prefix``."""
        with self._lock:
            doomed = [item for item in self._objects if item[0] == bucket and item[1].startswith(prefix)]
            for item in doomed:
                del self._objects[item]

    def list_keys(self, bucket: str, prefix: str = "") -> tuple[str, ...]:
        """List keys in ``bucket`` under ``prefix`` in sorted order."""
        with self._lock:
            keys = [key for stored_bucket, key in self._objects if stored_bucket == bucket and key.startswith(prefix)]
        return tuple(sorted(keys))
