"""RetrievingClient: resolves framed payloads back into their original bytes."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING

from largemessage.errors import ConfigurationError, InvalidFlagError, InvalidReferenceError, UnknownSchemeError
from largemessage.framing import Inline, MalformedFrame, MalformedReference, decode_frame

if TYPE_CHECKING:
    from collections.abc import Mapping

    from largemessage.blobs import BlobStorageClient, BlobStorageClientFactory
    from largemessage.framing import Reference

logger = logging.getLogger(__name__)


class RetrievingClient:
    """Read payloads framed by StoringClient.

    Blob storage clients are built lazily from ``client_factories`` (keyed by
    URI scheme) and cached for the lifetime of this instance. Concurrent first
    lookups of one scheme invoke its factory once; lookups of different schemes
    do not block each other.
    """

    def __init__(self, client_factories: Mapping[str, BlobStorageClientFactory]) -> None:
        """Initialize with per-scheme client factories."""
        self._client_factories = MappingProxyType(dict(client_factories))
        self._clients: dict[str, BlobStorageClient] = {}
        self._scheme_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def schemes(self) -> tuple[str, ...]:
        """Return the schemes a client can be resolved for."""
        return tuple(sorted(self._client_factories))

    def retrieve_bytes(self, data: bytes | None) -> bytes | None:
        """Return the original payload for a framed message.

        ``None`` is returned unchanged.
        """
        if data is None:
            return None
        frame = decode_frame(data)
        if isinstance(frame, MalformedFrame):
            raise InvalidFlagError(frame.flag)
        if isinstance(frame, MalformedReference):
            raise InvalidReferenceError(frame.body)
        if isinstance(frame, Inline):
            return frame.data
        return self._retrieve_backed(frame)

    def resolve_client(self, scheme: str) -> BlobStorageClient:
        """Return the cached client for ``scheme``, building it on first use."""
        client = self._clients.get(scheme)
        if client is not None:
            return client
        factory = self._client_factories.get(scheme)
        if factory is None:
            raise UnknownSchemeError(scheme)
        with self._scheme_lock(scheme):
            client = self._clients.get(scheme)
            if client is None:
                client = factory()
                if client is None:
                    msg = f"Blob storage client factory for scheme {scheme!r} returned None."
                    raise ConfigurationError(msg)
                logger.debug("Created blob storage client for scheme %s", scheme)
                self._clients[scheme] = client
        return client

    def _retrieve_backed(self, frame: Reference) -> bytes:
        uri = frame.to_blob_uri()
        client = self.resolve_client(uri.scheme)
        data = client.get_object(uri.bucket, uri.key)
        logger.debug("Extracted large message from blob storage: %s", uri)
        return data

    def _scheme_lock(self, scheme: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._scheme_locks.get(scheme)
            if lock is None:
                lock = threading.Lock()
                self._scheme_locks[scheme] = lock
            return lock
