"""StoringClient: frames payloads and offloads oversized ones to blob storage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from largemessage.errors import (
    ConfigurationError,
    MissingBasePathError,
    MissingIdGeneratorError,
    MissingTopicError,
)
from largemessage.framing import Inline, Reference, encode_frame

if TYPE_CHECKING:
    from largemessage.blobs import BlobStorageClient
    from largemessage.ids import IdGenerator
    from largemessage.uri import BlobStorageURI

logger = logging.getLogger(__name__)

KEY_PREFIX = "keys"
VALUE_PREFIX = "values"


def topic_prefix(base_key: str, topic: str) -> str:
    """Return the key prefix holding every object offloaded for ``topic``."""
    return f"{base_key}{topic}/"


def object_key(base_key: str, topic: str, *, is_key: bool, object_id: str) -> str:
    """Derive ``<base><topic>/<keys|values>/<id>``.

    ``base_key`` is expected to end with ``/`` (or be empty).
    """
    role = KEY_PREFIX if is_key else VALUE_PREFIX
    return f"{topic_prefix(base_key, topic)}{role}/{object_id}"


class StoringClient:
    """Store payloads inline or in blob storage depending on their size.

    Payloads of at most ``max_size`` bytes are framed inline. Larger payloads
    are written to ``client`` under ``base_path`` and framed as a reference to
    the written object.
    """

    def __init__(
        self,
        client: BlobStorageClient | None,
        max_size: int,
        *,
        base_path: BlobStorageURI | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        """Initialize with the blob client, size threshold and offload settings."""
        self._client = client
        self._max_size = max_size
        self._base_path = base_path
        self._id_generator = id_generator

    @property
    def max_size(self) -> int:
        """Return the largest payload size (in bytes) kept inline."""
        return self._max_size

    @property
    def base_path(self) -> BlobStorageURI | None:
        """Return the blob storage location offloaded payloads are written under."""
        return self._base_path

    def needs_backing(self, payload: bytes) -> bool:
        """Return whether ``payload`` exceeds the inline threshold."""
        return len(payload) > self._max_size

    def store_bytes(self, topic: str | None, payload: bytes | None, is_key: bool) -> bytes | None:
        """Frame ``payload`` for the transport, offloading it when too large.

        ``None`` payloads are returned as ``None`` without framing.
        """
        if payload is None:
            return None
        if not self.needs_backing(payload):
            return encode_frame(Inline(bytes(payload)))
        uri = self._upload(topic, payload, is_key=is_key)
        return encode_frame(Reference(uri))

    def delete_all_files(self, topic: str) -> None:
        """Delete all key and value objects offloaded for ``topic``.

        An empty topic is rejected: its prefix would cover every topic under
        the base path.
        """
        if not topic:
            raise MissingTopicError
        base_path = self._require_base_path()
        prefix = topic_prefix(base_path.key, topic)
        client = self._require_client(base_path)
        client.delete_all_objects(base_path.bucket, prefix)
        logger.debug("Deleted large messages for topic %s under %s", topic, base_path.with_key(prefix))

    def _upload(self, topic: str | None, payload: bytes, *, is_key: bool) -> str:
        if topic is None:
            raise MissingTopicError
        base_path = self._require_base_path()
        if self._id_generator is None:
            raise MissingIdGeneratorError
        client = self._require_client(base_path)
        object_id = self._id_generator.generate_id(payload)
        key = object_key(base_path.key, topic, is_key=is_key, object_id=object_id)
        uri = client.put_object(payload, base_path.bucket, key)
        role = "key" if is_key else "value"
        logger.debug("Stored large %s of %d bytes for topic %s at %s", role, len(payload), topic, uri)
        return uri

    def _require_base_path(self) -> BlobStorageURI:
        if self._base_path is None:
            raise MissingBasePathError
        return self._base_path

    def _require_client(self, base_path: BlobStorageURI) -> BlobStorageClient:
        if self._client is None:
            msg = f"No blob storage client configured for base path {base_path}."
            raise ConfigurationError(msg)
        return self._client
