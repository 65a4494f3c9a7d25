"""largemessage: transparent blob-storage offloading for oversized message payloads."""

import importlib.metadata as importlib_metadata

from largemessage.blobs import BlobStorageClient, FileBlobStorageClient, InMemoryBlobStorageClient
from largemessage.config import LargeMessageConfig
from largemessage.errors import (
    BlobNotFoundError,
    ConfigurationError,
    InvalidFlagError,
    InvalidReferenceError,
    InvalidURIError,
    LargeMessageError,
    MissingBasePathError,
    MissingIdGeneratorError,
    MissingTopicError,
    PreconditionError,
    UnknownSchemeError,
)
from largemessage.framing import BACKED, NOT_BACKED, Inline, Reference, decode_frame, encode_frame
from largemessage.ids import IdGenerator, RandomUUIDGenerator, Sha256IdGenerator
from largemessage.retrieving import RetrievingClient
from largemessage.storing import StoringClient
from largemessage.uri import BlobStorageURI


def _detect_version() -> str:
    """Return installed package version or a local fallback when metadata is unavailable."""
    try:
        return importlib_metadata.version("largemessage")
    except importlib_metadata.PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _detect_version()

__all__ = [
    "BACKED",
    "NOT_BACKED",
    "BlobNotFoundError",
    "BlobStorageClient",
    "BlobStorageURI",
    "ConfigurationError",
    "FileBlobStorageClient",
    "IdGenerator",
    "InMemoryBlobStorageClient",
    "Inline",
    "InvalidFlagError",
    "InvalidReferenceError",
    "InvalidURIError",
    "LargeMessageConfig",
    "LargeMessageError",
    "MissingBasePathError",
    "MissingIdGeneratorError",
    "MissingTopicError",
    "PreconditionError",
    "RandomUUIDGenerator",
    "Reference",
    "RetrievingClient",
    "Sha256IdGenerator",
    "StoringClient",
    "UnknownSchemeError",
    "decode_frame",
    "encode_frame",
]
