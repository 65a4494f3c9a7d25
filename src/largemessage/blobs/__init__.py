"""BlobStorageClient protocol and reference backends for largemessage."""

from largemessage.blobs._client import BlobStorageClient, BlobStorageClientFactory, object_uri
from largemessage.blobs._file import FileBlobStorageClient
from largemessage.blobs._memory import InMemoryBlobStorageClient

__all__ = [
    "BlobStorageClient",
    "BlobStorageClientFactory",
    "FileBlobStorageClient",
    "InMemoryBlobStorageClient",
    "object_uri",
]
