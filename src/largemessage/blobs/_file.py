"""FileBlobStorageClient: file-system-based blob storage."""

import logging
from pathlib import Path

from largemessage.blobs._client import object_uri
from largemessage.errors import BlobNotFoundError

logger = logging.getLogger(__name__)


class FileBlobStorageClient:
    """File-system-based blob storage client.

    Store each object at ``<root>/<bucket>/<key>``. Buckets are plain
    directories created on first write.
    """

    def __init__(self, root: str | Path, *, scheme: str = "file") -> None:
        """Initialize with a root directory, creating it if needed."""
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)
        self._scheme = scheme

    @property
    def root(self) -> Path:
        """Return the root directory path."""
        return self._root

    @property
    def scheme(self) -> str:
        """Return the URI scheme this client answers for."""
        return self._scheme

    def _resolve_path(self, bucket: str, key: str) -> Path:
        """Resolve an object path and ensure it stays under the store root."""
        root = self._root.resolve()
        candidate = (self._root / bucket / key).resolve()
        try:
            candidate.relative_to(root)
        except ValueError:
            msg = f"Object {bucket!r}/{key!r} resolves outside store root."
            raise ValueError(msg) from None
        return candidate

    def put_object(self, data: bytes, bucket: str, key: str) -> str:
        """Write bytes to a file and return the object's URI string."""
        path = self._resolve_path(bucket, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return object_uri(self._scheme, bucket, key)

    def get_object(self, bucket: str, key: str) -> bytes:
        """Read an object file."""
        path = self._resolve_path(bucket, key)
        if not path.is_file():
            raise BlobNotFoundError(bucket, key)
        return path.read_bytes()

    def delete_all_objects(self, bucket: str, prefix: str) -> None:
        """Delete every object file in ``bucket`` whose key starts with ``prefix``."""
        bucket_root = self._resolve_path(bucket, "")
        if not bucket_root.is_dir():
            return
        deleted = 0
        for path in sorted(bucket_root.rglob("*")):
            if not path.is_file():
                continue
            key = path.relative_to(bucket_root).as_posix()
            if key.startswith(prefix):
                path.unlink()
                deleted += 1
        logger.debug("Deleted %d objects under %s/%s", deleted, bucket, prefix)
