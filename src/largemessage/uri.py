"""BlobStorageURI: structured ``scheme://bucket/key`` address."""

from dataclasses import dataclass, replace

from largemessage.errors import InvalidURIError

_SCHEME_SEPARATOR = "://"


@dataclass(frozen=True, slots=True)
class BlobStorageURI:
    """Immutable address of an object (or key prefix) in blob storage.

    The scheme selects which blob storage client handles the object. The key
    never carries a leading ``/``; it may be empty when the URI points at a
    bucket root.
    """

    scheme: str
    bucket: str
    key: str = ""

    @classmethod
    def create(cls, raw: str) -> "BlobStorageURI":
        """Parse ``scheme://bucket/key`` into a BlobStorageURI."""
        scheme, separator, rest = raw.partition(_SCHEME_SEPARATOR)
        if not separator or not scheme:
            raise InvalidURIError(raw, "missing scheme")
        bucket, _, key = rest.partition("/")
        if not bucket:
            raise InvalidURIError(raw, "missing bucket")
        return cls(scheme=scheme, bucket=bucket, key=key)

    def with_key(self, key: str) -> "BlobStorageURI":
        """Return a URI in the same bucket pointing at ``key``."""
        return replace(self, key=key.lstrip("/"))

    def __str__(self) -> str:
        """Return the canonical string form."""
        return f"{self.scheme}{_SCHEME_SEPARATOR}{self.bucket}/{self.key}"
