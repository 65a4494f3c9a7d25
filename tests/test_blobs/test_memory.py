"""Tests for InMemoryBlobStorageClient."""

import pytest

from largemessage.blobs import BlobStorageClient, InMemoryBlobStorageClient
from largemessage.errors import BlobNotFoundError


def test_put_and_get() -> None:
    client = InMemoryBlobStorageClient()
    uri = client.put_object(b"hello world", "bucket", "base/topic/values/id")
    assert uri == "memory://bucket/base/topic/values/id"
    assert client.get_object("bucket", "base/topic/values/id") == b"hello world"


def test_custom_scheme() -> None:
    client = InMemoryBlobStorageClient(scheme="s3")
    assert client.scheme == "s3"
    assert client.put_object(b"x", "bucket", "key") == "s3://bucket/key"


def test_get_missing_object_raises() -> None:
    client = InMemoryBlobStorageClient()
    with pytest.raises(BlobNotFoundError) as exc_info:
        client.get_object("bucket", "missing")
    assert exc_info.value.bucket == "bucket"
    assert exc_info.value.key == "missing"


def test_buckets_are_separate() -> None:
    client = InMemoryBlobStorageClient()
    client.put_object(b"a", "one", "key")
    with pytest.raises(BlobNotFoundError):
        client.get_object("two", "key")


def test_delete_all_objects_by_prefix() -> None:
    client = InMemoryBlobStorageClient.from_preloaded(
        {
            ("bucket", "base/topic/keys/1"): b"k",
            ("bucket", "base/topic/values/1"): b"v",
            ("bucket", "base/topic2/values/1"): b"other topic",
            ("other", "base/topic/values/1"): b"other bucket",
        }
    )
    client.delete_all_objects("bucket", "base/topic/")
    assert client.list_keys("bucket") == ("base/topic2/values/1",)
    assert client.list_keys("other") == ("base/topic/values/1",)


def test_delete_all_objects_on_empty_prefix_is_noop() -> None:
    client = InMemoryBlobStorageClient()
    client.delete_all_objects("bucket", "base/topic/")
    assert client.list_keys("bucket") == ()


def test_satisfies_protocol() -> None:
    assert isinstance(InMemoryBlobStorageClient(), BlobStorageClient)
