"""Tests for FileBlobStorageClient."""

from pathlib import Path

import pytest

from largemessage.blobs import BlobStorageClient, FileBlobStorageClient
from largemessage.errors import BlobNotFoundError


def test_creates_root(tmp_path: Path) -> None:
    root = tmp_path / "nested" / "blobs"
    client = FileBlobStorageClient(root)
    assert client.root == root
    assert root.is_dir()


def test_put_and_get(tmp_path: Path) -> None:
    client = FileBlobStorageClient(tmp_path)
    uri = client.put_object(b"persistent data", "bucket", "base/topic/values/id")
    assert uri == "file://bucket/base/topic/values/id"
    assert (tmp_path / "bucket" / "base" / "topic" / "values" / "id").read_bytes() == b"persistent data"
    assert client.get_object("bucket", "base/topic/values/id") == b"persistent data"


def test_persists_across_instances(tmp_path: Path) -> None:
    FileBlobStorageClient(tmp_path).put_object(b"data", "bucket", "key")
    assert FileBlobStorageClient(tmp_path).get_object("bucket", "key") == b"data"


def test_get_missing_object_raises(tmp_path: Path) -> None:
    client = FileBlobStorageClient(tmp_path)
    with pytest.raises(BlobNotFoundError):
        client.get_object("bucket", "missing")


def test_rejects_keys_outside_root(tmp_path: Path) -> None:
    client = FileBlobStorageClient(tmp_path / "root")
    with pytest.raises(ValueError, match="outside store root"):
        client.put_object(b"x", "bucket", "../../escape")


def test_delete_all_objects_by_prefix(tmp_path: Path) -> None:
    client = FileBlobStorageClient(tmp_path, scheme="local")
    client.put_object(b"k", "bucket", "base/topic/keys/1")
    client.put_object(b"v", "bucket", "base/topic/values/1")
    client.put_object(b"o", "bucket", "base/topic2/values/1")

    client.delete_all_objects("bucket", "base/topic/")

    with pytest.raises(BlobNotFoundError):
        client.get_object("bucket", "base/topic/keys/1")
    with pytest.raises(BlobNotFoundError):
        client.get_object("bucket", "base/topic/values/1")
    assert client.get_object("bucket", "base/topic2/values/1") == b"o"


def test_delete_all_objects_in_missing_bucket_is_noop(tmp_path: Path) -> None:
    client = FileBlobStorageClient(tmp_path)
    client.delete_all_objects("bucket", "base/topic/")


def test_satisfies_protocol(tmp_path: Path) -> None:
    assert isinstance(FileBlobStorageClient(tmp_path), BlobStorageClient)
