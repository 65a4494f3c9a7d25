"""Tests for largemessage.errors."""

import pytest

from largemessage.errors import (
    BlobNotFoundError,
    ConfigurationError,
    InvalidFlagError,
    InvalidURIError,
    LargeMessageError,
    MissingBasePathError,
    MissingIdGeneratorError,
    MissingTopicError,
    PreconditionError,
    UnknownSchemeError,
)


def test_large_message_error_is_exception() -> None:
    assert issubclass(LargeMessageError, Exception)


@pytest.mark.parametrize(
    "error_type",
    [
        BlobNotFoundError,
        ConfigurationError,
        InvalidFlagError,
        InvalidURIError,
        PreconditionError,
        UnknownSchemeError,
    ],
)
def test_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, LargeMessageError)


@pytest.mark.parametrize(
    ("error_type", "message"),
    [
        (MissingTopicError, "Topic must not be null"),
        (MissingBasePathError, "Base path must not be null"),
        (MissingIdGeneratorError, "Id generator must not be null"),
    ],
)
def test_precondition_messages(error_type: type[PreconditionError], message: str) -> None:
    err = error_type()
    assert isinstance(err, PreconditionError)
    assert isinstance(err, ValueError)
    assert str(err) == message


def test_unknown_scheme_carries_scheme() -> None:
    err = UnknownSchemeError("abfs")
    assert err.scheme == "abfs"
    assert "abfs" in str(err)
    assert isinstance(err, ConfigurationError)


def test_invalid_flag_carries_flag() -> None:
    err = InvalidFlagError(7)
    assert err.flag == 7
    assert "backed or non-backed" in str(err)


def test_invalid_uri_carries_raw_and_reason() -> None:
    err = InvalidURIError("nope", "missing scheme")
    assert err.raw == "nope"
    assert err.reason == "missing scheme"
    assert "nope" in str(err)


def test_blob_not_found_carries_location() -> None:
    err = BlobNotFoundError("bucket", "base/key")
    assert err.bucket == "bucket"
    assert err.key == "base/key"
    assert "bucket/base/key" in str(err)
