"""Framing: one flag byte followed by either the payload or a blob URI.

Wire layout::

    byte 0     flag (NOT_BACKED or BACKED)
    bytes 1..  payload verbatim (NOT_BACKED) or UTF-8 URI string (BACKED)
"""

from dataclasses import dataclass
from typing import Final

from largemessage.uri import BlobStorageURI

NOT_BACKED: Final = 0x00
BACKED: Final = 0x01
CHARSET: Final = "utf-8"


@dataclass(frozen=True, slots=True)
class Inline:
    """Payload carried directly in the message."""

    data: bytes


@dataclass(frozen=True, slots=True)
class Reference:
    """Payload stored in blob storage, carried as its URI string."""

    uri: str

    def to_blob_uri(self) -> BlobStorageURI:
        """Parse the carried URI string."""
        return BlobStorageURI.create(self.uri)


@dataclass(frozen=True, slots=True)
class MalformedFrame:
    """Frame whose flag byte is neither NOT_BACKED nor BACKED (``None`` when empty)."""

    flag: int | None


@dataclass(frozen=True, slots=True)
class MalformedReference:
    """BACKED frame whose body is not a UTF-8 string."""

    body: bytes


Frame = Inline | Reference
DecodedFrame = Inline | Reference | MalformedFrame | MalformedReference


def encode_frame(frame: Frame) -> bytes:
    """Encode a frame into its wire representation."""
    if isinstance(frame, Inline):
        return bytes((NOT_BACKED,)) + frame.data
    return bytes((BACKED,)) + frame.uri.encode(CHARSET)


def decode_frame(data: bytes) -> DecodedFrame:
    """Decode a wire frame without raising on an unknown flag or a corrupt reference."""
    if not data:
        return MalformedFrame(flag=None)
    flag = data[0]
    body = bytes(data[1:])
    if flag == NOT_BACKED:
        return Inline(body)
    if flag == BACKED:
        try:
            return Reference(body.decode(CHARSET))
        except UnicodeDecodeError:
            return MalformedReference(body)
    return MalformedFrame(flag=flag)
