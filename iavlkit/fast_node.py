"""Leaf values indexed by key for fast reads of the latest state."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO

from iavlkit.encoding import (
    DecodeError,
    decode_bytes,
    decode_varint,
    encode_bytes,
    encode_bytes_size,
    encode_varint,
    encode_varint_size,
)

__all__ = ["FastNode"]


@dataclass
class FastNode:
    """A key, its value and the version at which it was last updated."""

    key: bytes = b""
    version_last_updated_at: int = 0
    value: bytes = b""

    @classmethod
    def deserialize(cls, key: bytes, buf: bytes) -> FastNode:
        """Decode a node stored under ``key`` from its serialised form."""
        try:
            version, n = decode_varint(buf)
        except DecodeError as exc:
            raise DecodeError(f"decoding fastnode.version: {exc}", consumed=exc.consumed) from exc
        try:
            value, _ = decode_bytes(buf[n:])
        except DecodeError as exc:
            raise DecodeError(f"decoding fastnode.value: {exc}", consumed=n + exc.consumed) from exc
        return cls(key=key, version_last_updated_at=version, value=value)

    def encoded_size(self) -> int:
        """Size in bytes of the serialised form."""
        return encode_varint_size(self.version_last_updated_at) + encode_bytes_size(self.value)

    def write_bytes(self, w: BinaryIO) -> None:
        """Write the serialised form to a binary stream."""
        encode_varint(w, self.version_last_updated_at)
        encode_bytes(w, self.value)

    def to_bytes(self) -> bytes:
        """Return the serialised form."""
        buf = io.BytesIO()
        self.write_bytes(buf)
        return buf.getvalue()