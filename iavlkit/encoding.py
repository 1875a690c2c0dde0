"""Varint and length-prefixed byte encoding used by the tree's storage format."""

from __future__ import annotations

import io
from typing import BinaryIO

__all__ = [
    "DecodeError",
    "MAX_VARINT_LEN64",
    "decode_bytes",
    "decode_uvarint",
    "decode_varint",
    "encode_bytes",
    "encode_bytes_slice",
    "encode_bytes_size",
    "encode_uvarint",
    "encode_uvarint_size",
    "encode_varint",
    "encode_varint_size",
]

MAX_VARINT_LEN64 = 10

_UINT64_MASK = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_MAX_LENGTH = (1 << 63) - 1


class DecodeError(ValueError):
    """Raised when a buffer cannot be decoded.

    ``consumed`` is the number of input bytes read before the failure.
    """

    def __init__(self, message: str, consumed: int = 0) -> None:
        super().__init__(message)
        self.consumed = consumed


def _uvarint_bytes(u: int) -> bytes:
    out = bytearray()
    while u >= 0x80:
        out.append((u & 0x7F) | 0x80)
        u >>= 7
    out.append(u)
    return bytes(out)


def _zigzag(i: int) -> int:
    ux = (i << 1) & _UINT64_MASK
    if i < 0:
        ux ^= _UINT64_MASK
    return ux


def _check_uint64(u: int) -> None:
    if not 0 <= u <= _UINT64_MASK:
        raise ValueError(f"value {u} out of range for an unsigned 64-bit integer")


def _check_int64(i: int) -> None:
    if not _INT64_MIN <= i <= _INT64_MAX:
        raise ValueError(f"value {i} out of range for a signed 64-bit integer")


def decode_uvarint(bz: bytes) -> tuple[int, int]:
    """Decode an unsigned varint, returning the value and the bytes read."""
    x = 0
    shift = 0
    for i, b in enumerate(bz):
        if i == MAX_VARINT_LEN64:
            raise DecodeError("EOF decoding uvarint", consumed=i + 1)
        if b < 0x80:
            if i == MAX_VARINT_LEN64 - 1 and b > 1:
                raise DecodeError("EOF decoding uvarint", consumed=i + 1)
            return x | (b << shift), i + 1
        x |= (b & 0x7F) << shift
        shift += 7
    raise DecodeError("buffer too small", consumed=0)


def decode_varint(bz: bytes) -> tuple[int, int]:
    """Decode a zig-zag signed varint, returning the value and the bytes read."""
    try:
        ux, n = decode_uvarint(bz)
    except DecodeError as exc:
        message = "buffer too small" if exc.consumed == 0 else "EOF decoding varint"
        raise DecodeError(message, consumed=exc.consumed) from None
    value = ux >> 1
    if ux & 1:
        value = ~value
    return value, n


def decode_bytes(bz: bytes) -> tuple[bytes, int]:
    """Decode a varint length-prefixed byte string.

    Returns the bytes and the total number of input bytes read.
    """
    size, n = decode_uvarint(bz)
    if size >= _MAX_LENGTH:
        raise DecodeError(f"invalid out of range length {size} decoding []byte", consumed=n)
    end = n + size
    if len(bz) < end:
        raise DecodeError(f"insufficient bytes decoding []byte of length {size}", consumed=n)
    return bytes(bz[n:end]), end


def encode_uvarint(w: BinaryIO, u: int) -> None:
    """Write an unsigned varint to a binary stream."""
    _check_uint64(u)
    w.write(_uvarint_bytes(u))


def encode_varint(w: BinaryIO, i: int) -> None:
    """Write a zig-zag signed varint to a binary stream."""
    _check_int64(i)
    w.write(_uvarint_bytes(_zigzag(i)))


def encode_bytes(w: BinaryIO, bz: bytes) -> None:
    """Write a varint length-prefixed byte string to a binary stream."""
    encode_uvarint(w, len(bz))
    w.write(bytes(bz))


def encode_bytes_slice(bz: bytes) -> bytes:
    """Return ``bz`` with its varint length prefix."""
    buf = io.BytesIO()
    encode_bytes(buf, bz)
    return buf.getvalue()


def encode_bytes_size(bz: bytes) -> int:
    """Size of ``bz`` once length-prefixed."""
    return encode_uvarint_size(len(bz)) + len(bz)


def encode_uvarint_size(u: int) -> int:
    """Number of bytes an unsigned varint occupies."""
    _check_uint64(u)
    if u == 0:
        return 1
    return (u.bit_length() + 6) // 7


def encode_varint_size(i: int) -> int:
    """Number of bytes a signed varint occupies."""
    _check_int64(i)
    return encode_uvarint_size(_zigzag(i))