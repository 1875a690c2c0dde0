"""Byte strings that serialise to upper-case hex in JSON."""

from __future__ import annotations

import binascii

__all__ = ["HexBytes"]


class HexBytes(bytes):
    """Bytes whose JSON form is a quoted upper-case hex string."""

    def marshal(self) -> bytes:
        """Return the raw bytes."""
        return bytes(self)

    @classmethod
    def unmarshal(cls, data: bytes) -> HexBytes:
        """Build from raw bytes."""
        return cls(data)

    def to_json(self) -> str:
        """Return the JSON representation, a quoted upper-case hex string."""
        return f'"{self}"'

    @classmethod
    def from_json(cls, data: str | bytes) -> HexBytes:
        """Parse a quoted hex string; raises ValueError if it is malformed."""
        text = data.decode("ascii", errors="replace") if isinstance(data, (bytes, bytearray)) else data
        if len(text) < 2 or text[0] != '"' or text[-1] != '"':
            raise ValueError(f"invalid hex string: {text}")
        try:
            return cls(binascii.unhexlify(text[1:-1]))
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise ValueError(f"invalid hex string: {text}") from exc

    def __str__(self) -> str:
        return self.hex().upper()

    def __repr__(self) -> str:
        return f"HexBytes({bytes(self)!r})"