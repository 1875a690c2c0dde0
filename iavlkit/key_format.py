"""Fixed-width, lexicographically sortable byte keys."""

from __future__ import annotations

import enum

__all__ = ["KeyFormat", "SegmentKind"]

_UINT64_MASK = (1 << 64) - 1


class SegmentKind(enum.Enum):
    """How a scanned key segment is interpreted."""

    INT64 = "int64"
    UINT64 = "uint64"
    BYTES = "bytes"


def _format(arg: object) -> bytes:
    if isinstance(arg, (bytes, bytearray, memoryview)):
        return bytes(arg)
    if isinstance(arg, int) and not isinstance(arg, bool):
        if not -(1 << 63) <= arg <= _UINT64_MASK:
            raise ValueError(f"integer {arg} does not fit in 64 bits")
        return (arg & _UINT64_MASK).to_bytes(8, "big")
    raise TypeError(f"key format does not support formatting value of type {type(arg).__name__}: {arg!r}")


def _scan(kind: SegmentKind, value: bytes) -> int | bytes:
    if kind is SegmentKind.BYTES:
        return value
    if kind in (SegmentKind.INT64, SegmentKind.UINT64):
        if len(value) < 8:
            raise ValueError(f"segment {value.hex().upper()} is shorter than 8 bytes")
        return int.from_bytes(value[:8], "big", signed=kind is SegmentKind.INT64)
    raise TypeError(f"key format does not support scanning into {kind!r}")


class KeyFormat:
    """A single-byte prefix followed by fixed-width segments.

    A layout entry of 0 marks an unbounded segment; only the last may be 0.
    """

    def __init__(self, prefix: int | bytes | str, *args: int) -> None:
        if isinstance(prefix, str):
            prefix = prefix.encode("latin-1")
        if isinstance(prefix, (bytes, bytearray)):
            if len(prefix) != 1:
                raise ValueError("prefix must be a single byte")
            prefix = prefix[0]
        if not 0 <= prefix <= 0xFF:
            raise ValueError(f"prefix {prefix} is not a byte")
        for i, width in enumerate(args):
            if width < 0:
                raise ValueError("segment widths cannot be negative")
            if width == 0 and i != len(args) - 1:
                raise ValueError("Only the last item in a key format can be 0")
        self._prefix = prefix
        self._layout = tuple(args)

    @property
    def layout(self) -> tuple[int, ...]:
        return self._layout

    @property
    def unbounded(self) -> bool:
        return bool(self._layout) and self._layout[-1] == 0

    def key_bytes(self, *args: bytes) -> bytes:
        """Join byte segments into a key, left-padding each to its width."""
        if len(args) > len(self._layout):
            raise ValueError(
                f"key format is provided with {len(args)} segments but only has {len(self._layout)}"
            )
        key = bytearray([self._prefix])
        for i, (segment, width) in enumerate(zip(args, self._layout)):
            segment = bytes(segment) if segment is not None else b""
            if width == 0:
                key += segment
                continue
            if len(segment) > width:
                raise ValueError(
                    f"length of segment {segment.hex().upper()} provided to KeyFormat.key_bytes() "
                    f"is longer than the {width} bytes required by layout for segment {i}"
                )
            key += bytes(width - len(segment)) + segment
        return bytes(key)

    def key(self, *args: int | bytes) -> bytes:
        """Build a key from integers and byte strings; with no arguments, the bare prefix."""
        if len(args) > len(self._layout):
            raise ValueError(
                f"key format is provided with {len(args)} args but format only has "
                f"{len(self._layout)} segments"
            )
        return self.key_bytes(*(_format(arg) for arg in args))

    def scan_bytes(self, key: bytes) -> list[bytes]:
        """Split a key into its segments; stops at the first segment the key does not hold."""
        segments: list[bytes] = []
        n = 1
        for width in self._layout:
            n += width
            if n > len(key):
                break
            if width == 0:
                segments.append(bytes(key[n:]))
                break
            segments.append(bytes(key[n - width : n]))
        return segments

    def scan(self, key: bytes, *args: SegmentKind) -> list[int | bytes]:
        """Decode the leading segments of ``key`` as the given kinds."""
        segments = self.scan_bytes(key)
        if len(args) > len(segments):
            raise ValueError(
                f"key format scan is provided with {len(args)} args but format only has "
                f"{len(segments)} segments in key {bytes(key).hex().upper()}"
            )
        return [_scan(kind, segment) for kind, segment in zip(args, segments)]

    def prefix(self) -> str:
        """The prefix byte as a one-character string."""
        return chr(self._prefix)

    def __repr__(self) -> str:
        return f"KeyFormat({self.prefix()!r}, {', '.join(map(str, self._layout))})"