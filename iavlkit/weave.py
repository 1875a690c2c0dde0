"""Human-readable rendering of tree keys and nodes."""

from __future__ import annotations

__all__ = [
    "encode_id",
    "parse_weave_key",
    "node_encoder",
    "default_node_encoder",
]


def encode_id(id_: bytes) -> str:
    """Return ``id_`` as text if it is printable ASCII, otherwise as upper-case hex."""
    if any(b < 0x20 or b >= 0x80 for b in id_):
        return bytes(id_).hex().upper()
    return bytes(id_).decode("ascii")


def parse_weave_key(key: bytes) -> str:
    """Render a key of the form ``prefix:id``, where the id may be binary."""
    prefix, sep, id_ = bytes(key).partition(b":")
    if not sep:
        return encode_id(key)
    return f"{encode_id(prefix)}:{encode_id(id_)}"


def node_encoder(id_: bytes, depth: int, is_leaf: bool) -> str:
    """Render a node with its depth, decoding keys as weave keys."""
    prefix = f"*{depth} " if is_leaf else f"-{depth} "
    if not id_:
        return f"{prefix}<nil>"
    return f"{prefix}{parse_weave_key(id_)}"


def default_node_encoder(id_: bytes, depth: int, is_leaf: bool) -> str:
    """Render a node as a marker followed by its id in upper-case hex."""
    prefix = "* " if is_leaf else "- "
    if not id_:
        return f"{prefix}<nil>"
    return f"{prefix}{bytes(id_).hex().upper()}"