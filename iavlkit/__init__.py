"""Building blocks for versioned AVL+ key-value stores: encoding, key formats,
fast-node records, a seedable random source and key rendering helpers."""

__version__ = "0.1.0"

__all__ = ["encoding", "fast_node", "hexbytes", "key_format", "rand", "weave"]