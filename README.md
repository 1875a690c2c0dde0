# iavlkit

`iavlkit` collects the low-level pieces that a versioned, snapshottable AVL+
key-value store is built from: the byte encoding of stored records, the
layout of database keys, the record that holds the latest value of a key,
a seedable random source for tests, and helpers that render keys as text.
It has no dependencies outside the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `iavlkit.encoding` | Varint and length-prefixed byte encoding and decoding |
| `iavlkit.hexbytes` | `HexBytes`, a bytes type that serialises to upper-case hex in JSON |
| `iavlkit.key_format` | `KeyFormat` and `SegmentKind`, fixed-width, sortable database keys |
| `iavlkit.fast_node` | `FastNode`, the record that stores the latest value of a key |
| `iavlkit.rand` | `Rand`, a thread-safe, seedable pseudo-random source |
| `iavlkit.weave` | Helpers that turn keys and node ids into readable text |

## Encoding

Unsigned and signed (zig-zag) 64-bit varints, and byte strings prefixed with
their length as an unsigned varint. Encoders write to any binary writer;
decoders take a bytes-like object and return the value together with the
number of bytes consumed. Malformed or truncated input raises `DecodeError`
(a `ValueError`), whose `consumed` attribute tells how many bytes were read
before the failure. Values outside the 64-bit range raise `ValueError` when
encoding.

```python
import io
from iavlkit.encoding import (
    DecodeError,
    decode_bytes,
    decode_varint,
    encode_bytes,
    encode_varint,
)

buf = io.BytesIO()
encode_varint(buf, 1)
encode_bytes(buf, b"\x02")
data = buf.getvalue()              # b"\x02\x01\x02"

version, n = decode_varint(data)   # (1, 1)
value, m = decode_bytes(data[n:])  # (b"\x02", 2)

try:
    decode_bytes(b"\xff")
except DecodeError as exc:
    print("bad input:", exc)
```

`decode_uvarint` reads an unsigned varint, `encode_uvarint` writes one, and
`encode_bytes_slice` returns the length-prefixed form of a byte string
directly. `encode_uvarint_size`, `encode_varint_size` and `encode_bytes_size`
report how many bytes an encoding takes without producing it.

## Fast nodes

A `FastNode` is a dataclass holding `key`, `version_last_updated_at` and
`value`. It serialises as a signed varint version followed by the
length-prefixed value; the key is not part of the serialised form and is
supplied when decoding.

```python
from iavlkit.fast_node import FastNode

record = FastNode.deserialize(b"\x04", bytes.fromhex("020102"))
assert record.version_last_updated_at == 1
assert record.value == b"\x02"
assert record.to_bytes().hex() == "020102"
assert record.encoded_size() == 3
```

`write_bytes` writes the same form to a binary stream. A buffer that cannot
be decoded raises `DecodeError`.

## Key formats

`KeyFormat` builds keys from a one-byte prefix followed by fixed-width,
big-endian segments, so that keys sort in the same order as the numbers they
hold. A final segment of width 0 is unbounded and takes the rest of the key;
a 0 anywhere else raises `ValueError`.

```python
from iavlkit.key_format import KeyFormat, SegmentKind

kf = KeyFormat("o", 8, 8)
key = kf.key(1 << 62, 1 << 63)
# b"o" + 40 00 00 00 00 00 00 00 + 80 00 00 00 00 00 00 00
kf.scan(key, SegmentKind.INT64, SegmentKind.UINT64)  # [1 << 62, 1 << 63]

kf.key()                   # b"o", the bare prefix
kf.prefix()                # "o"

unbounded = KeyFormat("e", 8, 0)
unbounded.key_bytes(b"\x01\x02\x03", b"hello")
# b"e" + five zero bytes + b"\x01\x02\x03" + b"hello"
unbounded.scan_bytes(b"e" + bytes(8) + b"tail")   # [bytes(8), b"tail"]
```

- `key` accepts integers (negative ones are stored in two's complement) and
  byte strings; `key_bytes` takes raw segments and left-pads each with zero
  bytes to its width.
- Too many arguments, or a segment longer than its width, raise
  `ValueError`; an argument of another type raises `TypeError`.
- `scan_bytes` splits a key into segments and stops at the first segment the
  key is too short to hold; `scan` decodes them as `SegmentKind.INT64`,
  `SegmentKind.UINT64` or `SegmentKind.BYTES`.

## Hex bytes

`HexBytes` is a `bytes` subclass whose string and JSON forms are upper-case
hex.

```python
from iavlkit.hexbytes import HexBytes

hb = HexBytes(b"abc")
str(hb)                        # "616263"
hb.to_json()                   # '"616263"', quotes included
HexBytes.from_json('"616263"') # HexBytes(b"abc")
hb.marshal()                   # b"abc"
HexBytes.unmarshal(b"abc")     # HexBytes(b"abc")
```

`from_json` raises `ValueError` when the input is not a quoted hex string.

## Random values

`Rand(seed=None)` seeds itself from OS randomness unless given a seed, and
every method may be called from several threads. It offers `str(length)`
(alphanumeric text), `bytes(n)`, `perm(n)`, `float64()`, `bool()`, and
integers of several widths: `uint16`, `uint32`, `uint64`, `int16`, `int32`,
`int64`, `int`, `int31`, `int63`, and the bounded `int31n(n)`, `int63n(n)`
and `intn(n)`, which raise `ValueError` unless `n` is positive. `seed(value)`
resets a generator, so the same seed gives the same sequence.

A shared generator sits behind the module functions `seed`, `rand_str`,
`rand_int`, `rand_int31`, `rand_bytes` and `rand_perm`. None of this is
suitable for cryptographic use.

## Rendering keys

```python
from iavlkit.weave import (
    default_node_encoder,
    encode_id,
    node_encoder,
    parse_weave_key,
)

encode_id(b"abc")                      # "abc"
encode_id(b"\x01\xff")                 # "01FF"
parse_weave_key(b"acc:\x01\x02")       # "acc:0102"
node_encoder(b"k", 2, True)            # "*2 k"
default_node_encoder(b"\xab", 0, False)  # "- AB"
```

`encode_id` keeps printable ASCII as text and turns anything else into
upper-case hex; `parse_weave_key` applies it to each side of the first `:`.
`node_encoder` and `default_node_encoder` format one line of tree-shape
output, marking leaves with `*` and inner nodes with `-`, and print `<nil>`
for an empty id.

## What this package does not do

`iavlkit` provides parts, not a store. There is no tree, no versioning, no
proofs, no import or export of nodes, and no database backend here, and it
installs no command-line tool or server. The encoders, key formats and
rendering helpers are meant to be used by code that provides those.

## Running the tests

Install the package together with its `test` extra and run `pytest` from the
project directory.