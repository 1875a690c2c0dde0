import pytest

from iavlkit.weave import (
    default_node_encoder,
    encode_id,
    node_encoder,
    parse_weave_key,
)


@pytest.mark.parametrize("text", [b"abc", b"hello world", b"~!@#", b""])
def test_encode_id_printable_is_text(text):
    assert encode_id(text) == text.decode("ascii")


@pytest.mark.parametrize("raw", [b"\x00\x01", b"ab\x1f", b"\x80", b"\xff\xfe"])
def test_encode_id_binary_is_upper_hex(raw):
    out = encode_id(raw)
    assert out == out.upper()
    assert bytes.fromhex(out) == raw


def test_parse_weave_key_without_separator():
    assert parse_weave_key(b"plainkey") == "plainkey"


def test_parse_weave_key_ascii_parts():
    assert parse_weave_key(b"foo:bar") == "foo:bar"


def test_parse_weave_key_binary_id():
    id_ = b"\x01\x02\xff"
    prefix, _, rest = parse_weave_key(b"acct:" + id_).partition(":")
    assert prefix == "acct"
    assert bytes.fromhex(rest) == id_


def test_parse_weave_key_splits_at_first_colon():
    prefix, _, rest = parse_weave_key(b"a:b:c").partition(":")
    assert prefix == "a"
    assert rest == "b:c"


def test_parse_weave_key_binary_prefix():
    prefix_bytes = b"\x00\x10"
    prefix, _, rest = parse_weave_key(prefix_bytes + b":id").partition(":")
    assert bytes.fromhex(prefix) == prefix_bytes
    assert rest == "id"


def test_node_encoder_nil():
    assert node_encoder(b"", 3, True) == "*3 <nil>"


def test_node_encoder_leaf_and_inner():
    assert node_encoder(b"foo:bar", 2, True).startswith("*2 ")
    assert node_encoder(b"foo:bar", 2, True).endswith(parse_weave_key(b"foo:bar"))
    assert node_encoder(b"foo:bar", 5, False).startswith("-5 ")


def test_default_node_encoder_nil():
    assert default_node_encoder(b"", 0, False) == "- <nil>"
    assert default_node_encoder(b"", 4, True).startswith("* ")


def test_default_node_encoder_hex():
    id_ = b"abc\x00"
    out = default_node_encoder(id_, 1, True)
    assert out.startswith("* ")
    body = out[2:]
    assert body == body.upper()
    assert bytes.fromhex(body) == id_


def test_default_node_encoder_ignores_depth():
    assert default_node_encoder(b"k", 0, False) == default_node_encoder(b"k", 9, False)