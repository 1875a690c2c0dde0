import pytest

from iavlkit.hexbytes import HexBytes


def test_marshal_round_trip():
    bz = b"hello world"
    data = HexBytes(bz)
    assert data.marshal() == bz
    restored = HexBytes.unmarshal(bz)
    assert restored == data
    assert isinstance(restored, HexBytes)


@pytest.mark.parametrize(
    "raw, expected",
    [(b"", '""'), (b"a", '"61"'), (b"abc", '"616263"')],
)
def test_json_marshal(raw, expected):
    assert HexBytes(raw).to_json() == expected
    assert HexBytes.from_json(expected) == raw
    assert HexBytes.from_json(expected.encode()) == raw


def test_json_is_upper_case():
    assert HexBytes(b"\xde\xad\xbe\xef").to_json() == '"DEADBEEF"'
    assert HexBytes.from_json('"deadbeef"') == b"\xde\xad\xbe\xef"


def test_str_is_upper_hex():
    assert str(HexBytes(b"\x0a\xff")) == "0AFF"


@pytest.mark.parametrize("bad", ["", '"', "616263", '"6"', '"zz"', '"61 62"'])
def test_from_json_rejects_malformed(bad):
    with pytest.raises(ValueError):
        HexBytes.from_json(bad)