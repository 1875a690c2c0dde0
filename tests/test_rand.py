import json

import pytest

from iavlkit import rand as iavlrand
from iavlkit.rand import STR_CHARS, Rand


def _all_outputs() -> str:
    iavlrand.seed(1)
    perm = iavlrand.rand_perm(10)
    return "\n".join(
        [
            f"perm: {json.dumps(perm)}",
            f"randInt: {iavlrand.rand_int()}",
            f"randInt31: {iavlrand.rand_int31()}",
        ]
    )


def test_rand_str_length():
    assert len(iavlrand.rand_str(243)) == 243


def test_rand_bytes_length():
    assert len(iavlrand.rand_bytes(243)) == 243


def test_determinism():
    first = _all_outputs()
    for _ in range(100):
        assert _all_outputs() == first


def test_rand_str_is_alphanumeric():
    s = Rand(7).str(500)
    assert set(s) <= set(STR_CHARS)


def test_str_zero_length():
    assert Rand(3).str(0) == ""


def test_str_negative_length_raises():
    with pytest.raises(ValueError):
        Rand(3).str(-1)


def test_same_seed_same_sequence():
    a, b = Rand(42), Rand(42)
    assert [a.int63() for _ in range(20)] == [b.int63() for _ in range(20)]
    assert a.str(30) == b.str(30)
    assert a.bytes(16) == b.bytes(16)


def test_reseed_restarts_sequence():
    r = Rand(5)
    first = [r.uint32() for _ in range(10)]
    r.seed(5)
    assert [r.uint32() for _ in range(10)] == first


def test_perm_is_permutation():
    perm = Rand(9).perm(50)
    assert sorted(perm) == list(range(50))


def test_perm_negative_raises():
    with pytest.raises(ValueError):
        Rand(9).perm(-1)


@pytest.mark.parametrize("method", ["intn", "int31n", "int63n"])
@pytest.mark.parametrize("n", [0, -5])
def test_bounded_non_positive_raises(method, n):
    with pytest.raises(ValueError):
        getattr(Rand(1), method)(n)


@pytest.mark.parametrize("method", ["intn", "int31n", "int63n"])
def test_bounded_in_range(method):
    r = Rand(11)
    values = [getattr(r, method)(7) for _ in range(200)]
    assert all(0 <= v < 7 for v in values)


def test_integer_widths():
    r = Rand(13)
    for _ in range(200):
        assert 0 <= r.uint16() < 1 << 16
        assert 0 <= r.uint32() < 1 << 32
        assert 0 <= r.uint64() < 1 << 64
        assert -(1 << 15) <= r.int16() < 1 << 15
        assert -(1 << 31) <= r.int32() < 1 << 31
        assert -(1 << 63) <= r.int64() < 1 << 63
        assert 0 <= r.int() < 1 << 63
        assert 0 <= r.int31() < 1 << 31
        assert 0 <= r.int63() < 1 << 63


def test_float64_in_unit_interval():
    r = Rand(17)
    assert all(0.0 <= r.float64() < 1.0 for _ in range(200))


def test_bool_yields_both_values():
    r = Rand(19)
    assert {r.bool() for _ in range(200)} == {True, False}


def test_bytes_negative_raises():
    with pytest.raises(ValueError):
        Rand(1).bytes(-1)