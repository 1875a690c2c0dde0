"""Thread-safe pseudo-random helpers for tests and tooling (not for cryptography)."""

from __future__ import annotations

import os
import random as _random
import threading

__all__ = [
    "Rand",
    "STR_CHARS",
    "seed",
    "rand_str",
    "rand_int",
    "rand_int31",
    "rand_bytes",
    "rand_perm",
]

STR_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_UINT64_MASK = (1 << 64) - 1


def _signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned integer of ``bits`` width as two's complement."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _os_seed() -> int:
    seed_value = 0
    for b in os.urandom(8):
        seed_value |= b
        seed_value = (seed_value << 8) & _UINT64_MASK
    return _signed(seed_value, 64)


def _check_positive(n: int) -> None:
    if n <= 0:
        raise ValueError(f"invalid argument {n}: must be positive")


class Rand:
    """A pseudo-random generator seeded from OS randomness unless a seed is given.

    Every method is safe to call from several threads at once.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._lock = threading.Lock()
        self._rng = _random.Random(_os_seed() if seed is None else seed)

    def seed(self, seed: int) -> None:
        """Reset the generator to a known state."""
        with self._lock:
            self._rng = _random.Random(seed)

    def str(self, length: int) -> str:
        """A random alphanumeric string of the given length."""
        if length < 0:
            raise ValueError(f"invalid length {length}: must not be negative")
        chars: list[str] = []
        while len(chars) < length:
            val = self.int63()
            for _ in range(10):
                v = val & 0x3F
                val >>= 6
                if v >= len(STR_CHARS):
                    continue
                chars.append(STR_CHARS[v])
                if len(chars) == length:
                    break
        return "".join(chars)

    def uint16(self) -> int:
        return self.uint32() & 0xFFFF

    def uint32(self) -> int:
        with self._lock:
            return self._rng.getrandbits(32)

    def uint64(self) -> int:
        return ((self.uint32() << 32) + self.uint32()) & _UINT64_MASK

    def int16(self) -> int:
        return _signed(self.uint32() & 0xFFFF, 16)

    def int32(self) -> int:
        return _signed(self.uint32(), 32)

    def int64(self) -> int:
        return _signed(self.uint64(), 64)

    def int(self) -> int:
        """A non-negative 63-bit integer."""
        return self.int63()

    def int31(self) -> int:
        with self._lock:
            return self._rng.getrandbits(31)

    def int31n(self, n: int) -> int:
        """An integer in [0, n); n must be positive and fit in 31 bits."""
        _check_positive(n)
        with self._lock:
            return self._rng.randrange(n)

    def int63(self) -> int:
        with self._lock:
            return self._rng.getrandbits(63)

    def int63n(self, n: int) -> int:
        """An integer in [0, n); n must be positive."""
        _check_positive(n)
        with self._lock:
            return self._rng.randrange(n)

    def intn(self, n: int) -> int:
        """An integer in [0, n); n must be positive."""
        _check_positive(n)
        with self._lock:
            return self._rng.randrange(n)

    def float64(self) -> float:
        """A float in [0.0, 1.0)."""
        with self._lock:
            return self._rng.random()

    def bool(self) -> bool:
        return self.int63() % 2 == 0

    def bytes(self, n: int) -> bytes:
        """``n`` random bytes from the internal generator."""
        if n < 0:
            raise ValueError(f"invalid length {n}: must not be negative")
        return bytes(self.int() & 0xFF for _ in range(n))

    def perm(self, n: int) -> list[int]:
        """A random permutation of the integers in [0, n)."""
        if n < 0:
            raise ValueError(f"invalid argument {n}: must not be negative")
        values = list(range(n))
        with self._lock:
            self._rng.shuffle(values)
        return values


_grand = Rand()


def seed(value: int) -> None:
    """Reset the shared generator."""
    _grand.seed(value)


def rand_str(length: int) -> str:
    return _grand.str(length)


def rand_int() -> int:
    return _grand.int()


def rand_int31() -> int:
    return _grand.int31()


def rand_bytes(n: int) -> bytes:
    return _grand.bytes(n)


def rand_perm(n: int) -> list[int]:
    return _grand.perm(n)