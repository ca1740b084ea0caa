"""Static xor filter for approximate set membership of 64-bit keys."""

from __future__ import annotations

import secrets
from collections.abc import Iterable, Sequence

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

_FIXED_SEED = 13572355802537770549
_MAX_ATTEMPTS = 100
_FINGERPRINT_BITS = (8, 16, 32)


class XorFilterError(Exception):
    """Raised when a filter cannot be constructed from the given keys."""


def murmur64(h: int) -> int:
    """Finaliser of MurmurHash3 for 64-bit values."""
    h &= _MASK64
    h ^= h >> 33
    h = (h * 0xFF51AFD7ED558CCD) & _MASK64
    h ^= h >> 33
    h = (h * 0xC4CEB9FE1A85EC53) & _MASK64
    h ^= h >> 33
    return h


class SimpleMixSplit:
    """Seeded hash family: murmur64 of the key plus a 64-bit seed."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = secrets.randbits(64) if seed is None else seed & _MASK64

    def __call__(self, key: int) -> int:
        return murmur64((key + self.seed) & _MASK64)


def rotl64(n: int, c: int) -> int:
    """Rotate a 64-bit value left by ``c`` bits (``c`` taken modulo 64)."""
    n &= _MASK64
    c &= 63
    return ((n << c) | (n >> ((-c) & 63))) & _MASK64


def reduce(hash_value: int, n: int) -> int:
    """Map a 32-bit value into ``range(n)`` without division."""
    return ((hash_value & _MASK32) * (n & _MASK32)) >> 32


def hash_from_hash(hash_value: int, index: int, block_length: int) -> int:
    """Slot of a hash in block ``index`` (0, 1 or 2) of the fingerprint array."""
    r = rotl64(hash_value, index * 21) & _MASK32
    return reduce(r, block_length) + index * block_length


class XorFilter:
    """Xor filter holding a fixed number of distinct 64-bit keys."""

    def __init__(self, size: int, fingerprint_bits: int = 8) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if fingerprint_bits not in _FINGERPRINT_BITS:
            raise ValueError(
                f"fingerprint_bits must be one of {_FINGERPRINT_BITS}, got {fingerprint_bits}"
            )
        self.size = size
        self.fingerprint_bits = fingerprint_bits
        self.array_length = int(32 + 1.23 * size)
        self.block_length = self.array_length // 3
        self.fingerprints = [0] * self.array_length
        self.hasher = SimpleMixSplit()
        self.hash_index = 0
        self._fingerprint_mask = (1 << fingerprint_bits) - 1

    def _fingerprint(self, hash_value: int) -> int:
        return (hash_value ^ (hash_value >> 32)) & self._fingerprint_mask

    def _slots(self, hash_value: int) -> tuple[int, int, int]:
        bl = self.block_length
        return (
            hash_from_hash(hash_value, 0, bl),
            hash_from_hash(hash_value, 1, bl),
            hash_from_hash(hash_value, 2, bl),
        )

    def _peel(self, hashes: Sequence[int]) -> list[tuple[int, int]] | None:
        """Return (hash, slot index) in peeling order, or None on failure."""
        counts = [0] * self.array_length
        xors = [0] * self.array_length
        for hash_value in hashes:
            for slot in self._slots(hash_value):
                counts[slot] += 1
                xors[slot] ^= hash_value

        alone = [slot for slot, count in enumerate(counts) if count == 1]
        order: list[tuple[int, int]] = []
        while alone:
            slot = alone.pop()
            if counts[slot] == 0:
                continue
            hash_value = xors[slot]
            found = -1
            for hi, other in enumerate(self._slots(hash_value)):
                if other == slot:
                    found = hi
                    counts[slot] = 0
                elif counts[other] >= 1:
                    counts[other] -= 1
                    xors[other] ^= hash_value
                    if counts[other] == 1:
                        alone.append(other)
            order.append((hash_value, found))

        return order if len(order) == len(hashes) else None

    def add_all(self, keys: Iterable[int]) -> None:
        """Build the filter from exactly ``size`` distinct keys.

        Raises ValueError if the number of keys differs from ``size`` and
        XorFilterError if the keys are not distinct or no seed works.
        """
        key_list = [key & _MASK64 for key in keys]
        if len(key_list) != self.size:
            raise ValueError(f"expected {self.size} keys, got {len(key_list)}")
        if len(set(key_list)) != len(key_list):
            raise XorFilterError("keys must be distinct")

        self.hash_index = 0
        self.hasher.seed = _FIXED_SEED
        while True:
            hashes = [self.hasher(key) for key in key_list]
            order = self._peel(hashes)
            if order is not None:
                break
            self.hash_index += 1
            if self.hash_index >= _MAX_ATTEMPTS:
                raise XorFilterError(
                    f"could not construct filter after {self.hash_index} attempts"
                )
            self.hasher.seed = secrets.randbits(64)

        fingerprints = [0] * self.array_length
        for hash_value, found in reversed(order):
            value = self._fingerprint(hash_value)
            change = -1
            for hi, slot in enumerate(self._slots(hash_value)):
                if hi == found:
                    change = slot
                else:
                    value ^= fingerprints[slot]
            fingerprints[change] = value
        self.fingerprints = fingerprints

    def contains(self, key: int) -> bool:
        """Report whether ``key`` may be in the set (with false positives)."""
        hash_value = self.hasher(key & _MASK64)
        value = self._fingerprint(hash_value)
        for slot in self._slots(hash_value):
            value ^= self.fingerprints[slot]
        return value == 0

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self.size

    def info(self) -> str:
        """Short summary of the filter."""
        return f"XorFilter Status:\n\t\tKeys stored: {self.size}\n"

    def size_in_bytes(self) -> int:
        """Size of the fingerprint array in bytes."""
        return self.array_length * (self.fingerprint_bits // 8)