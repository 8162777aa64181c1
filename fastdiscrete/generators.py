"""
Reference uniform random bit generators.

The samplers only consume generators; these adapters exist so callers (and the
tests) have deterministic, seedable sources that satisfy UniformBitGenerator:
- ShakeGenerator: SHAKE-256 in counter mode, 64-bit outputs
- AESCounterGenerator: AES-128-ECB over a counter block, 32-bit outputs
- RandomGenerator: wraps a random.Random instance
- SequenceGenerator: replays a fixed list of values

None of them is thread-safe; give each thread its own instance.
"""

import hashlib
import random
import struct
from typing import Iterable, Optional

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes


class ShakeGenerator:
    """
    Pseudorandom generator using SHAKE-256 in counter mode.

    Deterministic: same seed produces same sequence.
    Each draw hashes the seed together with an internal counter.
    """

    def __init__(self, seed: bytes):
        """
        Initialize with a seed.

        Args:
            seed: Seed bytes (any length; 32 bytes is typical)
        """
        self._seed = bytes(seed)
        self._counter = 0

    @property
    def min(self) -> int:
        return 0

    @property
    def max(self) -> int:
        return 2**64 - 1

    def __call__(self) -> int:
        data = hashlib.shake_256(
            self._seed + self._counter.to_bytes(8, "little")
        ).digest(8)
        self._counter += 1
        return int.from_bytes(data, "little")


class AESCounterGenerator:
    """
    Pseudorandom generator using AES-128 as a PRF over a counter.

    Each 16-byte block encrypts the counter and yields four 32-bit draws.

    Note: AES-128 as a PRF is distinguishable after about 2^64 blocks
    (birthday bound); far beyond any sampling workload.
    """

    def __init__(self, key: Optional[bytes] = None):
        """
        Initialize with a secret key.

        Args:
            key: 16-byte AES key. If None, generates a random key.
        """
        if key is None:
            key = get_random_bytes(16)
        if len(key) != 16:
            raise ValueError("Key must be 16 bytes")
        self.key = key
        self._cipher = AES.new(self.key, AES.MODE_ECB)
        self._counter = 0
        self._buffer: list[int] = []

    @property
    def min(self) -> int:
        return 0

    @property
    def max(self) -> int:
        return 2**32 - 1

    def __call__(self) -> int:
        if not self._buffer:
            block = self._cipher.encrypt(self._counter.to_bytes(16, "little"))
            self._counter += 1
            # Reversed so pop() hands words out in block order
            self._buffer = list(reversed(struct.unpack("<IIII", block)))
        return self._buffer.pop()


class RandomGenerator:
    """
    Adapter exposing a random.Random instance as a bit generator.

    Args:
        rng: Source instance; a fresh unseeded one if None
        bits: Width of each draw in bits
    """

    def __init__(self, rng: Optional[random.Random] = None, bits: int = 32):
        if bits < 1:
            raise ValueError("bits must be at least 1")
        self._rng = rng if rng is not None else random.Random()
        self._bits = bits

    @classmethod
    def seeded(cls, seed, bits: int = 32) -> "RandomGenerator":
        """Create an adapter over random.Random(seed)."""
        return cls(random.Random(seed), bits)

    @property
    def min(self) -> int:
        return 0

    @property
    def max(self) -> int:
        return (1 << self._bits) - 1

    def __call__(self) -> int:
        return self._rng.getrandbits(self._bits)


class SequenceGenerator:
    """
    Replays a fixed sequence of raw values, cycling when exhausted.

    Useful to pin exact generator outputs (boundary values, draw counting).
    """

    def __init__(self, values: Iterable[int], min_value: int, max_value: int):
        """
        Args:
            values: Raw values to hand out, in order
            min_value: Declared lower bound (inclusive)
            max_value: Declared upper bound (inclusive)
        """
        self._values = list(values)
        if not self._values:
            raise ValueError("values must not be empty")
        for v in self._values:
            if v < min_value or v > max_value:
                raise ValueError(f"Value {v} out of range [{min_value}, {max_value}]")
        self._min = min_value
        self._max = max_value
        self._index = 0
        self.draws = 0

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    def __call__(self) -> int:
        value = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        self.draws += 1
        return value
