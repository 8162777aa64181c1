"""Tests for the reference bit generators."""

import random
import struct

import pytest
from Crypto.Cipher import AES

from fastdiscrete.generators import (
    AESCounterGenerator,
    RandomGenerator,
    SequenceGenerator,
    ShakeGenerator,
)


class TestShakeGenerator:
    """Tests for ShakeGenerator."""

    def test_deterministic(self):
        """Same seed should give same sequence."""
        seed = b"test_seed_bytes_1234567890123456"
        g1 = ShakeGenerator(seed)
        g2 = ShakeGenerator(seed)

        for _ in range(10):
            assert g1() == g2()

    def test_different_seeds(self):
        """Different seeds should give different sequences."""
        assert ShakeGenerator(b"seed1")() != ShakeGenerator(b"seed2")()

    def test_range(self):
        g = ShakeGenerator(b"range")
        for _ in range(100):
            assert g.min <= g() <= g.max
        assert g.max == 2**64 - 1

    def test_advances(self):
        """Successive draws differ."""
        g = ShakeGenerator(b"advance")
        assert len({g() for _ in range(20)}) == 20


class TestAESCounterGenerator:
    """Tests for AESCounterGenerator."""

    def test_block_layout(self):
        """Each counter block yields four little-endian 32-bit words."""
        key = b"0123456789abcdef"
        g = AESCounterGenerator(key)
        cipher = AES.new(key, AES.MODE_ECB)
        expected = []
        for counter in range(2):
            block = cipher.encrypt(counter.to_bytes(16, "little"))
            expected.extend(struct.unpack("<IIII", block))
        assert [g() for _ in range(8)] == expected

    def test_deterministic(self):
        key = b"k" * 16
        g1 = AESCounterGenerator(key)
        g2 = AESCounterGenerator(key)
        assert [g1() for _ in range(9)] == [g2() for _ in range(9)]

    def test_random_key(self):
        """Without a key, a fresh 16-byte key is generated."""
        g = AESCounterGenerator()
        assert len(g.key) == 16
        assert g.min <= g() <= g.max

    def test_invalid_key(self):
        with pytest.raises(ValueError):
            AESCounterGenerator(b"short")


class TestRandomGenerator:
    """Tests for RandomGenerator."""

    def test_wraps_getrandbits(self):
        g = RandomGenerator(random.Random(5), bits=16)
        expected = random.Random(5)
        for _ in range(10):
            assert g() == expected.getrandbits(16)

    def test_bounds(self):
        g = RandomGenerator.seeded(1, bits=8)
        assert g.min == 0
        assert g.max == 255

    def test_invalid_bits(self):
        with pytest.raises(ValueError):
            RandomGenerator(bits=0)


class TestSequenceGenerator:
    """Tests for SequenceGenerator."""

    def test_cycles(self):
        g = SequenceGenerator([1, 2, 3], 0, 5)
        assert [g() for _ in range(7)] == [1, 2, 3, 1, 2, 3, 1]
        assert g.draws == 7

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            SequenceGenerator([6], 0, 5)

    def test_empty(self):
        with pytest.raises(ValueError):
            SequenceGenerator([], 0, 5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
