"""
Binomial distribution.

Counts successes in t independent trials with success probability p, spending
exactly one generator draw per trial:
    success  iff  raw - min < p * (max - min)

This is O(t) draws per sample. For small t it beats general-purpose samplers
that set up rejection or inversion machinery on every call.
"""

from .params import BinomialParams
from .primitives import UniformBitGenerator
from .utils import generator_bounds


class BinomialDistribution:
    """Binomial distribution B(t, p)."""

    result_type = int

    def __init__(self, t: int = 1, p: float = 0.5):
        """
        Initialize binomial distribution.

        Args:
            t: Number of trials (non-negative)
            p: Success probability of each trial, in [0, 1]
        """
        self._params = BinomialParams(t=t, p=p)

    @property
    def param(self) -> BinomialParams:
        """Validated construction parameters."""
        return self._params

    @property
    def t(self) -> int:
        """Number of trials."""
        return self._params.t

    @property
    def p(self) -> float:
        """Success probability of each trial."""
        return self._params.p

    @property
    def mean(self) -> float:
        """Expected number of successes, t * p."""
        return self._params.t * self._params.p

    @property
    def min(self) -> int:
        """Smallest possible sample."""
        return 0

    @property
    def max(self) -> int:
        """Largest possible sample (t)."""
        return self._params.t

    def __call__(self, g: UniformBitGenerator) -> int:
        """
        Sample a success count.

        Args:
            g: Uniform random bit generator (exactly t draws are consumed)

        Returns:
            Number of successes in [0, t]
        """
        t, p = self._params.t, self._params.p
        if t == 0:
            return 0

        g_min, g_max = generator_bounds(g)
        threshold = p * (g_max - g_min)
        # Strict comparison would miss raw == max when p == 1
        certain = p >= 1.0

        successes = 0
        for _ in range(t):
            raw = g()
            if certain or (raw - g_min) < threshold:
                successes += 1
        return successes

    def sample_iter(self, g: UniformBitGenerator, size: int) -> list[int]:
        """Draw `size` success counts."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return [self(g) for _ in range(size)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, BinomialDistribution):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        return f"BinomialDistribution(t={self._params.t}, p={self._params.p})"
