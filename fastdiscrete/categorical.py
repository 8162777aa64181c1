"""
Categorical distribution.

Samples a category index in [0, K) with probability proportional to its weight.
Weights need not sum to 1.

One generator draw per sample:
    unif  = (raw - min) / (max - min)         // in [0, 1]
    discr = unif * total_mass
    return first i with discr <= prefix_sum[i]

The lookup is a linear scan of the prefix sums, which is fastest for the small
K this library targets.
"""

import logging
from typing import Sequence

from .params import CategoricalParams
from .primitives import UniformBitGenerator
from .utils import generator_bounds, prefix_sums, unit_interval

logger = logging.getLogger(__name__)


class CategoricalDistribution:
    """
    Categorical distribution over K weighted categories.

    Immutable after construction: the prefix-sum table is computed once and
    sampling only reads it, so one instance can be shared between threads
    as long as each thread brings its own generator.
    """

    result_type = int

    def __init__(self, weights: Sequence[float]):
        """
        Initialize categorical distribution.

        Args:
            weights: One non-negative weight per category (at least one > 0)
        """
        self._params = CategoricalParams(weights=weights)
        weights = self._params.weights
        self._prefix_sums = prefix_sums(weights)
        self._total = self._prefix_sums[-1]

        # Zero-weight categories at either end are never returned: the scan
        # starts at the first positive weight and falls back to the last one.
        positive = [k for k, w in enumerate(weights) if w > 0]
        self._first = positive[0]
        self._fallback = positive[-1]

        logger.debug(
            "categorical: K=%d total=%r prefix_sums=%r",
            len(weights), self._total, self._prefix_sums,
        )

    @property
    def param(self) -> CategoricalParams:
        """Validated construction parameters."""
        return self._params

    @property
    def weights(self) -> tuple[float, ...]:
        """Weight of each category, as given."""
        return self._params.weights

    @property
    def total_weight(self) -> float:
        """Total weight mass (last prefix sum)."""
        return self._total

    @property
    def probabilities(self) -> tuple[float, ...]:
        """Weights normalised to sum to 1."""
        return tuple(w / self._total for w in self._params.weights)

    @property
    def min(self) -> int:
        """Smallest category index."""
        return 0

    @property
    def max(self) -> int:
        """Number of categories K (samples are strictly below this)."""
        return len(self._params.weights)

    def __call__(self, g: UniformBitGenerator) -> int:
        """
        Sample a category.

        Args:
            g: Uniform random bit generator (one draw is consumed)

        Returns:
            Category index in [0, K)
        """
        g_min, g_max = generator_bounds(g)
        discr = unit_interval(g(), g_min, g_max) * self._total

        for i in range(self._first, len(self._prefix_sums)):
            if discr <= self._prefix_sums[i]:
                return i

        # Rounding pushed discr past the total mass
        return self._fallback

    def sample_iter(self, g: UniformBitGenerator, size: int) -> list[int]:
        """Draw `size` categories."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return [self(g) for _ in range(size)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategoricalDistribution):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        return f"CategoricalDistribution(weights={list(self._params.weights)})"
