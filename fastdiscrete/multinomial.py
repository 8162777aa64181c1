"""
Multinomial distribution.

Spreads t trials over K weighted categories. Decomposed into a chain of
binomial draws, one per category except the last:

    t_avail = t
    for k in 0 .. K-2:
        count[k] = Binomial(t_avail, p_k)      // p_k = w_k / (w_k + ... + w_{K-1})
        t_avail -= count[k]
    count[K-1] = t_avail

p_k is the probability of category k given that categories 0..k-1 are out of
the running. The last category takes whatever is left, so every sample sums to
exactly t no matter how the floating-point probabilities round.
"""

import logging
from typing import Sequence

from .binomial import BinomialDistribution
from .params import MultinomialParams
from .primitives import UniformBitGenerator
from .utils import suffix_sums

logger = logging.getLogger(__name__)


class MultinomialDistribution:
    """
    Multinomial distribution MN(t, weights).

    Holds only the per-category conditional probabilities; the binomial
    sub-distributions are built and discarded inside each sampling call.
    """

    result_type = list

    def __init__(self, t: int, weights: Sequence[float]):
        """
        Initialize multinomial distribution.

        Args:
            t: Number of trials (non-negative)
            weights: One non-negative weight per category (at least one > 0)

        Raises:
            ValueError: if the weight mass runs out before the last category,
                i.e. every weight from some k < K-1 onward is zero
        """
        self._params = MultinomialParams(t=t, weights=weights)
        weights = self._params.weights
        remaining = suffix_sums(weights)

        binom_p = []
        for k in range(len(weights) - 1):
            if remaining[k] <= 0:
                raise ValueError(
                    f"weights[{k}:] have zero total mass; only the last "
                    f"category may follow the final positive weight"
                )
            binom_p.append(min(1.0, weights[k] / remaining[k]))
        self._binom_p = tuple(binom_p)

        logger.debug(
            "multinomial: t=%d K=%d binomial_probabilities=%r",
            self._params.t, len(weights), self._binom_p,
        )

    @property
    def param(self) -> MultinomialParams:
        """Validated construction parameters."""
        return self._params

    @property
    def t(self) -> int:
        """Number of trials."""
        return self._params.t

    @property
    def weights(self) -> tuple[float, ...]:
        """Weight of each category, as given."""
        return self._params.weights

    @property
    def num_categories(self) -> int:
        """Number of categories K."""
        return len(self._params.weights)

    @property
    def binomial_probabilities(self) -> tuple[float, ...]:
        """Conditional probability of each category but the last."""
        return self._binom_p

    @property
    def min(self) -> int:
        """Smallest possible count of a category."""
        return 0

    @property
    def max(self) -> int:
        """Largest possible count of a category (t)."""
        return self._params.t

    def __call__(self, g: UniformBitGenerator) -> list[int]:
        """
        Sample per-category counts.

        Args:
            g: Uniform random bit generator (at most (K-1) * t draws are consumed)

        Returns:
            List of K non-negative counts summing to t
        """
        counts = []
        t_avail = self._params.t
        for p_k in self._binom_p:
            count = BinomialDistribution(t_avail, p_k)(g)
            counts.append(count)
            t_avail -= count
        counts.append(t_avail)
        return counts

    def sample_iter(self, g: UniformBitGenerator, size: int) -> list[list[int]]:
        """Draw `size` count vectors."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return [self(g) for _ in range(size)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, MultinomialDistribution):
            return NotImplemented
        return self._params == other._params

    def __hash__(self) -> int:
        return hash(self._params)

    def __repr__(self) -> str:
        return (
            f"MultinomialDistribution(t={self._params.t}, "
            f"weights={list(self._params.weights)})"
        )
