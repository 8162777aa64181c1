"""
Parameters for the discrete samplers.

Each distribution validates its fixed parameters once, at construction, through
one of these frozen dataclasses:
- BinomialParams: trial count t and success probability p
- CategoricalParams: weight vector (unnormalised, K >= 1)
- MultinomialParams: trial count t and weight vector

Invalid parameters raise immediately rather than producing meaningless samples
later. Weights are stored as tuples so a params object can be shared freely.
"""

from dataclasses import dataclass
import math
import operator
from typing import Sequence


def _check_trials(t) -> int:
    # bool is an int subclass but never a meaningful trial count
    if isinstance(t, bool):
        raise TypeError("t must be an int, got bool")
    try:
        t = operator.index(t)
    except TypeError:
        raise TypeError(f"t must be an int, got {type(t).__name__}") from None
    if t < 0:
        raise ValueError(f"t must be non-negative, got {t}")
    return t


def _check_weights(weights: Sequence[float]) -> tuple[float, ...]:
    weights = tuple(float(w) for w in weights)
    if not weights:
        raise ValueError("weights must contain at least one category")
    for k, w in enumerate(weights):
        if not math.isfinite(w):
            raise ValueError(f"weights[{k}] must be finite, got {w}")
        if w < 0:
            raise ValueError(f"weights[{k}] must be non-negative, got {w}")
    total = sum(weights)
    if total <= 0:
        raise ValueError("weights must have positive total mass")
    if not math.isfinite(total):
        raise ValueError("weights total mass overflows; rescale the weights")
    return weights


@dataclass(frozen=True)
class BinomialParams:
    """Parameters for the binomial distribution."""

    t: int = 1      # Number of trials
    p: float = 0.5  # Success probability of each trial

    def __post_init__(self):
        object.__setattr__(self, "t", _check_trials(self.t))
        if isinstance(self.p, bool):
            raise TypeError("p must be a real number, got bool")
        p = float(self.p)
        if not math.isfinite(p) or p < 0.0 or p > 1.0:
            raise ValueError(f"p must be in [0, 1], got {self.p}")
        object.__setattr__(self, "p", p)


@dataclass(frozen=True)
class CategoricalParams:
    """Parameters for the categorical distribution."""

    weights: tuple[float, ...]  # One non-negative weight per category

    def __post_init__(self):
        object.__setattr__(self, "weights", _check_weights(self.weights))

    @property
    def num_categories(self) -> int:
        """Number of categories K."""
        return len(self.weights)


@dataclass(frozen=True)
class MultinomialParams:
    """Parameters for the multinomial distribution."""

    t: int                      # Number of trials spread over the categories
    weights: tuple[float, ...]  # One non-negative weight per category

    def __post_init__(self):
        object.__setattr__(self, "t", _check_trials(self.t))
        object.__setattr__(self, "weights", _check_weights(self.weights))

    @property
    def num_categories(self) -> int:
        """Number of categories K."""
        return len(self.weights)
