"""
fastdiscrete: fast discrete samplers for small trial counts.

Samples binomial, categorical and multinomial distributions from any
caller-supplied uniform random bit generator (see primitives.UniformBitGenerator).

Modules:
- primitives: Protocol interfaces (UniformBitGenerator, DiscreteDistribution)
- params: Validated distribution parameters
- binomial / categorical / multinomial: The samplers
- generators: Reference generators (SHAKE-256, AES-128, random.Random, replay)
"""

from . import primitives
from .params import BinomialParams, CategoricalParams, MultinomialParams
from .binomial import BinomialDistribution
from .categorical import CategoricalDistribution
from .multinomial import MultinomialDistribution
from .generators import (
    ShakeGenerator,
    AESCounterGenerator,
    RandomGenerator,
    SequenceGenerator,
)

__version__ = "0.1.0"
__all__ = [
    "primitives",
    "BinomialParams",
    "CategoricalParams",
    "MultinomialParams",
    "BinomialDistribution",
    "CategoricalDistribution",
    "MultinomialDistribution",
    "ShakeGenerator",
    "AESCounterGenerator",
    "RandomGenerator",
    "SequenceGenerator",
]
