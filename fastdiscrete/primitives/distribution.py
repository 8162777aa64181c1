"""
Discrete distribution protocol.

A distribution is an immutable value object built from fixed parameters.
Calling it with a generator consumes some generator output and returns one
sample; the distribution itself never changes.
"""

from typing import Any, Protocol, runtime_checkable

from .generator import UniformBitGenerator


@runtime_checkable
class DiscreteDistribution(Protocol):
    """
    Sampler for a discrete distribution.

    Properties:
    - Stateless: no generator state is kept between calls
    - Bounded cost: the number of draws per call is known in advance
    """

    def __call__(self, g: UniformBitGenerator) -> Any:
        """
        Draw one sample.

        Args:
            g: Uniform random bit generator, advanced by this call

        Returns:
            One sample from the distribution
        """
        ...

    @property
    def min(self) -> int:
        """Smallest value a sample (or sample entry) can take."""
        ...

    @property
    def max(self) -> int:
        """Largest value a sample (or sample entry) can take."""
        ...

    def sample_iter(self, g: UniformBitGenerator, size: int) -> list:
        """
        Draw `size` independent samples.

        Args:
            g: Uniform random bit generator
            size: Number of samples

        Returns:
            List of samples in draw order
        """
        ...
