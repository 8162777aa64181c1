"""
Uniform random bit generator protocol.

A generator produces raw integers uniformly distributed over the inclusive
range [min, max]. Samplers never create generators themselves; the caller
passes a live one into every sampling call, and each draw advances it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class UniformBitGenerator(Protocol):
    """
    Uniform Random Bit Generator.

    Properties:
    - Uniform: every value in [min, max] is equally likely
    - Independent: successive draws are independent
    - Bounded: min and max can be read without drawing
    """

    def __call__(self) -> int:
        """
        Draw the next raw value.

        Returns:
            Integer in [min, max]
        """
        ...

    @property
    def min(self) -> int:
        """Smallest value a draw can return (inclusive)."""
        ...

    @property
    def max(self) -> int:
        """Largest value a draw can return (inclusive)."""
        ...
