"""
Interfaces shared by the samplers.

This module defines protocol interfaces for:
- UniformBitGenerator: the caller-supplied source of raw uniform values
- DiscreteDistribution: what every distribution object exposes

Concrete distributions are in fastdiscrete/; reference generators are in
fastdiscrete/generators.py.
"""

from .generator import UniformBitGenerator
from .distribution import DiscreteDistribution

__all__ = [
    "UniformBitGenerator",
    "DiscreteDistribution",
]
