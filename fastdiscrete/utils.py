"""
Utility functions shared by the samplers.

Includes:
- generator_bounds: read and check a generator's output range
- unit_interval: map a raw draw onto [0, 1]
- prefix_sums / suffix_sums: cumulative weight tables
"""

from typing import Sequence

from .primitives import UniformBitGenerator


def generator_bounds(g: UniformBitGenerator) -> tuple[int, int]:
    """
    Return (min, max) of a generator's output range.

    Raises:
        ValueError: if the range holds fewer than two values
    """
    g_min = g.min
    g_max = g.max
    if g_max <= g_min:
        raise ValueError(
            f"Generator range must satisfy max > min, got [{g_min}, {g_max}]"
        )
    return g_min, g_max


def unit_interval(raw: int, g_min: int, g_max: int) -> float:
    """
    Normalise a raw draw to [0, 1].

    Both ends are reachable: raw == g_min gives 0.0 and raw == g_max gives 1.0.
    """
    # int / int true division stays exact up to the final rounding, even for
    # ranges wider than a double's mantissa
    return (raw - g_min) / (g_max - g_min)


def prefix_sums(weights: Sequence[float]) -> tuple[float, ...]:
    """
    Cumulative sums: entry i is weights[0] + ... + weights[i].

    Non-decreasing for non-negative weights; the last entry is the total mass.
    """
    sums = []
    total = 0.0
    for w in weights:
        total += w
        sums.append(total)
    return tuple(sums)


def suffix_sums(weights: Sequence[float]) -> tuple[float, ...]:
    """
    Remaining mass: entry i is weights[i] + ... + weights[K-1].

    Summed from the back, so an entry is exactly 0.0 when every weight from i
    onward is zero.
    """
    sums = []
    total = 0.0
    for w in reversed(weights):
        total += w
        sums.append(total)
    sums.reverse()
    return tuple(sums)
