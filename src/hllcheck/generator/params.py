"""The fixed catalog of (size, duplication probability) combinations.

Every comparison run walks this list in order. Sizes climb from a few
hundred values to half a billion; each size is crossed with three
duplication levels, except the two largest where the densest case
would take too long to be worth it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Parameter:
    """One stream shape: how many draws, and how often a draw repeats."""
    size: int
    duplication_probability: float


PARAMS: tuple[Parameter, ...] = (
    # Low cardinality with varying levels of duplication (density).
    Parameter(500, 0.0), Parameter(500, 0.25), Parameter(500, 0.8),

    # Still small cardinality.
    Parameter(1_000, 0.0), Parameter(1_000, 0.25), Parameter(1_000, 0.8),
    Parameter(5_000, 0.0), Parameter(5_000, 0.25), Parameter(5_000, 0.8),
    Parameter(10_000, 0.0), Parameter(10_000, 0.25), Parameter(10_000, 0.8),

    # Medium cardinality.
    Parameter(100_000, 0.0), Parameter(100_000, 0.25), Parameter(100_000, 0.8),
    Parameter(250_000, 0.0), Parameter(250_000, 0.25), Parameter(250_000, 0.8),
    Parameter(500_000, 0.0), Parameter(500_000, 0.25), Parameter(500_000, 0.8),

    # Higher cardinality.
    Parameter(1_000_000, 0.0), Parameter(1_000_000, 0.25), Parameter(1_000_000, 0.8),
    Parameter(5_000_000, 0.0), Parameter(5_000_000, 0.25), Parameter(5_000_000, 0.8),
    Parameter(25_000_000, 0.0), Parameter(25_000_000, 0.25), Parameter(25_000_000, 0.8),

    # Very high.
    Parameter(100_000_000, 0.0), Parameter(100_000_000, 0.25),
    Parameter(500_000_000, 0.0), Parameter(500_000_000, 0.25),
)


def select_params(
    max_size: int | None = None,
    params: Sequence[Parameter] = PARAMS,
) -> tuple[Parameter, ...]:
    """Catalog entries with size <= max_size, in catalog order.

    A max_size of None keeps everything.
    """
    if max_size is None:
        return tuple(params)
    return tuple(p for p in params if p.size <= max_size)
