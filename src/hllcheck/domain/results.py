"""Result records produced by a comparison run."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from hllcheck.domain.types import Cardinality, Percent


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of one estimator on one parameter combination."""
    actual_cardinality: Cardinality
    estimated_cardinality: Cardinality
    size: int

    def error_percent(self) -> Percent:
        """Marginal error between estimate and truth, as a percentage.

        -0.76 means the estimate fell 0.76% short of the actual count.
        The formula divides by the estimate, so an estimate of zero for a
        non-empty stream yields -inf. Zero for zero is no error at all.
        """
        if self.estimated_cardinality == 0:
            return 0.0 if self.actual_cardinality == 0 else -math.inf
        return 100.0 * (1 - self.actual_cardinality / self.estimated_cardinality)

    def duplication_percent(self) -> Percent:
        """Share of the stream (in %) that repeated a previous value."""
        if self.size == 0:
            return 0.0
        return 100.0 * ((self.size - self.actual_cardinality) / self.size)


@dataclass(frozen=True, slots=True)
class ResultSet:
    """Results of a whole run, one sequence per implementation.

    Both sequences follow the order of the parameter catalog. ``secondary``
    is None when the run compared a single implementation.
    """
    primary: tuple[Result, ...]
    secondary: tuple[Result, ...] | None = None

    @property
    def paired(self) -> bool:
        return self.secondary is not None

    def implementations(self) -> list[tuple[Result, ...]]:
        """Result sequences for every implementation that took part."""
        if self.secondary is None:
            return [self.primary]
        return [self.primary, self.secondary]

    def __len__(self) -> int:
        return len(self.primary)

    def __iter__(self) -> Iterator[tuple[Result, Result | None]]:
        """Yield (primary, secondary) pairs per parameter combination."""
        if self.secondary is None:
            for r in self.primary:
                yield r, None
        else:
            yield from zip(self.primary, self.secondary)
