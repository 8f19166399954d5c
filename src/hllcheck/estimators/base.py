"""Interfaces an estimator under test has to implement.

The harness knows nothing about how an estimator works. It only feeds
it encoded values and asks for a count at the end, and it asks a
factory for a fresh instance every time so no state leaks between
parameter combinations or between the two implementations of a
paired run.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from hllcheck.domain.types import Cardinality, EncodedValue


class Estimator(ABC):
    """A cardinality estimator as seen by the harness."""

    @abstractmethod
    def observe(self, value: EncodedValue) -> None:
        """Ingest one 8-byte value."""
        ...

    @abstractmethod
    def estimate(self) -> Cardinality:
        """Current estimate of the number of distinct values observed."""
        ...


class EstimatorFactory(ABC):
    """Mints independent, empty Estimator instances."""

    @abstractmethod
    def create(self) -> Estimator:
        ...


class _CallableFactory(EstimatorFactory):
    __slots__ = ("_fn", "_name")

    def __init__(self, fn: Callable[[], Estimator], name: str | None) -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", type(fn).__name__)

    def create(self) -> Estimator:
        return self._fn()

    def __repr__(self) -> str:
        return f"EstimatorFactory({self._name})"


def as_factory(
    fn: Callable[[], Estimator],
    name: str | None = None,
) -> EstimatorFactory:
    """Wrap a zero-argument callable (usually a class) as a factory.

        factory = as_factory(lambda: HyperLogLog(precision=14))
    """
    return _CallableFactory(fn, name)
