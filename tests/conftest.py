"""Shared helpers for hllcheck tests."""
from __future__ import annotations

import random

import pytest

from hllcheck.estimators.base import Estimator, EstimatorFactory, as_factory
from hllcheck.estimators.exact import ExactCounter
from hllcheck.generator.params import Parameter


SEED = 42

SMALL_PARAMS = (
    Parameter(500, 0.0), Parameter(500, 0.25), Parameter(500, 0.8),
    Parameter(1_000, 0.0), Parameter(1_000, 0.25), Parameter(1_000, 1.0),
)


class RecordingEstimator(Estimator):
    """Exact estimator that also remembers every value in arrival order."""

    def __init__(self, log: list[list[bytes]]) -> None:
        self.values: list[bytes] = []
        self._seen: set[bytes] = set()
        log.append(self.values)

    def observe(self, value: bytes) -> None:
        self.values.append(bytes(value))
        self._seen.add(bytes(value))

    def estimate(self) -> int:
        return len(self._seen)


class FixedEstimator(Estimator):
    """Ignores its input and always reports the same count."""

    def __init__(self, answer: int) -> None:
        self._answer = answer

    def observe(self, value: bytes) -> None:
        pass

    def estimate(self) -> int:
        return self._answer


def recording_factory(log: list[list[bytes]]) -> EstimatorFactory:
    return as_factory(lambda: RecordingEstimator(log), name="recording")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def exact_factory() -> EstimatorFactory:
    return as_factory(ExactCounter)


@pytest.fixture
def small_params() -> tuple[Parameter, ...]:
    return SMALL_PARAMS
