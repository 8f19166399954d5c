"""Estimator contract plus the estimators that ship with the harness.

Public API:
    Estimator, EstimatorFactory: the interfaces an estimator under test implements
    as_factory: wrap a zero-argument callable as a factory
    HyperLogLog: register-based sketch (~2 KB at the default precision)
    ExactCounter: set-backed exact baseline
    builtin_factory: look up a shipped estimator by name
"""
from __future__ import annotations

from hllcheck.estimators.base import Estimator, EstimatorFactory, as_factory
from hllcheck.estimators.exact import ExactCounter
from hllcheck.estimators.hyperloglog import HyperLogLog

BUILTIN_ESTIMATORS = ("hll", "exact")


def builtin_factory(name: str, precision: int = 11) -> EstimatorFactory:
    """Factory for a shipped estimator. precision only applies to "hll"."""
    if name == "hll":
        HyperLogLog(precision)  # fail now on a bad precision, not mid-run
        return as_factory(lambda: HyperLogLog(precision), name=f"hll(p={precision})")
    if name == "exact":
        return as_factory(ExactCounter, name="exact")
    raise ValueError(
        f"Unknown estimator {name!r}, expected one of {', '.join(BUILTIN_ESTIMATORS)}"
    )


__all__ = [
    "BUILTIN_ESTIMATORS",
    "Estimator",
    "EstimatorFactory",
    "ExactCounter",
    "HyperLogLog",
    "as_factory",
    "builtin_factory",
]
