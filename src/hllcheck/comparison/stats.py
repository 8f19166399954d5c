"""Aggregate error statistics for one implementation's results.

Only the handful of measures the report needs: mean, median, population
variance and the signed error with the largest magnitude, all taken over
the per-run error percentages.
"""
from __future__ import annotations

import math
import statistics
from dataclasses import dataclass
from typing import Sequence

from hllcheck.domain.results import Result, ResultSet
from hllcheck.domain.types import Percent


@dataclass(frozen=True, slots=True)
class ErrorSummary:
    """Summary of error_percent across every run of one implementation."""
    mean: Percent
    median: Percent
    variance: float
    max_error: Percent
    runs: int


def max_abs_error(errors: Sequence[float]) -> float:
    """Signed error with the largest magnitude.

    The champion starts at 0.0 and only a strictly larger absolute value
    replaces it, so ties keep the earlier value and all-zero input
    reports 0.0.
    """
    champion = 0.0
    for err in errors:
        if abs(err) > abs(champion):
            champion = err
    return champion


def summarize(results: Sequence[Result]) -> ErrorSummary:
    """Fold a result sequence into an ErrorSummary.

    Variance is the population variance (divides by n); it is nan when
    any error is infinite. An empty sequence summarizes to all zeros.
    """
    errors = [r.error_percent() for r in results]
    if not errors:
        return ErrorSummary(mean=0.0, median=0.0, variance=0.0, max_error=0.0, runs=0)

    mean = statistics.fmean(errors)
    if all(math.isfinite(e) for e in errors):
        variance = statistics.pvariance(errors, mean)
    else:
        variance = math.nan
    return ErrorSummary(
        mean=mean,
        median=statistics.median(errors),
        variance=variance,
        max_error=max_abs_error(errors),
        runs=len(errors),
    )


def summarize_result_set(result_set: ResultSet) -> list[ErrorSummary]:
    """One summary per implementation present in the result set."""
    return [summarize(seq) for seq in result_set.implementations()]
