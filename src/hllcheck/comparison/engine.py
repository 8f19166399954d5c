"""Comparison engine: drive estimators through identical streams.

For every parameter combination in the catalog:
  1. Build a StreamGenerator from the run's shared random source.
  2. Ask each factory for a fresh estimator.
  3. Pull values until the stream is drained, handing the same encoded
     bytes to every estimator in the same iteration (lockstep).
  4. Read the true cardinality once and pair it with each estimate.

Results are only handed back once every combination has finished. Any
exception aborts the run and the caller gets nothing; rows already
written to the sink stay there.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence, TextIO

from hllcheck.comparison.report import (
    format_header,
    format_row,
    format_summary_block,
)
from hllcheck.comparison.stats import summarize_result_set
from hllcheck.domain.errors import ConfigurationError
from hllcheck.domain.results import Result, ResultSet
from hllcheck.estimators.base import Estimator, EstimatorFactory
from hllcheck.generator.params import PARAMS, Parameter
from hllcheck.generator.stream import StreamGenerator, encode_value

log = logging.getLogger(__name__)

DEFAULT_SEED = 1


def _drain_single(gen: StreamGenerator, est: Estimator) -> None:
    observe = est.observe
    for value in gen:
        observe(encode_value(value))


def _drain_paired(gen: StreamGenerator, est1: Estimator, est2: Estimator) -> None:
    observe1 = est1.observe
    observe2 = est2.observe
    for value in gen:
        buf = encode_value(value)
        observe1(buf)
        observe2(buf)


def _emit(sink: TextIO, text: str) -> None:
    sink.write(text)
    sink.write("\n")


def run_comparison(
    primary: EstimatorFactory | None,
    secondary: EstimatorFactory | None = None,
    sink: TextIO | None = None,
    *,
    seed: int | str | bytes | None = DEFAULT_SEED,
    params: Sequence[Parameter] = PARAMS,
) -> ResultSet:
    """Run every parameter combination against one or two estimators.

    If sink is given, rows are written there as each combination
    finishes, followed by the summary block at the end. The ResultSet
    is returned either way.

    The same seed, factories and params always give the same ResultSet.
    """
    if primary is None:
        raise ConfigurationError("must provide at least one implementation")

    rng = random.Random(seed)
    paired = secondary is not None
    log.info(
        "Starting %s comparison: seed=%r, %d parameter combinations",
        "paired" if paired else "single", seed, len(params),
    )

    primary_results: list[Result] = []
    secondary_results: list[Result] = []

    if sink is not None:
        _emit(sink, format_header())

    for param in params:
        gen = StreamGenerator(param.size, param.duplication_probability, rng)

        est1 = primary.create()
        if paired:
            est2 = secondary.create()
            _drain_paired(gen, est1, est2)
        else:
            est2 = None
            _drain_single(gen, est1)

        actual = gen.cardinality
        result1 = Result(
            actual_cardinality=actual,
            estimated_cardinality=est1.estimate(),
            size=gen.size,
        )
        primary_results.append(result1)

        result2 = None
        if est2 is not None:
            result2 = Result(
                actual_cardinality=actual,
                estimated_cardinality=est2.estimate(),
                size=gen.size,
            )
            secondary_results.append(result2)

        log.debug(
            "n=%d p=%.2f actual=%d estimates=%s",
            param.size, param.duplication_probability, actual,
            [r.estimated_cardinality for r in (result1, result2) if r is not None],
        )

        if sink is not None:
            _emit(sink, format_row(result1))
            if result2 is not None:
                _emit(sink, format_row(result2))
            _emit(sink, "")
            sink.flush()

    result_set = ResultSet(
        primary=tuple(primary_results),
        secondary=tuple(secondary_results) if paired else None,
    )

    if sink is not None:
        _emit(sink, "\n")
        summaries = summarize_result_set(result_set)
        _emit(sink, format_summary_block(summaries))
        sink.flush()

    log.info("Comparison finished: %d results per implementation", len(result_set))
    return result_set
