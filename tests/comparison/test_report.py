"""Tests for text rendering."""
from __future__ import annotations

import io

from hllcheck.comparison.engine import run_comparison
from hllcheck.comparison.report import (
    format_header,
    format_report,
    format_row,
    format_summary,
)
from hllcheck.comparison.stats import ErrorSummary
from hllcheck.domain.results import Result
from hllcheck.estimators.base import as_factory
from hllcheck.estimators.hyperloglog import HyperLogLog


class TestRows:
    def test_header(self):
        assert format_header().split("\t") == [
            "Size", "Actual Cardinality", "Estimation", "Error (%)", "Duplication (%)",
        ]

    def test_row_precision(self):
        r = Result(actual_cardinality=200, estimated_cardinality=201, size=1000)
        assert format_row(r) == "1000\t200\t201\t0.4975%\t80.00%"

    def test_summary_row(self):
        s = ErrorSummary(mean=-0.12346, median=0.5, variance=2.25, max_error=-3.0, runs=4)
        assert format_summary(s) == "-0.1235%\t0.5000%\t2.2500\t-3.0000%"


class TestFormatReport:
    def test_matches_live_output(self, exact_factory, small_params):
        hll = as_factory(lambda: HyperLogLog(precision=8))
        sink = io.StringIO()
        rs = run_comparison(exact_factory, hll, sink, params=small_params)
        assert format_report(rs) == sink.getvalue()
