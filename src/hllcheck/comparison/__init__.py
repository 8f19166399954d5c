"""Comparison engine, error statistics and report rendering.

Public API:
    run_comparison: drive one or two estimators through the catalog
    summarize: fold a result sequence into an ErrorSummary
    format_report: render a finished ResultSet as text
"""

from hllcheck.comparison.engine import DEFAULT_SEED, run_comparison
from hllcheck.comparison.report import (
    format_header,
    format_report,
    format_row,
    format_summary,
)
from hllcheck.comparison.stats import (
    ErrorSummary,
    max_abs_error,
    summarize,
    summarize_result_set,
)

__all__ = [
    "DEFAULT_SEED",
    "ErrorSummary",
    "format_header",
    "format_report",
    "format_row",
    "format_summary",
    "max_abs_error",
    "run_comparison",
    "summarize",
    "summarize_result_set",
]
