"""Tab-delimited text rendering of comparison results.

Format:
    Size  Actual Cardinality  Estimation  Error (%)  Duplication (%)
    one row per implementation per parameter combination
    (blank line after each combination)

    Mean Error  Median Error  Error Variance  Max Error
    one row per implementation

Columns are separated by single tabs; percentages carry a trailing "%".
"""
from __future__ import annotations

from typing import Sequence

from hllcheck.comparison.stats import ErrorSummary, summarize_result_set
from hllcheck.domain.results import Result, ResultSet

HEADER = ("Size", "Actual Cardinality", "Estimation", "Error (%)", "Duplication (%)")
SUMMARY_HEADER = ("Mean Error", "Median Error", "Error Variance", "Max Error")


def format_header() -> str:
    return "\t".join(HEADER)


def format_row(result: Result) -> str:
    """One result row: error to 4 decimals, duplication to 2."""
    return (
        f"{result.size}\t{result.actual_cardinality}\t"
        f"{result.estimated_cardinality}\t"
        f"{result.error_percent():.4f}%\t{result.duplication_percent():.2f}%"
    )


def format_summary_header() -> str:
    return "\t".join(SUMMARY_HEADER)


def format_summary(summary: ErrorSummary) -> str:
    """Summary row. Variance is unitless, the rest are percentages."""
    return (
        f"{summary.mean:.4f}%\t{summary.median:.4f}%\t"
        f"{summary.variance:.4f}\t{summary.max_error:.4f}%"
    )


def format_summary_block(summaries: Sequence[ErrorSummary]) -> str:
    lines = [format_summary_header()]
    lines.extend(format_summary(s) for s in summaries)
    return "\n".join(lines)


def format_report(result_set: ResultSet) -> str:
    """Render a finished ResultSet the same way a live run writes it."""
    lines = [format_header()]
    for primary, secondary in result_set:
        lines.append(format_row(primary))
        if secondary is not None:
            lines.append(format_row(secondary))
        lines.append("")
    lines.append("")
    lines.append("")
    lines.append(format_summary_block(summarize_result_set(result_set)))
    return "\n".join(lines) + "\n"
