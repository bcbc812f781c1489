"""
Plain-text rendering of an AnalysisReport.
"""

from typing import List

from .analyzer import AnalysisReport


def format_report(report: AnalysisReport) -> str:
    """
    Render the correlation analyses and descriptive statistics.

    Non-finite values are printed as-is (nan, inf, -inf).
    """
    lines: List[str] = ["", "--- Correlation Analyses ---"]

    for analysis in report.pair_analyses:
        result = analysis.result
        lines.append("")
        lines.append(f"{analysis.label}:")
        lines.append(f"Correlation Coefficient: {result.correlation:.4f}")
        lines.append(f"Regression Equation: Y = {result.slope:.4f} * X + {result.intercept:.4f}")
        lines.append(f"R-squared: {result.r_squared:.4f}")
        lines.append(f"{analysis.strength.capitalize()} correlation")

    lines.append("")
    lines.append("--- Descriptive Statistics ---")
    for summary in report.descriptive_stats:
        stats = summary.stats
        lines.append(
            f"{summary.label} - Mean: {stats.mean:.2f}, Min: {stats.min:.2f}, Max: {stats.max:.2f}"
        )

    return "\n".join(lines)
