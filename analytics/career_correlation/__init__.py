"""
Career Correlation Engine

Loads a career dataset and reports pairwise linear regressions, Pearson
correlations and descriptive statistics between career attributes.

Modules:
- config: Configuration management and environment variables
- dataset_loader: Read the career dataset CSV into Individual records
- regression: Slope, intercept, correlation and R-squared for one pair
- descriptive_stats: Mean, min and max of one sample
- analyzer: Fixed analysis catalog and strength classification
- report: Text rendering of the analysis report
- run: CLI entry point for running the full pipeline
"""

__version__ = "1.0.0"

from .config import Config
from .dataset_loader import DatasetError, Individual, read_dataset
from .regression import RegressionResult, calculate_linear_regression
from .descriptive_stats import DescriptiveStats, calculate_descriptive_stats
from .analyzer import (
    AnalysisReport,
    classify_correlation_strength,
    perform_correlation_analysis,
)
from .report import format_report

__all__ = [
    "Config",
    "DatasetError",
    "Individual",
    "read_dataset",
    "RegressionResult",
    "calculate_linear_regression",
    "DescriptiveStats",
    "calculate_descriptive_stats",
    "AnalysisReport",
    "classify_correlation_strength",
    "perform_correlation_analysis",
    "format_report",
]
