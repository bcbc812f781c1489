"""
Correlation analyzer module for the Career Correlation Engine.

Runs the fixed catalog of pairwise regressions and the fixed set of
descriptive statistics over the loaded individuals.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from .dataset_loader import Individual
from .descriptive_stats import DescriptiveStats, calculate_descriptive_stats
from .regression import RegressionResult, calculate_linear_regression

logger = logging.getLogger(__name__)

WEAK_CORRELATION_THRESHOLD = 0.30
STRONG_CORRELATION_THRESHOLD = 0.70

# Regression needs at least two observations per sample
MIN_INDIVIDUALS = 2


@dataclass(frozen=True)
class AnalysisEntry:
    """A named (X, Y) pair of Individual fields."""

    label: str
    x_field: str
    y_field: str


@dataclass(frozen=True)
class StatisticsSubject:
    """A named Individual field summarized with descriptive statistics."""

    label: str
    field: str


@dataclass(frozen=True)
class PairAnalysis:
    label: str
    result: RegressionResult
    strength: str


@dataclass(frozen=True)
class SubjectSummary:
    label: str
    stats: DescriptiveStats


@dataclass
class AnalysisReport:
    """Everything computed for one run, in catalog order."""

    n_individuals: int
    pair_analyses: List[PairAnalysis] = field(default_factory=list)
    descriptive_stats: List[SubjectSummary] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.n_individuals == 0

    @property
    def is_insufficient(self) -> bool:
        """True when too few individuals were loaded to run any analysis."""
        return self.n_individuals < MIN_INDIVIDUALS


CORRELATION_ANALYSES = (
    AnalysisEntry("Age vs Years of Experience", "age", "years_of_experience"),
    AnalysisEntry("Age vs Job Satisfaction", "age", "job_satisfaction"),
    AnalysisEntry("Age vs Professional Network Size", "age", "professional_network_size"),
    AnalysisEntry(
        "Years of Experience vs Professional Network Size",
        "years_of_experience",
        "professional_network_size",
    ),
    AnalysisEntry(
        "Professional Network Size vs Job Satisfaction",
        "professional_network_size",
        "job_satisfaction",
    ),
    AnalysisEntry("Family Influence vs Salary", "family_influence", "salary"),
    AnalysisEntry("Age vs Salary", "age", "salary"),
    AnalysisEntry("Years of Experience vs Salary", "years_of_experience", "salary"),
)

DESCRIPTIVE_SUBJECTS = (
    StatisticsSubject("Age", "age"),
    StatisticsSubject("Professional Network Size", "professional_network_size"),
    StatisticsSubject("Years of Experience", "years_of_experience"),
    StatisticsSubject("Job Satisfaction", "job_satisfaction"),
)


def extract_sample(individuals: Sequence[Individual], field_name: str) -> np.ndarray:
    """
    Extract one field from every individual, preserving order.

    Raises:
        KeyError: If Individual has no such field
    """
    if field_name not in Individual.__dataclass_fields__:
        raise KeyError(f"Unknown individual field: {field_name}")
    return np.array([getattr(ind, field_name) for ind in individuals], dtype=float)


def classify_correlation_strength(correlation: float) -> str:
    """
    Classify |correlation| into 'weak', 'moderate' or 'strong'.

    Lower bounds are inclusive: 0.30 is moderate, 0.70 is strong.
    A NaN correlation is classified as 'undefined'.
    """
    if math.isnan(correlation):
        return "undefined"

    magnitude = abs(correlation)
    if magnitude < WEAK_CORRELATION_THRESHOLD:
        return "weak"
    if magnitude < STRONG_CORRELATION_THRESHOLD:
        return "moderate"
    return "strong"


def analyze_pair(individuals: Sequence[Individual], entry: AnalysisEntry) -> PairAnalysis:
    """Run the regression engine on one catalog entry."""
    x = extract_sample(individuals, entry.x_field)
    y = extract_sample(individuals, entry.y_field)

    result = calculate_linear_regression(x, y)

    if not np.isfinite([result.slope, result.correlation]).all():
        logger.warning(
            f"   ⚠️  {entry.label}: non-finite result "
            f"(slope={result.slope}, correlation={result.correlation})"
        )

    return PairAnalysis(
        label=entry.label,
        result=result,
        strength=classify_correlation_strength(result.correlation),
    )


def perform_correlation_analysis(individuals: Sequence[Individual]) -> AnalysisReport:
    """
    Run every catalog analysis and descriptive summary.

    With fewer than MIN_INDIVIDUALS individuals nothing is computed and a
    report without analyses is returned (see AnalysisReport.is_insufficient).

    Args:
        individuals: Records from read_dataset()

    Returns:
        AnalysisReport: Pair analyses and descriptive statistics in catalog order

    Example:
        >>> report = perform_correlation_analysis(read_dataset("career_dataset.csv"))
        >>> report.pair_analyses[0].strength
    """
    logger.info("=" * 80)
    logger.info("COMPUTING CORRELATIONS")
    logger.info("=" * 80)

    if len(individuals) < MIN_INDIVIDUALS:
        logger.warning(
            f"   ⚠️  Need at least {MIN_INDIVIDUALS} individuals to analyze, got {len(individuals)}"
        )
        return AnalysisReport(n_individuals=len(individuals))

    report = AnalysisReport(n_individuals=len(individuals))

    logger.info(f"\n1. Running {len(CORRELATION_ANALYSES)} pairwise regressions on {len(individuals)} individuals...")
    for entry in CORRELATION_ANALYSES:
        analysis = analyze_pair(individuals, entry)
        report.pair_analyses.append(analysis)
        logger.info(
            f"   ✓ {entry.label:50} r={analysis.result.correlation:+.4f} ({analysis.strength})"
        )

    logger.info(f"\n2. Computing descriptive statistics for {len(DESCRIPTIVE_SUBJECTS)} fields...")
    for subject in DESCRIPTIVE_SUBJECTS:
        stats = calculate_descriptive_stats(extract_sample(individuals, subject.field))
        report.descriptive_stats.append(SubjectSummary(label=subject.label, stats=stats))

    logger.info("\n" + "=" * 80)
    logger.info("CORRELATION ANALYSIS COMPLETE")
    logger.info("=" * 80)

    return report
