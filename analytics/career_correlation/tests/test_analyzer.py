"""
Unit tests for the analyzer module.
"""

import logging
import math

import numpy as np
import pytest

from analytics.career_correlation.dataset_loader import Individual
from analytics.career_correlation.analyzer import (
    CORRELATION_ANALYSES,
    DESCRIPTIVE_SUBJECTS,
    AnalysisReport,
    classify_correlation_strength,
    extract_sample,
    perform_correlation_analysis,
)


def make_individuals(ages, experience, family=None, salary=None):
    family = family or [2.0] * len(ages)
    salary = salary or [50000.0 + 1000 * i for i in range(len(ages))]
    return [
        Individual(
            id=i,
            age=float(age),
            years_of_experience=float(exp),
            job_satisfaction=float(3 + i % 5),
            professional_network_size=float(20 + 7 * i),
            family_influence=float(fam),
            salary=float(sal),
        )
        for i, (age, exp, fam, sal) in enumerate(zip(ages, experience, family, salary))
    ]


@pytest.mark.parametrize("correlation, strength", [
    (0.0, "weak"),
    (0.29999, "weak"),
    (-0.29999, "weak"),
    (0.30, "moderate"),
    (-0.30, "moderate"),
    (0.69999, "moderate"),
    (0.70, "strong"),
    (-0.70, "strong"),
    (1.0, "strong"),
    (math.inf, "strong"),
    (-math.inf, "strong"),
    (math.nan, "undefined"),
])
def test_classify_correlation_strength(correlation, strength):
    """Band lower bounds are inclusive; NaN is undefined."""
    assert classify_correlation_strength(correlation) == strength


def test_catalog_order():
    """The catalogs are fixed and ordered."""
    assert [entry.label for entry in CORRELATION_ANALYSES] == [
        "Age vs Years of Experience",
        "Age vs Job Satisfaction",
        "Age vs Professional Network Size",
        "Years of Experience vs Professional Network Size",
        "Professional Network Size vs Job Satisfaction",
        "Family Influence vs Salary",
        "Age vs Salary",
        "Years of Experience vs Salary",
    ]
    assert [subject.label for subject in DESCRIPTIVE_SUBJECTS] == [
        "Age",
        "Professional Network Size",
        "Years of Experience",
        "Job Satisfaction",
    ]


def test_catalog_fields_exist_on_individual():
    fields = Individual.__dataclass_fields__
    for entry in CORRELATION_ANALYSES:
        assert entry.x_field in fields
        assert entry.y_field in fields
    for subject in DESCRIPTIVE_SUBJECTS:
        assert subject.field in fields


def test_extract_sample_preserves_order():
    individuals = make_individuals([40, 20, 30], [10, 2, 5])

    sample = extract_sample(individuals, "age")

    np.testing.assert_array_equal(sample, [40.0, 20.0, 30.0])


def test_extract_sample_unknown_field():
    with pytest.raises(KeyError):
        extract_sample(make_individuals([1, 2], [1, 2]), "shoe_size")


def test_perform_correlation_analysis_linear_age_experience():
    """Age and experience on an exact line give r = 1 and slope a / (n - 1)."""
    ages = [30, 35, 40, 45, 50]
    individuals = make_individuals(ages, [0.5 * a - 5 for a in ages])

    report = perform_correlation_analysis(individuals)

    assert isinstance(report, AnalysisReport)
    assert not report.is_empty
    assert report.n_individuals == 5
    assert len(report.pair_analyses) == len(CORRELATION_ANALYSES)

    first = report.pair_analyses[0]
    assert first.label == "Age vs Years of Experience"
    assert first.result.correlation == pytest.approx(1.0)
    assert first.result.r_squared == pytest.approx(1.0)
    assert first.result.slope == pytest.approx(0.125)
    assert first.result.intercept == pytest.approx(10.0)
    assert first.strength == "strong"


def test_perform_correlation_analysis_descriptive_stats():
    individuals = make_individuals([25, 35, 45], [1, 10, 20])

    report = perform_correlation_analysis(individuals)

    summaries = {summary.label: summary.stats for summary in report.descriptive_stats}
    assert list(summaries) == [subject.label for subject in DESCRIPTIVE_SUBJECTS]
    assert summaries["Age"].mean == pytest.approx(35.0)
    assert summaries["Age"].min == 25.0
    assert summaries["Age"].max == 45.0
    assert summaries["Years of Experience"].max == 20.0


def test_constant_family_influence_surfaces_nan():
    """All-Medium family influence gives a NaN correlation, not zero."""
    individuals = make_individuals([30, 40, 50, 60], [5, 9, 20, 30], family=[2.0] * 4)

    report = perform_correlation_analysis(individuals)

    family = next(a for a in report.pair_analyses if a.label == "Family Influence vs Salary")
    assert math.isnan(family.result.correlation)
    assert math.isnan(family.result.slope)
    assert family.strength == "undefined"


def test_empty_dataset_skips_engines():
    """No individuals: empty report, engines never invoked."""
    report = perform_correlation_analysis([])

    assert report.is_empty
    assert report.pair_analyses == []
    assert report.descriptive_stats == []


def test_single_individual_skips_engines(caplog):
    """One individual: no analyses, flagged as insufficient."""
    with caplog.at_level(logging.WARNING):
        report = perform_correlation_analysis(make_individuals([30], [5]))

    assert report.n_individuals == 1
    assert not report.is_empty
    assert report.is_insufficient
    assert report.pair_analyses == []
    assert report.descriptive_stats == []
    assert "Need at least 2 individuals" in caplog.text


def test_two_individuals_are_analyzed():
    report = perform_correlation_analysis(make_individuals([30, 40], [5, 12]))

    assert not report.is_insufficient
    assert len(report.pair_analyses) == len(CORRELATION_ANALYSES)
    assert report.pair_analyses[0].result.correlation == pytest.approx(1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
