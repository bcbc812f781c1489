"""
Descriptive statistics for a single numeric sample.
"""

import warnings
from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class DescriptiveStats:
    """Mean, minimum and maximum of one sample."""

    mean: float
    min: float
    max: float


def calculate_descriptive_stats(values: Sequence[float]) -> DescriptiveStats:
    """
    Compute mean, min and max of a non-empty sample.

    NaN entries are ignored by min/max but still propagate into the mean.

    Args:
        values: Sequence of real numbers

    Returns:
        DescriptiveStats: (mean, min, max)

    Raises:
        ValueError: If the sample is empty
    """
    data = np.asarray(values, dtype=float)

    if data.size == 0:
        raise ValueError("Descriptive statistics require at least one value")

    with warnings.catch_warnings():
        # All-NaN input yields NaN for min/max
        warnings.simplefilter("ignore", RuntimeWarning)
        minimum = np.nanmin(data)
        maximum = np.nanmax(data)

    return DescriptiveStats(
        mean=float(np.mean(data)),
        min=float(minimum),
        max=float(maximum),
    )
