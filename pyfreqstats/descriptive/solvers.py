"""
Solver dispatch for frequency statistics.

Provides analyze() as the comprehensive entry point, plus
compute_summary() and compute_frequency_table() for callers that need
only one of the two outputs.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pyfreqstats.descriptive.design import Sample
from pyfreqstats.descriptive.solution import AnalysisSolution, StatisticsSummary
from pyfreqstats.descriptive._frequency import (
    FrequencyRow, tabulate, build_frequency_rows,
)
from pyfreqstats.descriptive.backends.cpu import CPUFrequencyBackend


def _ensure_sample(data: ArrayLike | Sample) -> Sample:
    """Convert raw integer sequence to Sample if needed."""
    if isinstance(data, Sample):
        return data
    return Sample.from_values(data)


def analyze(
    sample: ArrayLike | Sample,
    *,
    population: bool = True,
) -> AnalysisSolution:
    """
    Compute summary statistics and the frequency table in one pass.

    Parameters
    ----------
    sample : array-like or Sample
        Non-empty 1D integer data, or a Sample from parse().
    population : bool
        Population variance (divisor n) if True, sample variance
        (divisor n - 1) if False.

    Returns
    -------
    AnalysisSolution with `summary` and `frequency_table` populated.
    """
    smp = _ensure_sample(sample)
    result = CPUFrequencyBackend().solve(smp, population=population)
    return AnalysisSolution(_result=result, _sample=smp)


def compute_summary(
    sample: ArrayLike | Sample,
    *,
    population: bool = True,
) -> StatisticsSummary:
    """
    Compute n, sum, min, max, mean, median, mode, range, variance, std_dev.

    Parameters
    ----------
    sample : array-like or Sample
    population : bool
        Variance divisor n if True, n - 1 if False.
    """
    return analyze(sample, population=population).summary


def compute_frequency_table(sample: ArrayLike | Sample) -> tuple[FrequencyRow, ...]:
    """
    Frequency table: one row per distinct value, ascending.

    Parameters
    ----------
    sample : array-like or Sample
    """
    smp = _ensure_sample(sample)
    distinct, counts = tabulate(smp.values)
    return build_frequency_rows(distinct, counts, smp.n)
