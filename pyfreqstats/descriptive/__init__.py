"""
Descriptive statistics module.

Summary statistics and frequency tables for discrete, ungrouped
integer data.

Public API:
    analyze(sample)                  - Summary and frequency table at once
    compute_summary(sample)          - n, sum, min, max, mean, median, mode,
                                       range, variance, std_dev
    compute_frequency_table(sample)  - fa, fr, Fa, Fr, % per distinct value
"""

from pyfreqstats.descriptive.design import Sample
from pyfreqstats.descriptive._mode import ModeDescriptor, ModeKind
from pyfreqstats.descriptive._frequency import FrequencyRow
from pyfreqstats.descriptive.solution import (
    StatisticsSummary,
    AnalysisParams,
    AnalysisSolution,
)
from pyfreqstats.descriptive.solvers import (
    analyze,
    compute_summary,
    compute_frequency_table,
)

__all__ = [
    "analyze",
    "compute_summary",
    "compute_frequency_table",
    "Sample",
    "ModeDescriptor",
    "ModeKind",
    "FrequencyRow",
    "StatisticsSummary",
    "AnalysisParams",
    "AnalysisSolution",
]
