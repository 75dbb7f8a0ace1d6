"""
PyFreqStats: descriptive statistics and frequency tables for discrete data.

Parses free-form integer input and computes the classic summary
(mean, median, mode, range, variance, standard deviation) together with
an absolute/relative/cumulative frequency table.

Submodules:
    parsing: Text to validated integer Sample
    descriptive: Summary statistics and frequency tables
"""

import logging

__version__ = "0.1.0"

from pyfreqstats import parsing
from pyfreqstats import descriptive
from pyfreqstats.parsing import parse, ParseOptions
from pyfreqstats.descriptive import (
    analyze,
    compute_summary,
    compute_frequency_table,
    Sample,
    ModeDescriptor,
    FrequencyRow,
    StatisticsSummary,
    AnalysisSolution,
)
from pyfreqstats.core.exceptions import (
    PyFreqStatsError,
    ValidationError,
    EmptyInputError,
    NoTokensError,
    InvalidTokensError,
    NoValidTokensError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "parsing",
    "descriptive",
    "parse",
    "ParseOptions",
    "analyze",
    "compute_summary",
    "compute_frequency_table",
    "Sample",
    "ModeDescriptor",
    "FrequencyRow",
    "StatisticsSummary",
    "AnalysisSolution",
    "PyFreqStatsError",
    "ValidationError",
    "EmptyInputError",
    "NoTokensError",
    "InvalidTokensError",
    "NoValidTokensError",
]
