"""
Shared compute infrastructure for PyFreqStats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared numeric infrastructure.

Submodules:
    timing: Execution timing utilities
    precision: Display rounding and integer range constants
"""

from pyfreqstats.core.compute.timing import Timer
from pyfreqstats.core.compute.precision import (
    RELATIVE_DECIMALS,
    PERCENT_DECIMALS,
    INT_MIN,
    INT_MAX,
    INT_MAX_DIGITS,
    round_display,
)

__all__ = [
    # Timing
    "Timer",
    # Precision
    "RELATIVE_DECIMALS",
    "PERCENT_DECIMALS",
    "INT_MIN",
    "INT_MAX",
    "INT_MAX_DIGITS",
    "round_display",
]
