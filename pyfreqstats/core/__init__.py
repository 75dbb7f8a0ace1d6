"""
Core infrastructure for PyFreqStats.

Shared abstractions used by the parsing and descriptive subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and precision constants
"""

from pyfreqstats.core.result import Result
from pyfreqstats.core.exceptions import (
    PyFreqStatsError,
    ValidationError,
    EmptyInputError,
    NoTokensError,
    InvalidTokensError,
    NoValidTokensError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyFreqStatsError",
    "ValidationError",
    "EmptyInputError",
    "NoTokensError",
    "InvalidTokensError",
    "NoValidTokensError",
]
