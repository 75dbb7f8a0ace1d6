"""
Precision constants for presentation and parsing.

Rounding is applied only where a value is placed into an output row;
running sums and moments are always carried at full float64 precision.
"""

from decimal import Decimal, ROUND_HALF_UP

import numpy as np

# Decimal places for relative and cumulative relative frequency
RELATIVE_DECIMALS = 4

# Decimal places for percentages
PERCENT_DECIMALS = 2

# Integer literals outside this range are rejected by the parser
INT_MIN = int(np.iinfo(np.int64).min)
INT_MAX = int(np.iinfo(np.int64).max)

# Longest int64 literal, sign excluded
INT_MAX_DIGITS = len(str(INT_MAX))


def round_display(value: float, decimals: int) -> float:
    """
    Round a scalar to `decimals` places for presentation.

    Ties round away from zero on the exact binary value of `value`, so
    1/32 becomes 0.0313 and 3.125 becomes 3.13.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))
