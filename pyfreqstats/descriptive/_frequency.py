"""
Frequency table construction.

Two-tier precision: running sums (Fa, Fr) are accumulated at full
precision in ascending value order; only the numbers stored in each
FrequencyRow are rounded (fr and Fr to 4 places, percentage to 2).
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from pyfreqstats.core.compute.precision import (
    RELATIVE_DECIMALS,
    PERCENT_DECIMALS,
    round_display,
)


@dataclass(frozen=True)
class FrequencyRow:
    """
    One row of the frequency table.

    Attributes:
        value: The distinct value (x_i)
        absolute: Absolute frequency (fa)
        relative: Relative frequency fa/n (fr), rounded to 4 places
        cumulative_absolute: Running total of fa (Fa)
        cumulative_relative: Running total of fa/n (Fr), rounded to 4 places
        percentage: fr * 100, rounded to 2 places
    """
    value: int
    absolute: int
    relative: float
    cumulative_absolute: int
    cumulative_relative: float
    percentage: float

    @property
    def fa(self) -> int:
        return self.absolute

    @property
    def fr(self) -> float:
        return self.relative

    @property
    def Fa(self) -> int:
        return self.cumulative_absolute

    @property
    def Fr(self) -> float:
        return self.cumulative_relative


def tabulate(values: NDArray[np.int64]) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """
    Count occurrences of each distinct value.

    Returns
    -------
    distinct : NDArray
        Distinct values, strictly ascending.
    counts : NDArray
        Absolute frequency of each distinct value.
    """
    distinct, counts = np.unique(values, return_counts=True)
    return distinct, counts.astype(np.int64)


def build_frequency_rows(
    distinct: NDArray[np.int64],
    counts: NDArray[np.int64],
    n: int,
) -> tuple[FrequencyRow, ...]:
    """
    Build the frequency table from a tabulation.

    Parameters
    ----------
    distinct : NDArray
        Distinct values, ascending.
    counts : NDArray
        Absolute frequency per distinct value.
    n : int
        Sample size (sum of counts).
    """
    relative = counts / n
    cumulative = np.cumsum(counts)
    # Fr = Fa / n, so the last row is exactly 1.0
    cumulative_relative = cumulative / n

    return tuple(
        FrequencyRow(
            value=int(distinct[i]),
            absolute=int(counts[i]),
            relative=round_display(relative[i], RELATIVE_DECIMALS),
            cumulative_absolute=int(cumulative[i]),
            cumulative_relative=round_display(cumulative_relative[i], RELATIVE_DECIMALS),
            percentage=round_display(relative[i] * 100.0, PERCENT_DECIMALS),
        )
        for i in range(len(distinct))
    )
