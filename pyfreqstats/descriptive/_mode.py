"""
Mode computation and classification.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import numpy as np
from numpy.typing import NDArray


ModeKind = Literal['none', 'unimodal', 'bimodal', 'multimodal']


@dataclass(frozen=True)
class ModeDescriptor:
    """
    Most frequent value(s) of a sample.

    Attributes:
        modes: Every value attaining the maximum frequency, ascending
        frequency: The maximum frequency (>= 1)
        kind: 'none' when no value repeats, otherwise by number of modes
    """
    modes: tuple[int, ...]
    frequency: int
    kind: ModeKind

    @property
    def text(self) -> str:
        """Display label: 'No mode', or the modes joined by ', '."""
        if self.kind == 'none':
            return "No mode"
        return ", ".join(str(m) for m in self.modes)


def classify_mode(n_modes: int, frequency: int) -> ModeKind:
    """Classify by maximum frequency and number of tied values."""
    if frequency == 1:
        return 'none'
    if n_modes == 1:
        return 'unimodal'
    if n_modes == 2:
        return 'bimodal'
    return 'multimodal'


def compute_mode(
    distinct: NDArray[np.int64],
    counts: NDArray[np.int64],
) -> ModeDescriptor:
    """
    Build the ModeDescriptor from a tabulation.

    Parameters
    ----------
    distinct : NDArray
        Distinct values, ascending (as returned by np.unique).
    counts : NDArray
        Absolute frequency of each distinct value.
    """
    max_freq = int(counts.max())
    modes = tuple(int(v) for v in distinct[counts == max_freq])
    return ModeDescriptor(
        modes=modes,
        frequency=max_freq,
        kind=classify_mode(len(modes), max_freq),
    )
