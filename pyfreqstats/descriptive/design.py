"""
Sample: validated data wrapper for frequency statistics.

Wraps a 1D integer array and provides validation and metadata for
the descriptive pipeline. Follows the Design pattern: immutable after
construction, built only through classmethods.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyfreqstats.core.validation import check_integer_array, check_1d, check_nonempty


@dataclass(frozen=True)
class Sample:
    """
    Validated, ordered, non-empty sample of signed integers.

    Input order is preserved and duplicates are kept. The wrapped array
    is read-only.

    Construction:
        Sample.from_values([13, 9, 14, 11])
        Sample.from_text("13, 9; 14 11")
    """
    _values: NDArray[np.int64]
    _n: int

    @classmethod
    def from_values(cls, values: ArrayLike) -> Sample:
        """
        Build Sample from a sequence of integers.

        Parameters
        ----------
        values : array-like
            1D sequence of integers (list, tuple, or integer ndarray).
            Floats are rejected, even when integral.
        """
        if isinstance(values, Sample):
            return values

        data = check_integer_array(values, "values")
        check_1d(data, "values")
        check_nonempty(data, "values")

        # Own a private copy so later mutation of the caller's array is invisible
        data = data.copy()
        data.flags.writeable = False
        return cls(_values=data, _n=int(data.shape[0]))

    @classmethod
    def from_text(cls, raw: str, *, allow_negative: bool = True) -> Sample:
        """Build Sample by parsing free-form text. See pyfreqstats.parse."""
        from pyfreqstats.parsing.parser import parse
        return parse(raw, allow_negative=allow_negative)

    @property
    def values(self) -> NDArray[np.int64]:
        """Read-only data array, in input order."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def sorted(self) -> NDArray[np.int64]:
        """Ascending copy of the data. The sample itself is untouched."""
        return np.sort(self._values, kind='stable')

    def tolist(self) -> list[int]:
        return self._values.tolist()

    def __len__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sample):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self) -> int:
        return hash(self._values.tobytes())

    def __repr__(self) -> str:
        head = ", ".join(str(v) for v in self._values[:8].tolist())
        more = ", ..." if self._n > 8 else ""
        return f"Sample(n={self._n}, values=[{head}{more}])"
