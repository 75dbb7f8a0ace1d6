"""
Descriptive statistics solution types.

Contains the statistics record, the parameter payload and the
user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math

from pyfreqstats.core.result import Result
from pyfreqstats.descriptive._mode import ModeDescriptor
from pyfreqstats.descriptive._frequency import FrequencyRow

if TYPE_CHECKING:
    from pyfreqstats.descriptive.design import Sample


def _format_number(x: float) -> str:
    """Integral floats without a decimal point, others as-is."""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


@dataclass(frozen=True)
class StatisticsSummary:
    """
    Core statistics of a sample.

    Integer-valued fields (n, sum, min, max, range) are exact Python ints.
    mean, median, variance and std_dev are floats at full precision;
    rounding is left to presentation.
    """
    n: int
    sum: int
    min: int
    max: int
    mean: float
    median: float
    mode: ModeDescriptor
    range: int
    variance: float
    std_dev: float

    @property
    def coefficient_of_variation(self) -> float:
        """std_dev / mean * 100, or nan when the mean is zero."""
        if self.mean == 0:
            return math.nan
        return self.std_dev / self.mean * 100.0


@dataclass(frozen=True)
class AnalysisParams:
    """Parameter payload: statistics record plus frequency table."""
    summary: StatisticsSummary
    frequency_table: tuple[FrequencyRow, ...]


@dataclass
class AnalysisSolution:
    """
    User-facing analysis results.

    Wraps Result[AnalysisParams] and provides convenient accessors.
    Consumers (renderers, exporters) read `summary` and
    `frequency_table`; both are immutable.
    """
    _result: Result[AnalysisParams]
    _sample: 'Sample'

    @property
    def summary(self) -> StatisticsSummary:
        return self._result.params.summary

    @property
    def frequency_table(self) -> tuple[FrequencyRow, ...]:
        return self._result.params.frequency_table

    @property
    def sample(self) -> 'Sample':
        return self._sample

    # --- Metadata ---

    @property
    def population(self) -> bool:
        """True if variance used divisor n, False for n - 1."""
        return self._result.info['method'] == 'population'

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def report(self) -> str:
        """Plain-text report: statistics block followed by the frequency table."""
        s = self.summary
        stats = [
            ("n", str(s.n)),
            ("Sum", str(s.sum)),
            ("Min", str(s.min)),
            ("Max", str(s.max)),
            ("Mean", f"{s.mean:.2f}"),
            ("Median", _format_number(s.median)),
            ("Mode", s.mode.text),
            ("Range", str(s.range)),
            ("Variance", f"{s.variance:.4f}"),
            ("Std. dev.", f"{s.std_dev:.4f}"),
        ]
        label_width = max(len(label) for label, _ in stats)
        lines = ["Descriptive Statistics:"]
        for label, value in stats:
            lines.append(f"  {label.ljust(label_width)}  {value}")

        headers = ["x", "fa", "fr", "Fa", "Fr", "%"]
        cells = [
            [
                str(row.value),
                str(row.absolute),
                f"{row.relative:.4f}",
                str(row.cumulative_absolute),
                f"{row.cumulative_relative:.4f}",
                f"{row.percentage:.2f}",
            ]
            for row in self.frequency_table
        ]
        widths = [
            max(len(headers[j]), max(len(c[j]) for c in cells))
            for j in range(len(headers))
        ]

        lines.append("")
        lines.append("Frequency Table:")
        lines.append("  " + "  ".join(h.rjust(w) for h, w in zip(headers, widths)))
        for c in cells:
            lines.append("  " + "  ".join(v.rjust(w) for v, w in zip(c, widths)))

        return "\n".join(lines)

    def __repr__(self) -> str:
        s = self.summary
        return (
            f"AnalysisSolution(n={s.n}, distinct={len(self.frequency_table)}, "
            f"mean={s.mean:.4g}, method={self.info['method']!r})"
        )
