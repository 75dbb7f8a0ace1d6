"""
CPU reference backend for frequency statistics.

Every call is a fresh pass over the sample; the backend holds no state.
"""

from __future__ import annotations

import logging
import math

from pyfreqstats.core.result import Result
from pyfreqstats.core.compute.timing import Timer
from pyfreqstats.descriptive.design import Sample
from pyfreqstats.descriptive.solution import AnalysisParams, StatisticsSummary
from pyfreqstats.descriptive._mode import compute_mode
from pyfreqstats.descriptive._frequency import tabulate, build_frequency_rows

logger = logging.getLogger(__name__)


class CPUFrequencyBackend:
    """CPU reference backend for summary statistics and frequency tables."""

    @property
    def name(self) -> str:
        return 'cpu_frequency'

    def solve(
        self,
        sample: Sample,
        *,
        population: bool = True,
    ) -> Result[AnalysisParams]:
        """
        Compute the statistics record and the frequency table.

        Parameters
        ----------
        sample : Sample
            Validated non-empty sample.
        population : bool
            Variance divisor n if True, n - 1 if False. With n == 1 the
            variance is 0 under either policy.
        """
        timer = Timer()
        timer.start()

        data = sample.values
        n = sample.n
        warnings_list: list[str] = []

        with timer.section('tabulate'):
            distinct, counts = tabulate(data)

        with timer.section('moments'):
            # Python ints: sums cannot wrap or lose precision
            ints = data.tolist()
            total = sum(ints)
            mean = total / n
            divisor = n if population else n - 1
            if n == 1:
                variance = 0.0
                if not population:
                    warnings_list.append(
                        "n == 1: sample variance is undefined, reported as 0"
                    )
            else:
                # n * sum of squared deviations, exact
                scaled_ss = n * sum(v * v for v in ints) - total * total
                variance = scaled_ss / (n * divisor)

        with timer.section('median'):
            ordered = sample.sorted()
            mid = n // 2
            if n % 2 == 1:
                median = float(ordered[mid])
            else:
                median = (int(ordered[mid - 1]) + int(ordered[mid])) / 2

        lo = int(distinct[0])
        hi = int(distinct[-1])
        summary = StatisticsSummary(
            n=n,
            sum=total,
            min=lo,
            max=hi,
            mean=mean,
            median=median,
            mode=compute_mode(distinct, counts),
            range=hi - lo,
            variance=variance,
            std_dev=math.sqrt(variance),
        )

        with timer.section('frequency_table'):
            rows = build_frequency_rows(distinct, counts, n)

        timer.stop()
        timing = timer.result()
        logger.debug(
            "%s solved n=%d distinct=%d in %.6fs",
            self.name, n, len(rows), timing['total_seconds'],
        )

        return Result(
            params=AnalysisParams(summary=summary, frequency_table=rows),
            info={
                'method': 'population' if population else 'sample',
                'divisor': divisor,
                'n': n,
                'n_distinct': len(rows),
            },
            timing=timing,
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
