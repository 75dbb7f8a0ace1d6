"""
Generic result container for all PyFreqStats computations.

The Result class provides a standardized envelope that domain results use.
Shared tooling (timing, logging, reporting) reads the envelope while each
domain defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, divisor, sizes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so consumers can never alter a result
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (summary, frequency rows, ...)
        info: Structured metadata (method, divisor, n, n_distinct)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=AnalysisParams(summary=s, frequency_table=rows),
        ...     info={'method': 'population', 'divisor': 10},
        ...     timing={'total_seconds': 0.0002},
        ...     backend_name='cpu_frequency'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
