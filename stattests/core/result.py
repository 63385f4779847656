"""
Generic result container for all stattests computations.

The Result class provides a standardized envelope that every test result
uses. Timing, backend identification and non-fatal warnings live here
while each test family defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, sample sizes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The test-specific parameter payload type

    Attributes:
        params: Test-specific parameters (statistic, p-value, ...)
        info: Structured metadata (test type, group sizes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=HTestParams(statistic=-1.0, ...),
        ...     info={'test_type': 'welch', 'n': (5, 5)},
        ...     timing={'total_seconds': 0.0001, 'welch': 0.00008},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
