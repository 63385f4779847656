"""
Core protocols for stattests.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that third-party objects, such as frozen scipy.stats distributions, can
be passed in without wrapping.
"""

from typing import Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Test model type


@runtime_checkable
class ContinuousDistribution(Protocol):
    """
    A continuous univariate distribution, seen only through its CDF.

    The KS test never samples from the distribution; it only evaluates
    the cumulative distribution function at the order statistics.
    Any object with a ``cdf`` method qualifies, e.g.
    ``scipy.stats.norm(loc=0, scale=1)``.
    """

    def cdf(self, x: float) -> float:
        """Return P(X <= x), a probability in [0, 1]."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated test model and produces a parameter
    payload wrapped in a Result. Backends are stateless: all configuration
    travels with the model.

    Type Parameters:
        D: The test model type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{family}', e.g. 'cpu_hypothesis'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Args:
            design: Validated test model

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If the statistic is undefined for the data
            ValidationError: If the model is invalid for this backend
        """
        ...
