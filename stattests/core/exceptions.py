"""
Exception hierarchy for stattests.

All exceptions inherit from StatTestsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class StatTestsError(Exception):
    """Base exception for all stattests errors."""
    pass


class ValidationError(StatTestsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class LevelsError(ValidationError):
    """
    Group levels do not fit the requested test.

    Raised while building a test model when the number of levels does
    not match what the test type accepts (e.g. a Welch test with a
    single level), or when levels are not unique.

    Attributes:
        levels: The offending levels
        expected: Accepted level counts
    """

    def __init__(
        self,
        message: str,
        levels: tuple[str, ...] | None = None,
        expected: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.levels = levels
        self.expected = expected


class DegenerateInputError(ValidationError):
    """
    Not enough usable observations.

    Raised when, after removing missing values, a group has fewer
    observations than the statistic needs.

    Attributes:
        group: Name of the group that is too small
        n_observations: Number of non-missing observations found
        required: Minimum number of observations required
    """

    def __init__(
        self,
        message: str,
        group: str | None = None,
        n_observations: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.group = group
        self.n_observations = n_observations
        self.required = required


class NumericalError(StatTestsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class UndefinedStatisticError(NumericalError):
    """
    The test statistic is undefined for the given data.

    Raised by the F-test when the denominator sample variance is zero.

    Attributes:
        statistic_name: Name of the statistic ("F")
    """

    def __init__(self, message: str, statistic_name: str | None = None):
        super().__init__(message)
        self.statistic_name = statistic_name
