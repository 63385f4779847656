"""
Core infrastructure for stattests.

This module provides shared abstractions and utilities used by the
hypothesis test engines.

Key components:
    protocols: Backend, ContinuousDistribution protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    numeric: isna, lchoose and missing-value filtering
"""

from stattests.core.protocols import Backend, ContinuousDistribution
from stattests.core.result import Result
from stattests.core.numeric import isna, lchoose, missing_mask, drop_missing
from stattests.core.exceptions import (
    StatTestsError,
    ValidationError,
    DimensionError,
    LevelsError,
    DegenerateInputError,
    NumericalError,
    UndefinedStatisticError,
)

__all__ = [
    # Protocols
    "Backend",
    "ContinuousDistribution",
    # Result
    "Result",
    # Numeric helpers
    "isna",
    "lchoose",
    "missing_mask",
    "drop_missing",
    # Exceptions
    "StatTestsError",
    "ValidationError",
    "DimensionError",
    "LevelsError",
    "DegenerateInputError",
    "NumericalError",
    "UndefinedStatisticError",
]
