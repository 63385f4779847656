"""
Numeric helpers shared by every test engine.

isna() is the single missing-value predicate of the package: every
sample passes through missing_mask()/drop_missing() before a statistic
is computed. lchoose() evaluates log binomial coefficients through the
log-gamma function so that large n does not overflow.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import gammaln

from stattests.core.exceptions import ValidationError


# Missing-value singletons of pandas, recognised without importing it
_PANDAS_NA_TYPES = frozenset({"NAType", "NaTType"})


def isna(x: Any) -> bool:
    """
    Indicate whether x is missing or NaN.

    None, ``numpy.ma.masked`` and the pandas singletons ``NA`` and ``NaT``
    are missing markers. Any number that compares unequal to itself is
    NaN (float, numpy, complex); Decimal NaN, quiet or signaling, is
    detected with is_nan(). Finite and infinite numbers are never
    missing, and neither are non-numeric objects.
    """
    if x is None or x is np.ma.masked:
        return True
    if isinstance(x, Decimal):
        return x.is_nan()
    if isinstance(x, numbers.Number):
        return bool(x != x)
    cls = type(x)
    return (cls.__name__ in _PANDAS_NA_TYPES
            and cls.__module__.split(".")[0] == "pandas")


def missing_mask(values: ArrayLike) -> NDArray[np.bool_]:
    """
    Elementwise isna() over an array-like.

    Numeric arrays take the vectorized np.isnan path; object arrays
    (lists containing None, for instance) are checked element by element.
    The mask of a numpy masked array is honoured.
    """
    arr = np.asarray(values)

    if arr.dtype.kind in 'fc':
        mask = np.isnan(arr)
    elif arr.dtype.kind in 'iub':
        mask = np.zeros(arr.shape, dtype=bool)
    elif arr.dtype == object:
        flat = np.fromiter((isna(v) for v in arr.ravel()), dtype=bool,
                           count=arr.size)
        mask = flat.reshape(arr.shape)
    else:
        raise ValidationError(
            f"non-numeric dtype {arr.dtype}, expected numeric data"
        )

    if isinstance(values, np.ma.MaskedArray):
        mask = mask | np.ma.getmaskarray(values)
    return mask


def drop_missing(values: ArrayLike) -> NDArray[np.floating[Any]]:
    """Return the non-missing elements of a 1D array-like as float64."""
    arr = np.asarray(values).ravel()
    mask = missing_mask(values).ravel()
    return arr[~mask].astype(np.float64)


def lchoose(n: float, j: float) -> float:
    """
    Return the log of the number of ways to choose j from n.

    Computed as gammaln(n+1) - gammaln(j+1) - gammaln(n-j+1), so
    non-integer arguments follow the gamma-function generalization.

    Outside 0 <= j <= n the binomial coefficient is zero and -inf is
    returned. A negative n raises ValidationError. NaN propagates.

    Examples:
        >>> lchoose(5, 2)          # log(10)
        2.302585092994046
        >>> lchoose(10, 0)
        0.0
        >>> lchoose(3, 4)
        -inf
    """
    n = float(n)
    j = float(j)

    if np.isnan(n) or np.isnan(j):
        return float('nan')
    if n < 0:
        raise ValidationError(f"n must be non-negative, got {n}")
    if j < 0 or j > n:
        return float('-inf')

    return float(gammaln(n + 1.0) - gammaln(j + 1.0) - gammaln(n - j + 1.0))
