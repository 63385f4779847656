"""
Input validation utilities for stattests.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. The one deliberate exception is
missing data: None and NaN are accepted everywhere a sample is expected
and are mapped to NaN so the test engines can drop them.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from stattests.core.exceptions import (
    ValidationError, DimensionError, DegenerateInputError,
)
from stattests.core.numeric import missing_mask


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to a float64 array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.iscomplexobj(result):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64)


def check_vector(
    values: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert a sample to a 1D float64 array with missing entries as NaN.

    Unlike check_array, lists holding None (object dtype) are accepted:
    every element for which isna() is true becomes NaN.

    Args:
        values: Sample to convert
        name: Parameter name for error messages

    Returns:
        1D float64 array, same length as the input

    Raises:
        ValidationError: If an element is neither numeric nor missing
    """
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    try:
        mask = missing_mask(values)
    except ValidationError as e:
        raise ValidationError(f"{name}: {e}") from e

    if np.iscomplexobj(arr):
        raise ValidationError(f"{name}: complex data is not supported")

    if arr.dtype == object:
        bad = [v for v in arr[~mask].ravel() if not isinstance(v, numbers.Real)]
        if bad:
            raise ValidationError(
                f"{name}: contains non-numeric values, e.g. {bad[0]!r}"
            )

    out = np.empty(arr.shape, dtype=np.float64)
    try:
        out[~mask] = arr[~mask].astype(np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(
            f"{name}: contains non-numeric values: {e}"
        ) from e
    out[mask] = np.nan

    return out.ravel()


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(
    array: NDArray[np.floating[Any]],
    min_samples: int,
    name: str,
) -> None:
    """
    Verify a (missing-filtered) sample has at least min_samples entries.

    Args:
        array: Sample to check
        min_samples: Minimum required samples (first dimension)
        name: Group name for error messages

    Raises:
        DegenerateInputError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise DegenerateInputError(
            f"{name}: requires at least {min_samples} non-missing "
            f"observations, got {n}",
            group=name,
            n_observations=n,
            required=min_samples,
        )
