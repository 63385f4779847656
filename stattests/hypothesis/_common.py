"""
Common types for hypothesis testing.

Defines HTestParams (maps to R's htest class), the t-test variant enum
and the per-family configuration structures.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import NDArray

from stattests.core.exceptions import ValidationError


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _validate_conf_level(conf_level: float) -> float:
    """Validate confidence level is in (0, 1)."""
    if not (0.0 < conf_level < 1.0):
        raise ValidationError(
            f"confidence_level must be in (0, 1), got {conf_level}"
        )
    return float(conf_level)


class TTestType(Enum):
    """The four t-test variants."""
    ONE_SAMPLE = "one"
    PAIRED = "paired"
    SIMPLE = "simple"
    WELCH = "welch"

    @property
    def accepted_levels(self) -> tuple[int, ...]:
        """Level counts a model of this type may carry.

        A paired model with a single level holds the differences directly.
        """
        return _ACCEPTED_LEVELS[self]

    @property
    def method(self) -> str:
        """R's method string for this variant."""
        return _METHOD_NAMES[self]


_ACCEPTED_LEVELS = {
    TTestType.ONE_SAMPLE: (1,),
    TTestType.PAIRED: (1, 2),
    TTestType.SIMPLE: (2,),
    TTestType.WELCH: (2,),
}

_METHOD_NAMES = {
    TTestType.ONE_SAMPLE: "One Sample t-test",
    TTestType.PAIRED: "Paired t-test",
    TTestType.SIMPLE: " Two Sample t-test",
    TTestType.WELCH: "Welch Two Sample t-test",
}


@dataclass(frozen=True)
class TTestConfig:
    """
    Options for a t-test.

    Attributes
    ----------
    paired : bool
        Paired test on x1 - x2. Default False.
    equal_variance : bool
        Pooled-variance (simple) two-sample test. Default False, i.e.
        Welch's test with Welch-Satterthwaite degrees of freedom.
    reference_mean : float
        Hypothesized mean (one-sample, paired) or difference in means
        (two-sample). Default 0.0.
    confidence_level : float
        Confidence level of the interval. Default 0.95.
    alternative : str
        "two.sided" (default), "less", or "greater".
    """
    paired: bool = False
    equal_variance: bool = False
    reference_mean: float = 0.0
    confidence_level: float = 0.95
    alternative: str = "two.sided"

    def __post_init__(self) -> None:
        _validate_alternative(self.alternative)
        _validate_conf_level(self.confidence_level)
        if not np.isfinite(self.reference_mean):
            raise ValidationError(
                f"reference_mean must be finite, got {self.reference_mean}"
            )

    def test_type(self, n_levels: int) -> TTestType:
        """Resolve the variant requested for a model with n_levels levels."""
        if self.paired:
            return TTestType.PAIRED
        if self.equal_variance:
            return TTestType.SIMPLE
        if n_levels == 1:
            return TTestType.ONE_SAMPLE
        return TTestType.WELCH


@dataclass(frozen=True)
class FTestConfig:
    """
    Options for the F-test of equal variances.

    Attributes
    ----------
    ratio : float
        Hypothesized ratio var(x1) / var(x2). Default 1.0.
    confidence_level : float
        Confidence level of the interval for the ratio. Default 0.95.
    alternative : str
        "two.sided" (default), "less", or "greater".
    """
    ratio: float = 1.0
    confidence_level: float = 0.95
    alternative: str = "two.sided"

    def __post_init__(self) -> None:
        _validate_alternative(self.alternative)
        _validate_conf_level(self.confidence_level)
        if not (self.ratio > 0 and np.isfinite(self.ratio)):
            raise ValidationError(
                f"ratio must be positive and finite, got {self.ratio}"
            )


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Maps directly to R's htest structure. Every hypothesis test returns
    this same structure; test-specific extras go in the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value (NaN if the data are constant).
    statistic_name : str
        Name of the test statistic ("t", "F", "D", "D^+", "D^-").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9} or {"num df": 4, "denom df": 8}.
        None for the KS test.
    p_value : float
        p-value of the test.
    conf_int : ndarray or None
        Confidence interval, shape (2,). None if not computed.
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    alternative : str
        "two.sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (e.g. standard error).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    conf_int: NDArray[np.floating[Any]] | None
    conf_level: float
    estimate: dict[str, float] | None
    null_value: dict[str, float] | None
    alternative: str
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
