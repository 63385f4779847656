"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides R's print.htest
format. TTestResult, FTestResult and KSTestResult add the accessors
specific to each test family.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from stattests.core.result import Result
from stattests.hypothesis._common import HTestParams, TTestType

if TYPE_CHECKING:
    from stattests.hypothesis.design import TTestModel, FTestModel, KSTestModel


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams] and provides R's print.htest output format
    via summary(). All standard htest fields are available as properties.
    """
    _result: Result[HTestParams]
    _design: 'TTestModel | FTestModel | KSTestModel | None'

    # --- Standard htest fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 't', 'F', 'D')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9})."""
        return self._result.params.parameter

    @property
    def degrees_of_freedom(self) -> Any:
        """Degrees of freedom of the reference distribution, if any."""
        return None

    @property
    def p_value(self) -> float:
        """p-value of the test."""
        return self._result.params.p_value

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        """Hypothesized value under H0."""
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        """Alternative hypothesis direction."""
        return self._result.params.alternative

    @property
    def method(self) -> str:
        """Human-readable method name."""
        return self._result.params.method

    @property
    def data_name(self) -> str:
        """Description of the data."""
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def model(self) -> 'TTestModel | FTestModel | KSTestModel | None':
        """The model the result was computed from."""
        return self._design

    # --- Metadata ---

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as R's print.htest output.

        Produces output like:
            Welch Two Sample t-test

        data:  x and y
        t = -1, df = 8, p-value = 0.3466
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         -3.306004  1.306004
        sample estimates:
             mean of x      mean of y
                     3              4
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")

        lines.append(f"data:  {p.data_name}")

        # Statistic line: "t = 2.2345, df = 17.43, p-value = 0.03891"
        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
        lines.append(", ".join(parts))

        lines.append(_alternative_line(p))

        if p.conf_int is not None:
            pct = f"{p.conf_level * 100:g}"
            lines.append(f"{pct} percent confidence interval:")
            lo, hi = p.conf_int
            lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"{type(self).__name__}(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g})"
        )


class _IntervalMixin:
    """Accessors for tests that report a confidence interval."""

    @property
    def conf_int(self) -> NDArray[np.floating[Any]]:
        """Confidence interval, shape (2,)."""
        return self._result.params.conf_int

    @property
    def lower(self) -> float:
        return float(self._result.params.conf_int[0])

    @property
    def upper(self) -> float:
        return float(self._result.params.conf_int[1])

    @property
    def conf_level(self) -> float:
        """Confidence level."""
        return self._result.params.conf_level


@dataclass(repr=False)
class TTestResult(_IntervalMixin, HTestSolution):
    """Result of a one-sample, paired, simple or Welch t-test."""

    @property
    def degrees_of_freedom(self) -> float:
        """df; fractional for Welch's test."""
        return self._result.params.parameter["df"]

    @property
    def test_type(self) -> TTestType:
        return TTestType(self._result.info['test_type'])

    @property
    def stderr(self) -> float:
        """Standard error of the estimate."""
        return self._result.params.extras["stderr"]


@dataclass(repr=False)
class FTestResult(_IntervalMixin, HTestSolution):
    """Result of the F-test comparing two variances."""

    @property
    def degrees_of_freedom(self) -> tuple[float, float]:
        """(numerator df, denominator df)."""
        return (self.df1, self.df2)

    @property
    def df1(self) -> float:
        return self._result.params.parameter["num df"]

    @property
    def df2(self) -> float:
        return self._result.params.parameter["denom df"]


@dataclass(repr=False)
class KSTestResult(HTestSolution):
    """Result of the one-sample Kolmogorov-Smirnov test."""

    @property
    def n(self) -> int:
        """Number of non-missing observations."""
        return self._result.info['n'][0]

    @property
    def d_plus(self) -> float:
        return self._result.params.extras["d_plus"]

    @property
    def d_minus(self) -> float:
        return self._result.params.extras["d_minus"]


def _alternative_line(p: HTestParams) -> str:
    if p.null_value:
        nv_name = next(iter(p.null_value.keys()))
        nv_val = next(iter(p.null_value.values()))
        if p.alternative == "two.sided":
            return f"alternative hypothesis: true {nv_name} is not equal to {nv_val:g}"
        if p.alternative == "less":
            return f"alternative hypothesis: true {nv_name} is less than {nv_val:g}"
        return f"alternative hypothesis: true {nv_name} is greater than {nv_val:g}"
    # KS test: no null value, R phrases it in terms of the CDF
    if p.alternative == "two.sided":
        return "alternative hypothesis: two-sided"
    if p.alternative == "less":
        return "alternative hypothesis: the CDF of x lies below the null hypothesis"
    return "alternative hypothesis: the CDF of x lies above the null hypothesis"


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if np.isnan(p):
        return "NA"
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
