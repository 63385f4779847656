"""
F-test for equality of two variances, matching R's var.test().

Supports:
- Two-sample F-test
- One-sided and two-sided alternatives
- Confidence interval for variance ratio
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from stattests.core.exceptions import UndefinedStatisticError
from stattests.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from stattests.hypothesis.design import FTestModel


def f_test(model: FTestModel) -> tuple[HTestParams, list[str]]:
    """F-test for equality of two variances, matching R's var.test()."""
    x, y = model.samples
    ratio = model.ratio
    alternative = model.config.alternative
    conf_level = model.config.confidence_level
    warnings_list: list[str] = []

    df_x = float(len(x) - 1)
    df_y = float(len(y) - 1)

    var_x = float(np.var(x, ddof=1))
    var_y = float(np.var(y, ddof=1))

    if var_y == 0.0:
        raise UndefinedStatisticError(
            f"F statistic is undefined: variance of {model.levels[1]} is zero",
            statistic_name="F",
        )
    if var_x == 0.0:
        warnings_list.append(f"variance of {model.levels[0]} is zero")

    # F statistic: ratio of sample variances divided by null ratio
    f_stat = (var_x / var_y) / ratio

    cdf = float(sp_stats.f.cdf(f_stat, df_x, df_y))
    sf = float(sp_stats.f.sf(f_stat, df_x, df_y))
    if alternative == "two.sided":
        p_value = min(1.0, 2.0 * min(cdf, sf))
    elif alternative == "less":
        p_value = cdf
    else:  # greater
        p_value = sf

    # Confidence interval for the ratio of variances
    estimate_ratio = var_x / var_y
    alpha = 1.0 - conf_level
    if alternative == "two.sided":
        ci_lo = estimate_ratio / float(sp_stats.f.ppf(1.0 - alpha / 2.0, df_x, df_y))
        ci_hi = estimate_ratio / float(sp_stats.f.ppf(alpha / 2.0, df_x, df_y))
    elif alternative == "less":
        ci_lo = 0.0
        ci_hi = estimate_ratio / float(sp_stats.f.ppf(alpha, df_x, df_y))
    else:  # greater
        ci_lo = estimate_ratio / float(sp_stats.f.ppf(1.0 - alpha, df_x, df_y))
        ci_hi = float('inf')

    return HTestParams(
        statistic=float(f_stat),
        statistic_name="F",
        parameter={"num df": df_x, "denom df": df_y},
        p_value=p_value,
        conf_int=np.array([ci_lo, ci_hi]),
        conf_level=conf_level,
        estimate={"ratio of variances": float(estimate_ratio)},
        null_value={"ratio of variances": ratio},
        alternative=alternative,
        method="F test to compare two variances",
        data_name=model.data_name,
    ), warnings_list
