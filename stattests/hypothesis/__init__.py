"""
Hypothesis testing module.

Provides hypothesis tests matching R's implementations.

Public API:
    t_test(x, y)         - Student's t-test (one-sample, paired, pooled, Welch)
    fit_t_test(model)    - run a TTestModel
    f_test(x, y)         - F-test to compare two variances
    fit_f_test(model)    - run an FTestModel
    ks_test(x, distr)    - one-sample Kolmogorov-Smirnov test
"""

from stattests.hypothesis.solvers import (
    t_test, fit_t_test, f_test, fit_f_test, ks_test,
)
from stattests.hypothesis.design import TTestModel, FTestModel, KSTestModel
from stattests.hypothesis._common import (
    HTestParams, TTestType, TTestConfig, FTestConfig,
)
from stattests.hypothesis.solution import (
    HTestSolution, TTestResult, FTestResult, KSTestResult,
)
from stattests.hypothesis.backends._ks_test import kolmogorov_cdf, kolmogorov_sf

__all__ = [
    "t_test",
    "fit_t_test",
    "f_test",
    "fit_f_test",
    "ks_test",
    "TTestModel",
    "FTestModel",
    "KSTestModel",
    "TTestType",
    "TTestConfig",
    "FTestConfig",
    "HTestParams",
    "HTestSolution",
    "TTestResult",
    "FTestResult",
    "KSTestResult",
    "kolmogorov_cdf",
    "kolmogorov_sf",
]
