"""
stattests: classical hypothesis tests for Python.

Student's t-tests (one-sample, paired, pooled, Welch), the F-test for
equality of variances and the one-sample Kolmogorov-Smirnov test, with
results laid out like R's htest objects.

Submodules:
    hypothesis: test models, engines and results
    core: exceptions, result envelope, validation, numeric helpers
"""

__version__ = "0.1.0"

from stattests.core.numeric import isna, lchoose
from stattests.core.exceptions import (
    StatTestsError,
    ValidationError,
    LevelsError,
    DegenerateInputError,
    UndefinedStatisticError,
)
from stattests.hypothesis import (
    t_test,
    fit_t_test,
    f_test,
    fit_f_test,
    ks_test,
    TTestModel,
    FTestModel,
    KSTestModel,
    TTestType,
    TTestConfig,
    FTestConfig,
    TTestResult,
    FTestResult,
    KSTestResult,
)

__all__ = [
    "__version__",
    "isna",
    "lchoose",
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
    "TTestResult",
    "FTestResult",
    "KSTestResult",
    "StatTestsError",
    "ValidationError",
    "LevelsError",
    "DegenerateInputError",
    "UndefinedStatisticError",
]
