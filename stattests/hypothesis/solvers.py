"""
Solver dispatch for hypothesis tests.

Provides t_test(), f_test() and ks_test(), which accept raw samples,
a model matrix with response and levels, or a pre-built model, and the
fit_t_test()/fit_f_test() entry points that run an existing model.
"""

from __future__ import annotations

from typing import Any, Iterable, Literal
from numpy.typing import ArrayLike

from stattests.core.exceptions import ValidationError
from stattests.core.protocols import Backend, ContinuousDistribution
from stattests.hypothesis._common import TTestConfig, FTestConfig, HTestParams
from stattests.hypothesis.design import TTestModel, FTestModel, KSTestModel
from stattests.hypothesis.solution import TTestResult, FTestResult, KSTestResult
from stattests.hypothesis.backends.cpu import CPUHypothesisBackend


BackendChoice = Literal['cpu', 'auto']


def _get_backend(
    backend: str = 'cpu',
) -> Backend[TTestModel | FTestModel | KSTestModel, HTestParams]:
    """Select backend for hypothesis tests. Only the CPU backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def fit_t_test(model: TTestModel, *, backend: BackendChoice = 'cpu') -> TTestResult:
    """
    Compute the t statistic, df, p-value and confidence interval of a model.

    Parameters
    ----------
    model : TTestModel
        Built with TTestModel.fit() or TTestModel.from_samples().
    backend : str
        'cpu' (default).

    Returns
    -------
    TTestResult
    """
    if not isinstance(model, TTestModel):
        raise ValidationError(
            f"fit_t_test expects a TTestModel, got {type(model).__name__}"
        )
    result = _get_backend(backend).solve(model)
    return TTestResult(_result=result, _design=model)


def t_test(
    x: ArrayLike | TTestModel,
    y: ArrayLike | None = None,
    levels: str | Iterable[Any] | None = None,
    *,
    paired: bool = False,
    equal_variance: bool = False,
    reference_mean: float = 0.0,
    confidence_level: float = 0.95,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    config: TTestConfig | None = None,
    backend: BackendChoice = 'cpu',
) -> TTestResult:
    """
    Student's t-test. Matches R t.test().

    Call forms:
        t_test(x)                       one-sample test of mean(x) = reference_mean
        t_test(x1, x2)                  Welch two-sample test
        t_test(x1, x2, equal_variance=True)   pooled two-sample test
        t_test(x1, x2, paired=True)     paired test on x1 - x2
        t_test(X, y, levels)            model matrix form, see TTestModel.fit
        t_test(model)                   run a pre-built TTestModel

    Parameters
    ----------
    x : array-like or TTestModel
        First sample, or the model matrix when levels is given.
    y : array-like or None
        Second sample, or the response when levels is given.
    levels : sequence of str or None
        Group labels (matrix form only).
    paired : bool
        Paired t-test. x and y must have the same length.
    equal_variance : bool
        If True, use pooled variance (Student's t). If False (default),
        use Welch's approximation with Welch-Satterthwaite df.
    reference_mean : float
        Hypothesized mean (one-sample, paired) or difference in means.
    confidence_level : float
        Confidence level for the interval. Default 0.95.
    alternative : str
        "two.sided" (default), "less", or "greater".
    config : TTestConfig or None
        Full configuration; overrides the individual keyword options.
    backend : str
        'cpu' (default).

    Returns
    -------
    TTestResult
        statistic, degrees_of_freedom, p_value, conf_int, estimate, ...
    """
    if isinstance(x, TTestModel):
        return fit_t_test(x, backend=backend)

    if config is None:
        config = TTestConfig(
            paired=paired,
            equal_variance=equal_variance,
            reference_mean=reference_mean,
            confidence_level=confidence_level,
            alternative=alternative,
        )

    if levels is not None:
        if y is None:
            raise ValidationError("y (response vector) is required with levels")
        model = TTestModel.fit(x, y, levels, config)
    else:
        model = TTestModel.from_samples(x, y, config)

    return fit_t_test(model, backend=backend)


def fit_f_test(model: FTestModel, *, backend: BackendChoice = 'cpu') -> FTestResult:
    """
    Compute the F statistic, degrees of freedom and p-value of a model.

    Raises
    ------
    UndefinedStatisticError
        If the variance of the second group is zero.
    """
    if not isinstance(model, FTestModel):
        raise ValidationError(
            f"fit_f_test expects an FTestModel, got {type(model).__name__}"
        )
    result = _get_backend(backend).solve(model)
    return FTestResult(_result=result, _design=model)


def f_test(
    x: ArrayLike | FTestModel,
    y: ArrayLike | None = None,
    levels: str | Iterable[Any] | None = None,
    *,
    ratio: float = 1.0,
    confidence_level: float = 0.95,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    config: FTestConfig | None = None,
    backend: BackendChoice = 'cpu',
) -> FTestResult:
    """
    F-test to compare two variances. Matches R var.test().

    Call forms:
        f_test(x1, x2)          raw samples
        f_test(X, y, levels)    model matrix form, see FTestModel.fit
        f_test(model)           run a pre-built FTestModel

    Parameters
    ----------
    x : array-like or FTestModel
        First sample, or the model matrix when levels is given.
    y : array-like
        Second sample, or the response when levels is given.
    levels : sequence of str or None
        Exactly two group labels (matrix form only).
    ratio : float
        Hypothesized ratio var(x) / var(y). Default 1.
    confidence_level : float
        Confidence level. Default 0.95.
    alternative : str
        "two.sided" (default), "less", or "greater".
    config : FTestConfig or None
        Full configuration; overrides the individual keyword options.
    backend : str
        'cpu' (default).

    Returns
    -------
    FTestResult
    """
    if isinstance(x, FTestModel):
        return fit_f_test(x, backend=backend)

    if y is None:
        raise ValidationError("f_test requires a second sample y")

    if config is None:
        config = FTestConfig(
            ratio=ratio,
            confidence_level=confidence_level,
            alternative=alternative,
        )

    if levels is not None:
        model = FTestModel.fit(x, y, levels, config)
    else:
        model = FTestModel.from_samples(x, y, config)

    return fit_f_test(model, backend=backend)


def ks_test(
    x: ArrayLike | KSTestModel,
    distr: str | ContinuousDistribution = "norm",
    *,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    backend: BackendChoice = 'cpu',
    **dist_params: float,
) -> KSTestResult:
    """
    One-sample Kolmogorov-Smirnov test. Matches R ks.test(exact=FALSE).

    Parameters
    ----------
    x : array-like or KSTestModel
        Numeric vector of observations; missing values are dropped.
    distr : ContinuousDistribution or str
        Any object with a cdf() method (e.g. scipy.stats.norm(0, 1)),
        or a distribution name: "norm", "unif", "exp" (R's "pnorm",
        "punif", "pexp" also accepted). Default standard normal.
    alternative : str
        "two.sided" (default), "less", or "greater".
    backend : str
        'cpu' (default).
    **dist_params : float
        Parameters for a named distribution (mean/sd, min/max, rate).

    Returns
    -------
    KSTestResult
        statistic D (or D^+ / D^-) and asymptotic p_value.
    """
    if isinstance(x, KSTestModel):
        model = x
    else:
        model = KSTestModel.from_sample(
            x, distr, alternative=alternative, **dist_params,
        )

    result = _get_backend(backend).solve(model)
    return KSTestResult(_result=result, _design=model)
