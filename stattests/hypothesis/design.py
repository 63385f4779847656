"""
Test models: the validated, immutable inputs of every test engine.

A model is a snapshot of the caller's data after validation and
missing-value filtering, plus the metadata the engine needs (test type,
group levels, configuration). Models are built by factory classmethods,
consumed by a backend, and never mutated.

Matrix form: for two-group models the last column of X is the group
indicator, 0 for levels[0] and 1 for levels[1]. Paired two-group models
pair the rows of each group in order of appearance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable
import numpy as np
from numpy.typing import NDArray, ArrayLike
from scipy import stats as sp_stats

from stattests.core.exceptions import (
    ValidationError, DimensionError, LevelsError,
)
from stattests.core.numeric import missing_mask, drop_missing
from stattests.core.protocols import ContinuousDistribution
from stattests.core.validation import (
    check_array, check_vector, check_2d, check_consistent_length,
    check_min_samples,
)
from stattests.hypothesis._common import (
    TTestType, TTestConfig, FTestConfig, _validate_alternative,
)


def _freeze(arr: ArrayLike) -> NDArray[np.floating[Any]]:
    """Private read-only float64 copy."""
    out = np.array(arr, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out


def _normalize_levels(levels: str | Iterable[Any]) -> tuple[str, ...]:
    """Levels as a tuple of unique strings."""
    if isinstance(levels, str):
        levels = (levels,)
    lv = tuple(str(level) for level in levels)
    if len(set(lv)) != len(lv):
        raise LevelsError(f"levels must be unique, got {lv}", levels=lv)
    return lv


def _check_level_count(
    levels: tuple[str, ...],
    accepted: tuple[int, ...],
    what: str,
) -> None:
    if len(levels) not in accepted:
        expected = " or ".join(str(k) for k in accepted)
        raise LevelsError(
            f"{what} requires {expected} level(s), got {len(levels)}: {levels}",
            levels=levels,
            expected=accepted,
        )


def _prepare_matrix(
    X: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Validate X (n x p) and y (n,); y keeps NaN for missing entries."""
    X_arr = check_array(X, "X")
    if X_arr.ndim == 1:
        X_arr = X_arr[:, np.newaxis]
    check_2d(X_arr, "X")
    y_arr = check_vector(y, "y")
    check_consistent_length(X_arr, y_arr, names=("X", "y"))
    return X_arr, y_arr


def _complete_matrix(
    X: ArrayLike,
    y: ArrayLike,
    n_levels: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Frozen copies of X and y for a directly constructed model.

    fit() drops missing rows before construction; a model built by hand
    must already be complete.
    """
    X_arr, y_arr = _prepare_matrix(X, y)
    if missing_mask(y_arr).any():
        raise ValidationError(
            "y: contains missing values; use fit() or from_samples() "
            "to drop them"
        )
    group = _group_indicator(X_arr, n_levels)
    if group is not None and np.isnan(group).any():
        raise ValidationError(
            "X: group indicator (last column) contains missing values"
        )
    return _freeze(X_arr), _freeze(y_arr)


def _group_indicator(
    X: NDArray[np.floating[Any]],
    n_levels: int,
) -> NDArray[np.floating[Any]] | None:
    """Last column of X for two-group models; NaN marks an unknown group."""
    if n_levels < 2:
        return None
    group = X[:, -1]
    known = group[~np.isnan(group)]
    if not np.all((known == 0.0) | (known == 1.0)):
        bad = np.unique(known[(known != 0.0) & (known != 1.0)])
        raise ValidationError(
            f"X: group indicator (last column) must contain only 0 and 1, "
            f"found {bad[:5].tolist()}"
        )
    return group


def _two_group_design(
    x1: NDArray[np.floating[Any]],
    x2: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Model matrix [1, g] and stacked response for two raw samples."""
    g = np.concatenate([np.zeros(len(x1)), np.ones(len(x2))])
    X = np.column_stack([np.ones(len(g)), g])
    return X, np.concatenate([x1, x2])


def _resolve_distribution(
    distr: str | ContinuousDistribution,
    dist_params: dict[str, float],
) -> ContinuousDistribution:
    """Map a distribution name (R or scipy spelling) to a frozen scipy distribution."""
    if not isinstance(distr, str):
        if dist_params:
            raise ValidationError(
                "distribution parameters can only be given with a "
                f"distribution name, got {sorted(dist_params)}"
            )
        if not isinstance(distr, ContinuousDistribution):
            raise ValidationError(
                f"distr must provide a cdf() method, got {type(distr).__name__}"
            )
        return distr

    dist_name = distr.lower()
    if dist_name in ("norm", "pnorm"):
        return sp_stats.norm(
            loc=dist_params.get("mean", 0.0),
            scale=dist_params.get("sd", 1.0),
        )
    if dist_name in ("unif", "punif"):
        a = dist_params.get("min", 0.0)
        b = dist_params.get("max", 1.0)
        return sp_stats.uniform(loc=a, scale=b - a)
    if dist_name in ("exp", "pexp"):
        return sp_stats.expon(scale=1.0 / dist_params.get("rate", 1.0))

    raise ValidationError(
        f"Unknown distribution: {distr!r}. "
        f"Supported: ['norm', 'pnorm', 'unif', 'punif', 'exp', 'pexp']"
    )


@dataclass(frozen=True)
class TTestModel:
    """
    A fitted t-test instance.

    Use TTestModel.fit() (matrix form) or TTestModel.from_samples()
    (raw vectors). Direct construction is validated too: X and y are
    copied read-only and y must not contain missing values.

    Attributes
    ----------
    X : ndarray, shape (n, p)
        Model matrix with missing rows removed. Last column is the group
        indicator for two-level models.
    y : ndarray, shape (n,)
        Response with missing values removed.
    test_type : TTestType
        One-sample, paired, simple or Welch.
    levels : tuple of str
        Unique group labels; the count must fit test_type.
    config : TTestConfig
        Reference mean, confidence level, alternative.
    data_name : str
        Description of the data for printed output.
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    test_type: TTestType
    levels: tuple[str, ...]
    config: TTestConfig = TTestConfig()
    data_name: str = "y"

    def __post_init__(self) -> None:
        levels = _normalize_levels(self.levels)
        _check_level_count(
            levels, self.test_type.accepted_levels,
            f"{self.test_type.value!r} t-test",
        )
        X, y = _complete_matrix(self.X, self.y, len(levels))
        object.__setattr__(self, 'levels', levels)
        object.__setattr__(self, 'X', X)
        object.__setattr__(self, 'y', y)
        for name, sample in zip(self._sample_names(), self._samples_for_check()):
            check_min_samples(sample, 2, name)

    # --- Factory classmethods ---

    @classmethod
    def fit(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        levels: str | Iterable[Any],
        config: TTestConfig | None = None,
        *,
        data_name: str | None = None,
    ) -> TTestModel:
        """
        Build a t-test model from a model matrix, response and levels.

        Rows whose response is missing (or whose group is unknown) are
        dropped. For a paired two-level model the i-th row of levels[0]
        is paired with the i-th row of levels[1]; a pair is dropped when
        either side is missing.
        """
        config = config if config is not None else TTestConfig()
        levels = _normalize_levels(levels)
        test_type = config.test_type(len(levels))
        _check_level_count(
            levels, test_type.accepted_levels, f"{test_type.value!r} t-test",
        )

        X_arr, y_arr = _prepare_matrix(X, y)
        group = _group_indicator(X_arr, len(levels))

        keep = ~missing_mask(y_arr)
        if group is not None:
            keep &= ~np.isnan(group)

        if test_type is TTestType.PAIRED and group is not None:
            idx0 = np.flatnonzero(group == 0.0)
            idx1 = np.flatnonzero(group == 1.0)
            if len(idx0) != len(idx1):
                raise DimensionError(
                    f"Paired t-test requires equal group sizes: "
                    f"{levels[0]}={len(idx0)}, {levels[1]}={len(idx1)}"
                )
            pair_ok = keep[idx0] & keep[idx1]
            keep = np.zeros(len(y_arr), dtype=bool)
            keep[idx0[pair_ok]] = True
            keep[idx1[pair_ok]] = True

        if data_name is None:
            data_name = "y" if len(levels) == 1 else f"y by {levels[0]} and {levels[1]}"

        return cls(
            X=_freeze(X_arr[keep]),
            y=_freeze(y_arr[keep]),
            test_type=test_type,
            levels=levels,
            config=config,
            data_name=data_name,
        )

    @classmethod
    def from_samples(
        cls,
        x1: ArrayLike,
        x2: ArrayLike | None = None,
        config: TTestConfig | None = None,
    ) -> TTestModel:
        """
        Build a t-test model from one or two raw samples.

        With x2 omitted this is a one-sample test of x1 (or, with
        paired=True, a paired test whose differences are x1).
        """
        config = config if config is not None else TTestConfig()
        x_arr = check_vector(x1, "x")

        if x2 is None:
            X = np.ones((len(x_arr), 1))
            return cls.fit(X, x_arr, ("x",), config, data_name="x")

        y_arr = check_vector(x2, "y")
        if config.paired and len(x_arr) != len(y_arr):
            raise DimensionError(
                f"Paired t-test requires equal lengths: "
                f"len(x)={len(x_arr)}, len(y)={len(y_arr)}"
            )
        X, y = _two_group_design(x_arr, y_arr)
        return cls.fit(X, y, ("x", "y"), config, data_name="x and y")

    # --- Derived data ---

    @property
    def n_observations(self) -> int:
        return int(self.y.shape[0])

    @property
    def reference_mean(self) -> float:
        return self.config.reference_mean

    @property
    def samples(self) -> tuple[NDArray[np.floating[Any]], ...]:
        """Response split by level, in level order."""
        if len(self.levels) == 1:
            return (self.y,)
        group = self.X[:, -1]
        return (self.y[group == 0.0], self.y[group == 1.0])

    @property
    def differences(self) -> NDArray[np.floating[Any]]:
        """Paired differences levels[0] - levels[1] (paired models only)."""
        if self.test_type is not TTestType.PAIRED:
            raise ValidationError(
                f"differences are only defined for paired models, "
                f"not {self.test_type.value!r}"
            )
        samples = self.samples
        if len(samples) == 1:
            return samples[0]
        return samples[0] - samples[1]

    def _sample_names(self) -> tuple[str, ...]:
        if self.test_type is TTestType.PAIRED:
            return ("paired differences",)
        return self.levels

    def _samples_for_check(self) -> tuple[NDArray[np.floating[Any]], ...]:
        if self.test_type is TTestType.PAIRED:
            samples = self.samples
            if len(samples) == 2 and len(samples[0]) != len(samples[1]):
                raise DimensionError(
                    f"Paired t-test requires equal group sizes: "
                    f"{len(samples[0])} and {len(samples[1])}"
                )
            return (self.differences,)
        return self.samples

    def __repr__(self) -> str:
        sizes = ", ".join(
            f"{lv}={len(s)}" for lv, s in zip(self.levels, self.samples)
        )
        return f"TTestModel(test_type={self.test_type.value!r}, {sizes})"


@dataclass(frozen=True)
class FTestModel:
    """
    A fitted F-test (variance ratio) instance.

    Attributes
    ----------
    X : ndarray, shape (n, p)
        Model matrix; the last column is the group indicator.
    y : ndarray, shape (n,)
        Response with missing values removed.
    levels : tuple of str
        Exactly two unique group labels.
    config : FTestConfig
        Null ratio, confidence level, alternative.
    data_name : str
        Description of the data for printed output.
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    levels: tuple[str, ...]
    config: FTestConfig = FTestConfig()
    data_name: str = "y"

    def __post_init__(self) -> None:
        levels = _normalize_levels(self.levels)
        _check_level_count(levels, (2,), "F-test")
        X, y = _complete_matrix(self.X, self.y, len(levels))
        object.__setattr__(self, 'levels', levels)
        object.__setattr__(self, 'X', X)
        object.__setattr__(self, 'y', y)
        for name, sample in zip(self.levels, self.samples):
            check_min_samples(sample, 2, name)

    @classmethod
    def fit(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        levels: str | Iterable[Any],
        config: FTestConfig | None = None,
        *,
        data_name: str | None = None,
    ) -> FTestModel:
        """Build an F-test model from a model matrix, response and levels."""
        config = config if config is not None else FTestConfig()
        levels = _normalize_levels(levels)
        _check_level_count(levels, (2,), "F-test")

        X_arr, y_arr = _prepare_matrix(X, y)
        group = _group_indicator(X_arr, len(levels))
        keep = ~missing_mask(y_arr) & ~np.isnan(group)

        if data_name is None:
            data_name = f"y by {levels[0]} and {levels[1]}"

        return cls(
            X=_freeze(X_arr[keep]),
            y=_freeze(y_arr[keep]),
            levels=levels,
            config=config,
            data_name=data_name,
        )

    @classmethod
    def from_samples(
        cls,
        x1: ArrayLike,
        x2: ArrayLike,
        config: FTestConfig | None = None,
    ) -> FTestModel:
        """Build an F-test model from two raw samples."""
        X, y = _two_group_design(check_vector(x1, "x"), check_vector(x2, "y"))
        return cls.fit(X, y, ("x", "y"), config, data_name="x and y")

    @property
    def n_observations(self) -> int:
        return int(self.y.shape[0])

    @property
    def ratio(self) -> float:
        return self.config.ratio

    @property
    def samples(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Response split by level, in level order."""
        group = self.X[:, -1]
        return (self.y[group == 0.0], self.y[group == 1.0])

    def __repr__(self) -> str:
        x1, x2 = self.samples
        return (
            f"FTestModel({self.levels[0]}={len(x1)}, {self.levels[1]}={len(x2)})"
        )


@dataclass(frozen=True)
class KSTestModel:
    """
    A one-sample Kolmogorov-Smirnov test instance.

    Attributes
    ----------
    x : ndarray
        Sorted sample with missing values removed.
    distribution : ContinuousDistribution
        Reference distribution; only its cdf() is used.
    alternative : str
        "two.sided" (default), "less", or "greater".
    data_name : str
        Description of the data for printed output.
    """
    x: NDArray[np.floating[Any]]
    distribution: ContinuousDistribution
    alternative: str = "two.sided"
    data_name: str = "x"

    def __post_init__(self) -> None:
        _validate_alternative(self.alternative)
        if not isinstance(self.distribution, ContinuousDistribution):
            raise ValidationError(
                f"distribution must provide a cdf() method, "
                f"got {type(self.distribution).__name__}"
            )
        x = _freeze(np.sort(drop_missing(check_vector(self.x, "x"))))
        object.__setattr__(self, 'x', x)
        check_min_samples(self.x, 1, self.data_name)

    @classmethod
    def from_sample(
        cls,
        x: ArrayLike,
        distr: str | ContinuousDistribution = "norm",
        *,
        alternative: str = "two.sided",
        **dist_params: float,
    ) -> KSTestModel:
        """
        Build a KS model from a raw sample.

        Parameters
        ----------
        x : array-like
            Numeric vector of observations; missing values are dropped.
        distr : str or ContinuousDistribution
            Any object with a cdf() method, or a distribution name
            ("norm", "unif", "exp" and R's "pnorm", "punif", "pexp").
        alternative : str
            "two.sided" (default), "less", or "greater".
        **dist_params : float
            Parameters for a named distribution (mean/sd, min/max, rate).
        """
        alternative = _validate_alternative(alternative)
        distribution = _resolve_distribution(distr, dist_params)
        return cls(
            x=x,
            distribution=distribution,
            alternative=alternative,
            data_name="x",
        )

    @property
    def n_observations(self) -> int:
        return int(self.x.shape[0])

    def __repr__(self) -> str:
        return f"KSTestModel(n={self.n_observations}, alternative={self.alternative!r})"
