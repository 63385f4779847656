"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on the model type and,
for t-tests, on the TTestType variant.
"""

from __future__ import annotations

from stattests.core.result import Result
from stattests.core.compute.timing import Timer
from stattests.hypothesis._common import HTestParams, TTestType
from stattests.hypothesis.design import TTestModel, FTestModel, KSTestModel
from stattests.hypothesis.backends._t_test import (
    t_one_sample, t_paired, t_two_sample,
)
from stattests.hypothesis.backends._f_test import f_test
from stattests.hypothesis.backends._ks_test import ks_one_sample


_T_KERNELS = {
    TTestType.ONE_SAMPLE: t_one_sample,
    TTestType.PAIRED: t_paired,
    TTestType.SIMPLE: t_two_sample,
    TTestType.WELCH: t_two_sample,
}


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(
        self,
        design: TTestModel | FTestModel | KSTestModel,
    ) -> Result[HTestParams]:
        """Dispatch to the test-specific implementation for this model."""
        timer = Timer()
        timer.start()

        if isinstance(design, TTestModel):
            test_type = design.test_type.value
            kernel = _T_KERNELS[design.test_type]
            info = {
                'test_type': test_type,
                'n': tuple(len(s) for s in design.samples),
                'levels': design.levels,
            }
        elif isinstance(design, FTestModel):
            test_type = 'f_test'
            kernel = f_test
            info = {
                'test_type': test_type,
                'n': tuple(len(s) for s in design.samples),
                'levels': design.levels,
            }
        elif isinstance(design, KSTestModel):
            test_type = 'ks_one_sample'
            kernel = ks_one_sample
            info = {'test_type': test_type, 'n': (design.n_observations,)}
        else:
            raise TypeError(
                f"Unsupported model type: {type(design).__name__}"
            )

        with timer.section(test_type):
            params, warnings_list = kernel(design)

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
