"""
Tests for the Result[P] envelope and the Timer that fills its timing.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
    - Timer sections accumulate and require start/stop ordering
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from stattests.core.compute import Timer
from stattests.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_hypothesis",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"test_type": "welch", "n": (5, 5)},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["n"] == (5, 5)
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_hypothesis"

    def test_timing_none(self):
        assert _result().timing is None

    def test_default_warnings_empty(self):
        assert _result().warnings == ()

    def test_frozen(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"


# ═══════════════════════════════════════════════════════════════════════
# Warnings
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("data are essentially constant",))
        assert result.has_warning("constant")
        assert not result.has_warning("ties")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section("welch"):
            pass
        with timer.section("welch"):
            pass
        timer.stop()
        timing = timer.result()
        assert set(timing) == {"total_seconds", "welch"}
        assert timing["total_seconds"] >= 0.0
        assert timing["welch"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section("f_test"):
                raise ValueError("inside")
        timer.stop()
        assert "f_test" in timer.result()
