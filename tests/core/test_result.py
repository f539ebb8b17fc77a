"""
Tests for the Result[P] envelope and the Timer.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "modified"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_mgs",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "modified"
        assert result.backend_name == "cpu_mgs"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("vector 3 has magnitude 1e-07 below tolerance",),
        )
        assert result.has_warning("below tolerance")
        assert not result.has_warning("singular")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('rank'):
            pass
        with timer.section('rank'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'rank'}
        assert result['rank'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()['total_seconds'] >= 0.0
