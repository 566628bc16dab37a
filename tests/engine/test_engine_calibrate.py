"""Tests for repeat-count calibration."""

import math

import pytest

from benchlite.config import MAX_REFINEMENT_DOUBLINGS
from benchlite.engine import calibrate, time_batch


class QuantizedClock:
    """Clock reading a simulated clock with a coarse resolution."""

    def __init__(self, source, resolution_s: float) -> None:
        self.source = source
        self.resolution_s = resolution_s

    def __call__(self) -> float:
        return math.floor(self.source() / self.resolution_s) * self.resolution_s


class TestTimeBatch:
    """Test batch timing."""

    def test_batch_elapsed(self, fixed_cost, clock):
        proc = fixed_cost(0.5)
        assert time_batch(proc, None, None, 4, clock) == pytest.approx(2.0)
        assert proc.executions == 4

    def test_empty_batch(self, fixed_cost, clock):
        proc = fixed_cost(0.5)
        assert time_batch(proc, None, None, 0, clock) == 0.0
        assert proc.executions == 0


class TestCalibrate:
    """Test the two-stage probe."""

    @pytest.mark.parametrize("cost_s", [1e-6, 1e-5, 1e-4, 1e-3, 1e-2])
    def test_converges_to_target_duration(self, fixed_cost, clock, cost_s):
        duration_s = 1.0
        proc = fixed_cost(cost_s)
        nruns = calibrate(proc, None, None, duration_s, clock)
        assert nruns * cost_s == pytest.approx(duration_s, rel=0.2)

    @pytest.mark.parametrize("cost_s", [1e-9, 1e-8, 1e-7, 1e-6, 1e-5])
    def test_converges_for_nanosecond_costs(self, fixed_cost, clock, cost_s):
        duration_s = 1e-3
        proc = fixed_cost(cost_s)
        nruns = calibrate(proc, None, None, duration_s, clock)
        assert nruns * cost_s == pytest.approx(duration_s, rel=0.2)

    def test_slow_probe_is_trusted(self, fixed_cost, clock):
        proc = fixed_cost(0.3)
        assert calibrate(proc, None, None, 1.0, clock) == 4
        assert proc.executions == 1

    def test_fast_probe_is_refined(self, fixed_cost, clock):
        proc = fixed_cost(1e-6)
        calibrate(proc, None, None, 1.0, clock)
        # probe plus a batch spanning duration / 500
        assert proc.executions >= 2000

    def test_refinement_batch_has_at_least_two_runs(self, fixed_cost, clock):
        proc = fixed_cost(0.0019)
        calibrate(proc, None, None, 1.0, clock)
        assert proc.executions == 1 + 2

    def test_minimum_one_run(self, fixed_cost, clock):
        proc = fixed_cost(5.0)
        assert calibrate(proc, None, None, 1.0, clock) == 1

    def test_coarse_clock_still_terminates(self, fixed_cost, clock):
        proc = fixed_cost(1e-5)
        coarse = QuantizedClock(clock, 1e-3)
        nruns = calibrate(proc, None, None, 1.0, coarse)
        assert nruns >= 1

    def test_stalled_clock_raises(self, fixed_cost, clock):
        proc = fixed_cost(0.0)
        with pytest.raises(RuntimeError, match="Clock did not advance"):
            calibrate(proc, None, None, 1.0, clock)
        # probe, initial batch of 2, then 16 doublings
        batches = [2 * 2**k for k in range(MAX_REFINEMENT_DOUBLINGS + 1)]
        assert proc.executions == 1 + sum(batches)
