"""Calibrated timing of one procedure under one configuration.

The measuring protocol is: validity check, setup, one warm-up execution,
optional calibration of the repeat count, a single timed batch of
executions, and teardown. Setup and teardown are never timed.
"""

from __future__ import annotations

import gc
import math
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from .config import CALIBRATION_DIVISOR, MAX_REFINEMENT_DOUBLINGS, RunConfig
from .procedure import Procedure
from .time import perf_s

Clock = Callable[[], float]


@contextmanager
def gc_suppressed(enabled: bool = True) -> Iterator[None]:
    """Disable the garbage collector for the duration of the block.

    The collector is re-enabled on every exit path, unless it was already
    disabled on entry. With ``enabled=False`` this is a no-op.
    """
    if not enabled or not gc.isenabled():
        yield
        return

    gc.disable()
    try:
        yield
    finally:
        gc.enable()


def time_batch(
    proc: Procedure, cfg: Any, state: Any, nruns: int, clock: Clock = perf_s
) -> float:
    """Execute ``proc`` ``nruns`` times and return the elapsed seconds."""
    execute = proc.execute
    start = clock()
    for _ in range(nruns):
        execute(cfg, state)
    return clock() - start


def calibrate(
    proc: Procedure,
    cfg: Any,
    state: Any,
    duration_s: float,
    clock: Clock = perf_s,
) -> int:
    """Estimate how many executions fill ``duration_s``.

    A single probe is used when it is long enough to be trusted; a probe
    shorter than ``duration_s / CALIBRATION_DIVISOR`` is replaced by the
    per-execution average of a batch sized to span at least that threshold.

    Returns:
        Repeat count, at least 1.

    Raises:
        RuntimeError: If the clock still reports no elapsed time after
            ``MAX_REFINEMENT_DOUBLINGS`` doublings of the batch.
    """
    threshold = duration_s / CALIBRATION_DIVISOR
    et = time_batch(proc, cfg, state, 1, clock)

    if et < threshold:
        batch = max(2, math.ceil(duration_s / CALIBRATION_DIVISOR))
        if et > 0.0:
            batch = max(batch, math.ceil(threshold / et))
        elapsed = time_batch(proc, cfg, state, batch, clock)
        # Coarse clocks can report zero for very fast batches.
        doublings = 0
        while elapsed <= 0.0:
            if doublings >= MAX_REFINEMENT_DOUBLINGS:
                raise RuntimeError(
                    f"Clock did not advance over {batch} executions of {proc}; "
                    "cannot calibrate the repeat count"
                )
            batch *= 2
            doublings += 1
            elapsed = time_batch(proc, cfg, state, batch, clock)
        et = elapsed / batch

    return max(1, math.ceil(duration_s / et))


def run_procedure(
    proc: Procedure,
    cfg: Any,
    config: RunConfig | None = None,
    clock: Clock | None = None,
) -> tuple[int, float]:
    """Measure ``proc`` under ``cfg``.

    Args:
        proc: Procedure to measure.
        cfg: Configuration value.
        config: Run settings; ``RunConfig.default()`` when omitted.
        clock: Zero-argument callable returning seconds. Defaults to the
            monotonic performance counter.

    Returns:
        ``(nruns, etime)``: executions in the measuring stage and their total
        elapsed seconds. ``(0, 0.0)`` when ``cfg`` is invalid for ``proc``.
    """
    if config is None:
        config = RunConfig.default()
    if clock is None:
        clock = perf_s

    if not proc.is_valid(cfg):
        return (0, 0.0)

    state = proc.setup(cfg)

    # Warm-up, absorbs first-call costs.
    proc.execute(cfg, state)

    with gc_suppressed(not config.allow_gc):
        nruns = config.nruns
        if nruns <= 0:
            nruns = calibrate(proc, cfg, state, config.duration_s, clock)

        etime = time_batch(proc, cfg, state, nruns, clock)

        proc.teardown(cfg, state)

    return (nruns, etime)
