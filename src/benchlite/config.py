"""Configuration structures for single-cell and batch benchmark runs."""

import math
from enum import IntEnum
from typing import Self

from msgspec import Struct

# A single probe faster than duration / CALIBRATION_DIVISOR is re-estimated
# from a batch of executions.
CALIBRATION_DIVISOR = 500

# Doublings of the refinement batch allowed while the clock reports no
# elapsed time.
MAX_REFINEMENT_DOUBLINGS = 16


class Verbosity(IntEnum):
    """How much progress the batch driver reports."""

    SILENT = 0
    PROCEDURE = 1
    CELL = 2


class RunConfig(Struct):
    """Settings for measuring one procedure under one configuration.

    Args:
        nruns: Fixed number of measured executions. When 0, the count is
            calibrated so the measurement lasts roughly ``duration_s``.
        duration_s: Target duration of the measuring stage, in seconds.
        allow_gc: When False, the garbage collector is disabled while
            measuring.
    """

    nruns: int = 0
    duration_s: float = 1.0
    allow_gc: bool = True

    def __post_init__(self):
        """Validate run settings."""
        if self.nruns < 0:
            raise ValueError(f"Invalid nruns; expected >=0 but got {self.nruns}")
        if not (math.isfinite(self.duration_s) and self.duration_s > 0.0):
            raise ValueError(
                f"Invalid duration_s; expected finite >0 but got {self.duration_s}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return a calibrated one-second run with the GC left enabled."""
        return cls(nruns=0, duration_s=1.0, allow_gc=True)


class BatchConfig(Struct):
    """Settings for running every procedure against every configuration.

    Args:
        duration_s: Target measuring duration for each cell, in seconds.
        verbose: Progress reporting level, see ``Verbosity``.
        allow_gc: When False, the garbage collector is disabled while
            measuring each cell.
        log_file: When set, progress lines are also appended to this file.
    """

    duration_s: float = 1.0
    verbose: Verbosity = Verbosity.CELL
    allow_gc: bool = True
    log_file: str | None = None

    def __post_init__(self):
        """Validate batch settings and normalise the verbosity level."""
        if not (math.isfinite(self.duration_s) and self.duration_s > 0.0):
            raise ValueError(
                f"Invalid duration_s; expected finite >0 but got {self.duration_s}"
            )
        try:
            self.verbose = Verbosity(self.verbose)
        except ValueError:
            raise ValueError(
                f"Invalid verbose; expected one of [0, 1, 2] but got {self.verbose}"
            ) from None

    @classmethod
    def default(cls) -> Self:
        """Return one-second cells with per-cell progress lines."""
        return cls(duration_s=1.0, verbose=Verbosity.CELL, allow_gc=True)

    def run_config(self) -> RunConfig:
        """Return the per-cell run settings implied by this batch."""
        return RunConfig(nruns=0, duration_s=self.duration_s, allow_gc=self.allow_gc)
