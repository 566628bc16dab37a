"""Batch driver running every procedure against every configuration."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, TextIO

from .config import BatchConfig, Verbosity
from .engine import Clock, run_procedure
from .logging import (
    BaseLogHandler,
    FileLogHandler,
    Logger,
    LoggerConfig,
    StreamLogHandler,
)
from .procedure import Procedure
from .table import BenchmarkTable


def progress_logger(
    sink: TextIO | None = None, log_file: str | None = None
) -> Logger:
    """Build a logger writing bare progress lines to ``sink`` (default stdout).

    Every line is flushed immediately so progress is visible while the next
    cell is being measured. With ``log_file``, the same lines are appended to
    that file as well.
    """
    config = LoggerConfig(str_format="%(message)s", buffer_size=1)
    handlers: list[BaseLogHandler] = [
        StreamLogHandler(sys.stdout if sink is None else sink)
    ]
    if log_file is not None:
        handlers.append(FileLogHandler(log_file))
    return Logger(name="benchlite", config=config, handlers=handlers)


class BatchRunner:
    """Runs a list of procedures against a list of configurations.

    Procedures are iterated in the outer loop, configurations in the inner
    loop, strictly sequentially. Any exception raised by a procedure aborts
    the batch; cells measured so far remain readable through ``table``.

    Args:
        procs: Procedures to measure.
        cfgs: Configurations to measure them under.
        config: Batch settings; ``BatchConfig.default()`` when omitted.
        logger: Destination of progress lines. When omitted, a logger
            writing to ``sink`` and to ``config.log_file`` (if set) is created.
        sink: Text stream for the default logger (default stdout).
        clock: Clock forwarded to the timing engine.
    """

    def __init__(
        self,
        procs: Sequence[Procedure],
        cfgs: Sequence[Any],
        config: BatchConfig | None = None,
        logger: Logger | None = None,
        sink: TextIO | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.procs = list(procs)
        self.cfgs = list(cfgs)
        self.config = config if config is not None else BatchConfig.default()
        self.logger = (
            logger
            if logger is not None
            else progress_logger(sink, self.config.log_file)
        )
        self.clock = clock
        self.table: BenchmarkTable | None = None

    def run(self) -> BenchmarkTable:
        """Measure every cell and return the populated table."""
        self.table = BenchmarkTable(self.cfgs, self.procs)
        run_config = self.config.run_config()
        verbose = self.config.verbose

        try:
            for j, proc in enumerate(self.procs):
                procname = str(proc)
                if verbose >= Verbosity.PROCEDURE:
                    self.logger.info(f"Benchmarking {procname} ...")

                for i, cfg in enumerate(self.cfgs):
                    nr, et = run_procedure(proc, cfg, run_config, self.clock)
                    self.table.record(i, j, nr, et)

                    if verbose >= Verbosity.CELL:
                        self.logger.info(
                            f"  {procname} with cfg = {cfg}: nruns = {nr}, elapsed = {et} secs"
                        )
        finally:
            self.logger.flush()

        return self.table


def run_batch(
    procs: Sequence[Procedure],
    cfgs: Sequence[Any],
    config: BatchConfig | None = None,
    logger: Logger | None = None,
    sink: TextIO | None = None,
    clock: Clock | None = None,
) -> BenchmarkTable:
    """Run ``procs`` against ``cfgs`` and return the results table.

    See ``BatchRunner`` for the arguments.
    """
    return BatchRunner(procs, cfgs, config, logger, sink, clock).run()
