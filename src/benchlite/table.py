"""Benchmark results table and its per-cell entries."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np
from msgspec import Struct
from numpy.typing import NDArray

from .procedure import Procedure
from .units import BenchmarkUnit, convert_values


class BenchmarkEntry(Struct, frozen=True):
    """Immutable view of one table cell.

    Args:
        plen: Problem length of the cell.
        nruns: Number of executions in the measuring stage (0 if not run).
        etime: Elapsed seconds of the measuring stage.
    """

    plen: int
    nruns: int
    etime: float


class BenchmarkTable:
    """Results of running every procedure against every configuration.

    Rows follow the configurations (m), columns follow the procedures (n).
    Problem lengths are computed for every cell on construction; run counts
    and elapsed times start at zero, meaning "not run" or "invalid".

    Args:
        cfgs: Configurations, in display order.
        procs: Procedures, in display order.
        plens: Optional precomputed m-by-n problem lengths.
        nruns: Optional m-by-n run counts.
        etime: Optional m-by-n elapsed times in seconds.

    Raises:
        TypeError: If a procedure does not derive from Procedure.
        ValueError: If a supplied grid is not m-by-n.
    """

    def __init__(
        self,
        cfgs: Sequence[Any],
        procs: Sequence[Procedure],
        plens: NDArray[np.int64] | None = None,
        nruns: NDArray[np.int64] | None = None,
        etime: NDArray[np.float64] | None = None,
    ) -> None:
        self.cfgs = list(cfgs)
        self.procs = list(procs)
        for proc in self.procs:
            if not isinstance(proc, Procedure):
                raise TypeError(
                    f"Invalid procedure; expected Procedure instance but got {type(proc).__name__}"
                )

        shape = self.size()
        if plens is None:
            plens = np.array(
                [[proc.problem_length(cfg) for proc in self.procs] for cfg in self.cfgs],
                dtype=np.int64,
            ).reshape(shape)
        self.plens = self._check_grid("plens", plens, np.int64, shape)
        self.nruns = self._check_grid(
            "nruns", np.zeros(shape, dtype=np.int64) if nruns is None else nruns,
            np.int64, shape,
        )
        self.etime = self._check_grid(
            "etime", np.zeros(shape, dtype=np.float64) if etime is None else etime,
            np.float64, shape,
        )

    @staticmethod
    def _check_grid(
        name: str, grid: Any, dtype: type, shape: tuple[int, int]
    ) -> NDArray:
        arr = np.asarray(grid, dtype=dtype)
        if arr.shape != shape:
            raise ValueError(
                f"Invalid {name} shape; expected {shape} but got {arr.shape}"
            )
        return arr

    def size(self, dim: int | None = None) -> tuple[int, int] | int:
        """Return ``(m, n)``, or the extent along ``dim`` (1 beyond the 2nd)."""
        m, n = len(self.cfgs), len(self.procs)
        if dim is None:
            return (m, n)
        if dim == 0:
            return m
        if dim == 1:
            return n
        return 1

    def cfg_name(self, i: int) -> str:
        """Display name of the i-th configuration."""
        return str(self.cfgs[i])

    def proc_name(self, j: int) -> str:
        """Display name of the j-th procedure."""
        return str(self.procs[j])

    def entry_at(self, i: int, j: int) -> BenchmarkEntry:
        """Return the entry for configuration ``i`` and procedure ``j``."""
        return BenchmarkEntry(
            plen=int(self.plens[i, j]),
            nruns=int(self.nruns[i, j]),
            etime=float(self.etime[i, j]),
        )

    def __getitem__(self, index: tuple[int, int]) -> BenchmarkEntry:
        i, j = index
        return self.entry_at(i, j)

    def record(self, i: int, j: int, nruns: int, etime: float) -> None:
        """Store the measurement of configuration ``i`` and procedure ``j``."""
        self.nruns[i, j] = nruns
        self.etime[i, j] = etime

    def entries(self) -> Iterator[tuple[int, int, BenchmarkEntry]]:
        """Yield ``(i, j, entry)`` for every cell, procedure-major."""
        m, n = self.size()
        for j in range(n):
            for i in range(m):
                yield i, j, self.entry_at(i, j)

    def to_array(self, unit: BenchmarkUnit | str = BenchmarkUnit.SEC) -> NDArray[np.float64]:
        """Return all cells converted into ``unit`` as an m-by-n array."""
        return convert_values(self.plens, self.nruns, self.etime, unit)

    def __repr__(self) -> str:
        m, n = self.size()
        return f"BenchmarkTable(cfgs={m}, procs={n})"
