"""Reporting units and conversion of raw measurements into them."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Self

import numpy as np
from numpy.typing import ArrayLike, NDArray

if TYPE_CHECKING:
    from .table import BenchmarkEntry


class BenchmarkUnit(StrEnum):
    """Unit in which a benchmark cell is reported."""

    SEC = "sec"
    MSEC = "msec"
    USEC = "usec"
    NSEC = "nsec"
    UPS = "ups"
    KPS = "kps"
    MPS = "mps"
    GPS = "gps"

    @classmethod
    def parse(cls, selector: BenchmarkUnit | str) -> Self:
        """Resolve a unit selector such as ``"mps"``.

        Raises:
            ValueError: If the selector names no known unit.
        """
        if isinstance(selector, cls):
            return selector
        try:
            return cls(selector)
        except ValueError:
            raise ValueError(
                f"Invalid unit; expected one of {[u.value for u in cls]} but got {selector!r}"
            ) from None


# Per-run time units: (etime / nruns) * scale.
_TIME_SCALES = {
    BenchmarkUnit.SEC: 1.0,
    BenchmarkUnit.MSEC: 1.0e3,
    BenchmarkUnit.USEC: 1.0e6,
    BenchmarkUnit.NSEC: 1.0e9,
}

# Throughput units: (scale * plen * nruns) / etime.
_RATE_SCALES = {
    BenchmarkUnit.UPS: 1.0,
    BenchmarkUnit.KPS: 1.0e-3,
    BenchmarkUnit.MPS: 1.0e-6,
    BenchmarkUnit.GPS: 1.0e-9,
}


def convert_values(
    plen: ArrayLike,
    nruns: ArrayLike,
    etime: ArrayLike,
    unit: BenchmarkUnit | str,
) -> NDArray[np.float64]:
    """Convert raw measurements, element-wise, into ``unit``.

    Zero run counts or zero elapsed times never raise: they produce ``nan``
    (0/0) or ``inf`` (x/0), so unmeasured cells stay visible in reports.

    Args:
        plen: Problem lengths.
        nruns: Repeat counts of the measuring stage.
        etime: Elapsed seconds of the measuring stage.
        unit: Target unit or unit selector.

    Returns:
        Converted values with the broadcast shape of the inputs.
    """
    unit = BenchmarkUnit.parse(unit)
    plen = np.asarray(plen, dtype=np.float64)
    nruns = np.asarray(nruns, dtype=np.float64)
    etime = np.asarray(etime, dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore"):
        if unit in _TIME_SCALES:
            return (etime / nruns) * _TIME_SCALES[unit]
        return (_RATE_SCALES[unit] * plen * nruns) / etime


def convert(entry: BenchmarkEntry, unit: BenchmarkUnit | str) -> float:
    """Return the value of a single table entry in ``unit``."""
    return float(convert_values(entry.plen, entry.nruns, entry.etime, unit))
