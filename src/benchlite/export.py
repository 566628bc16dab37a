"""CSV export of benchmark tables."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .table import BenchmarkTable

CSV_HEADER = ("proc", "cfg", "length", "nruns", "elapsed")


def write_csv(table: BenchmarkTable, sink: TextIO) -> int:
    """Write one CSV row per cell, procedure-major, to ``sink``.

    Procedure and configuration names are quoted, numbers are not.

    Returns:
        Number of data rows written.
    """
    sink.write(",".join(CSV_HEADER) + "\n")
    writer = csv.writer(sink, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")

    count = 0
    for i, j, entry in table.entries():
        writer.writerow(
            [
                table.proc_name(j),
                table.cfg_name(i),
                entry.plen,
                entry.nruns,
                entry.etime,
            ]
        )
        count += 1
    return count


def export_csv(table: BenchmarkTable, path: str | Path) -> str:
    """Write ``table`` as CSV to ``path``, creating parent directories.

    Returns:
        Path of the written file.
    """
    csv_path = Path(path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    with open(csv_path, "w", newline="") as f:
        write_csv(table, f)
    return str(csv_path)
