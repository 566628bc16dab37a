"""Column-aligned text rendering of benchmark tables."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from .units import BenchmarkUnit

if TYPE_CHECKING:
    from .table import BenchmarkTable

COLUMN_SEP = "  "


class TableReporter:
    """Formats a benchmark table as aligned text.

    The first row holds the procedure names, the first column the
    configuration names, and every body cell the value in ``unit`` with four
    decimals. The label column is left-aligned, value columns right-aligned.

    Args:
        unit: Reporting unit or unit selector (e.g. "mps").
        cfg_head: Text of the top-left corner cell.

    Raises:
        ValueError: If ``unit`` is not a known unit.
    """

    def __init__(
        self, unit: BenchmarkUnit | str = BenchmarkUnit.SEC, cfg_head: str = "config"
    ) -> None:
        self.unit = BenchmarkUnit.parse(unit)
        self.cfg_head = cfg_head

    def build_cells(self, table: BenchmarkTable) -> list[list[str]]:
        """Return the (m+1)-by-(n+1) grid of cell strings."""
        m, n = table.size()
        values = table.to_array(self.unit)

        cells = [[self.cfg_head] + [table.proc_name(j) for j in range(n)]]
        for i in range(m):
            row = [table.cfg_name(i)]
            row.extend(f"{values[i, j]:.4f}" for j in range(n))
            cells.append(row)
        return cells

    @staticmethod
    def column_widths(cells: list[list[str]]) -> list[int]:
        """Return the widest entry of each column, at least 1."""
        ncols = len(cells[0])
        return [max([1] + [len(row[j]) for row in cells]) for j in range(ncols)]

    def render(self, table: BenchmarkTable) -> list[str]:
        """Return the header line, a divider and one line per configuration."""
        cells = self.build_cells(table)
        widths = self.column_widths(cells)

        lines = []
        for row in cells:
            parts = [row[0].ljust(widths[0])]
            parts.extend(text.rjust(w) for text, w in zip(row[1:], widths[1:]))
            lines.append(COLUMN_SEP.join(parts))

        total_width = sum(widths) + len(COLUMN_SEP) * (len(widths) - 1)
        lines.insert(1, "-" * total_width)
        return lines

    def print_table(self, table: BenchmarkTable, sink: TextIO | None = None) -> None:
        """Write the rendered table to ``sink`` (default stdout)."""
        out = sys.stdout if sink is None else sink
        for line in self.render(table):
            out.write(line + "\n")


def show_table(
    table: BenchmarkTable,
    sink: TextIO | None = None,
    unit: BenchmarkUnit | str = BenchmarkUnit.SEC,
    cfg_head: str = "config",
) -> None:
    """Render ``table`` in ``unit`` to ``sink`` (default stdout)."""
    TableReporter(unit=unit, cfg_head=cfg_head).print_table(table, sink)
