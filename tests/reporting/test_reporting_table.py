"""Tests for table rendering."""

import io

import pytest

from benchlite import BenchmarkTable, Procedure, TableReporter, show_table


class NamedProcedure(Procedure):
    def __init__(self, name: str) -> None:
        self.name = name

    def describe(self) -> str:
        return self.name

    def problem_length(self, cfg: int) -> int:
        return cfg

    def execute(self, cfg, state) -> None:
        pass


@pytest.fixture
def table() -> BenchmarkTable:
    table = BenchmarkTable(
        [10, 100], [NamedProcedure("double"), NamedProcedure("square")]
    )
    table.record(0, 0, 10, 1.0)
    table.record(1, 0, 4, 1.0)
    table.record(0, 1, 8, 2.0)
    table.record(1, 1, 1, 12.5)
    return table


class TestTableReporter:
    """Test the cell grid and alignment."""

    def test_cells(self, table):
        cells = TableReporter().build_cells(table)
        assert cells == [
            ["config", "double", "square"],
            ["10", "0.1000", "0.2500"],
            ["100", "0.2500", "12.5000"],
        ]

    def test_column_widths(self, table):
        reporter = TableReporter()
        assert reporter.column_widths(reporter.build_cells(table)) == [6, 6, 7]

    def test_render_seconds(self, table):
        lines = TableReporter(unit="sec").render(table)
        assert lines == [
            "config  double   square",
            "-----------------------",
            "10      0.1000   0.2500",
            "100     0.2500  12.5000",
        ]

    def test_rows_have_three_padded_columns(self, table):
        reporter = TableReporter()
        widths = reporter.column_widths(reporter.build_cells(table))
        lines = reporter.render(table)
        assert len(lines) == 4
        for line in [lines[0]] + lines[2:]:
            assert len(line) == sum(widths) + 4
            assert len(line.split()) == 3
        assert set(lines[1]) == {"-"}
        assert len(lines[1]) == len(lines[0])

    def test_custom_corner_label(self, table):
        reporter = TableReporter(cfg_head="len")
        lines = reporter.render(table)
        # "len" and "100" are equally wide, so the label column is 3 wide.
        assert reporter.column_widths(reporter.build_cells(table))[0] == 3
        assert lines[0].startswith("len  double")

    def test_throughput_unit(self, table):
        cells = TableReporter(unit="ups").build_cells(table)
        # 10 items * 10 runs / 1s
        assert cells[1][1] == "100.0000"

    def test_unmeasured_cells_render_nan(self):
        table = BenchmarkTable([1], [NamedProcedure("p")])
        cells = TableReporter().build_cells(table)
        assert cells[1][1] == "nan"

    def test_invalid_unit(self):
        with pytest.raises(ValueError, match="Invalid unit"):
            TableReporter(unit="parsecs")


class TestShowTable:
    """Test writing to a sink."""

    def test_writes_lines(self, table):
        sink = io.StringIO()
        show_table(table, sink, unit="msec", cfg_head="n")
        lines = sink.getvalue().splitlines()
        assert len(lines) == 4
        assert lines[0].split() == ["n", "double", "square"]
        assert lines[2].split() == ["10", "100.0000", "250.0000"]

    def test_invalid_unit_writes_nothing(self, table):
        sink = io.StringIO()
        with pytest.raises(ValueError):
            show_table(table, sink, unit="bogus")
        assert sink.getvalue() == ""

    def test_defaults_to_stdout(self, table, capsys):
        show_table(table)
        out = capsys.readouterr().out
        assert out.splitlines()[0].startswith("config")
