"""Lightweight calibrated micro-benchmarking harness."""

from .cli import (
    BenchmarkCLI as BenchmarkCLI,
)
from .config import (
    BatchConfig as BatchConfig,
)
from .config import (
    RunConfig as RunConfig,
)
from .config import (
    Verbosity as Verbosity,
)
from .driver import (
    BatchRunner as BatchRunner,
)
from .driver import (
    run_batch as run_batch,
)
from .engine import (
    gc_suppressed as gc_suppressed,
)
from .engine import (
    run_procedure as run_procedure,
)
from .export import (
    export_csv as export_csv,
)
from .export import (
    write_csv as write_csv,
)
from .procedure import (
    Procedure as Procedure,
)
from .reporting import (
    TableReporter as TableReporter,
)
from .reporting import (
    show_table as show_table,
)
from .table import (
    BenchmarkEntry as BenchmarkEntry,
)
from .table import (
    BenchmarkTable as BenchmarkTable,
)
from .units import (
    BenchmarkUnit as BenchmarkUnit,
)
from .units import (
    convert as convert,
)

# NOTE: Logging is accessible through '.logging' only, so its Logger and
#       LoggerConfig do not clash with the benchmark configuration names.

__all__ = [
    # Procedures
    "Procedure",
    # Results
    "BenchmarkEntry",
    "BenchmarkTable",
    "BenchmarkUnit",
    "convert",
    # Running
    "RunConfig",
    "BatchConfig",
    "Verbosity",
    "gc_suppressed",
    "run_procedure",
    "BatchRunner",
    "run_batch",
    # Output
    "TableReporter",
    "show_table",
    "write_csv",
    "export_csv",
    "BenchmarkCLI",
]

__version__ = "0.1.0"
