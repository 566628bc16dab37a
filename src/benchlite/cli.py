"""CLI argument parsing utilities.

Provides a builder for benchmark scripts with the common batch, reporting
and export options pre-configured.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .config import BatchConfig, Verbosity
from .units import BenchmarkUnit


class BenchmarkCLI:
    """Builder for benchmark command-line interfaces.

    Args:
        description: Benchmark description for --help.
    """

    def __init__(self, description: str) -> None:
        """Initialize CLI builder.

        Args:
            description: Benchmark description for --help.
        """
        self.parser = argparse.ArgumentParser(description=description)
        self._add_common_args()

    def _add_common_args(self) -> None:
        """Add common arguments used by most benchmarks."""
        self.parser.add_argument(
            "--duration",
            "-d",
            type=float,
            default=1.0,
            help="Target measuring duration per cell in seconds (default: 1.0)",
        )
        self.parser.add_argument(
            "--verbose",
            "-v",
            type=int,
            choices=[int(v) for v in Verbosity],
            default=int(Verbosity.CELL),
            help="0: silent, 1: one line per procedure, 2: one line per cell (default: 2)",
        )
        self.parser.add_argument(
            "--unit",
            "-u",
            choices=[u.value for u in BenchmarkUnit],
            default=BenchmarkUnit.SEC.value,
            help="Reporting unit (default: sec)",
        )
        self.parser.add_argument(
            "--cfg-head",
            default="config",
            help="Header of the configuration column (default: config)",
        )
        self.parser.add_argument(
            "--csv",
            default=None,
            help="Also write the results as CSV to this path",
        )
        self.parser.add_argument(
            "--log-file",
            default=None,
            help="Also append the progress lines to this file",
        )
        self.parser.add_argument(
            "--no-gc",
            action="store_true",
            help="Disable the garbage collector while measuring",
        )

    def add_sizes_arg(
        self, default: Sequence[int], help_text: str | None = None
    ) -> BenchmarkCLI:
        """Add --sizes/-s argument taking one or more integers.

        Args:
            default: Default sizes.
            help_text: Custom help text (defaults to mentioning the default).

        Returns:
            Self for method chaining.
        """
        self.parser.add_argument(
            "--sizes",
            "-s",
            type=int,
            nargs="+",
            default=list(default),
            help=help_text or f"Configurations to run (default: {list(default)})",
        )
        return self

    def parse(self, argv: Sequence[str] | None = None) -> argparse.Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; ``sys.argv[1:]`` when omitted.

        Returns:
            Parsed arguments namespace.
        """
        return self.parser.parse_args(argv)

    @staticmethod
    def batch_config(args: argparse.Namespace) -> BatchConfig:
        """Build the batch settings selected on the command line."""
        return BatchConfig(
            duration_s=args.duration,
            verbose=Verbosity(args.verbose),
            allow_gc=not args.no_gc,
            log_file=args.log_file,
        )
