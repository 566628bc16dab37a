"""Compares the throughput of element-wise vector math functions.

Usage:
    python examples/vecmath.py
    python examples/vecmath.py --unit usec --sizes 16 256 4096 --csv results/vecmath.csv

Each procedure applies one numpy ufunc to a random vector, writing into a
preallocated output buffer. The configuration is the vector length.
"""

from __future__ import annotations

import numpy as np

from benchlite import BenchmarkCLI, Procedure, export_csv, run_batch, show_table


class VecMath(Procedure):
    """Applies ``op`` element-wise to a vector of length ``cfg``."""

    def __init__(self, name: str, op: np.ufunc) -> None:
        self.name = name
        self.op = op

    def describe(self) -> str:
        return f"vec-{self.name}"

    def problem_length(self, cfg: int) -> int:
        return cfg

    def is_valid(self, cfg: int) -> bool:
        return cfg > 0

    def setup(self, cfg: int) -> tuple[np.ndarray, np.ndarray]:
        rng = np.random.default_rng(42)
        # Strictly positive inputs keep log/sqrt finite.
        return rng.random(cfg) + 1e-3, np.zeros(cfg)

    def execute(self, cfg: int, state: tuple[np.ndarray, np.ndarray]) -> None:
        x, y = state
        self.op(x, out=y)


def default_procedures() -> list[Procedure]:
    """Return the sqrt/exp/log/sin procedures."""
    return [
        VecMath("sqrt", np.sqrt),
        VecMath("exp", np.exp),
        VecMath("log", np.log),
        VecMath("sin", np.sin),
    ]


def build_cli() -> BenchmarkCLI:
    """Return the CLI, reporting throughput in mps under a 'len' column."""
    cli = BenchmarkCLI("Vector math function throughput").add_sizes_arg(
        default=[2**k for k in range(4, 12)]
    )
    cli.parser.set_defaults(unit="mps", cfg_head="len")
    return cli


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    cli = build_cli()
    args = cli.parse(argv)

    print("Running log:")
    print("--------------------")
    table = run_batch(default_procedures(), args.sizes, cli.batch_config(args))
    print()

    show_table(table, unit=args.unit, cfg_head=args.cfg_head)

    if args.csv:
        print(f"\nResults exported to: {export_csv(table, args.csv)}")


if __name__ == "__main__":
    main()
