from collections.abc import Callable

import numpy as np
import pytest

from benchlite import Procedure


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


class SimulatedClock:
    """Clock that only advances when told to."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FixedCostProcedure(Procedure):
    """Procedure whose every execution costs exactly ``cost_s`` simulated seconds."""

    def __init__(self, clock: SimulatedClock, cost_s: float) -> None:
        self.clock = clock
        self.cost_s = cost_s
        self.executions = 0

    def describe(self) -> str:
        return f"fixed-{self.cost_s:g}"

    def problem_length(self, cfg) -> int:
        return 1

    def execute(self, cfg, state) -> None:
        self.executions += 1
        self.clock.advance(self.cost_s)


class RecordingProcedure(Procedure):
    """Procedure that records every lifecycle call it receives."""

    def __init__(self, valid: bool = True, fail_on: str | None = None) -> None:
        self.valid = valid
        self.fail_on = fail_on
        self.calls: list[str] = []

    def describe(self) -> str:
        return "recording"

    def problem_length(self, cfg) -> int:
        return cfg

    def is_valid(self, cfg) -> bool:
        return self.valid

    def setup(self, cfg):
        self.calls.append("setup")
        if self.fail_on == "setup":
            raise RuntimeError("setup failed")
        return {"cfg": cfg}

    def execute(self, cfg, state) -> None:
        self.calls.append("execute")
        if self.fail_on == "execute":
            raise RuntimeError("execute failed")

    def teardown(self, cfg, state) -> None:
        self.calls.append("teardown")
        if self.fail_on == "teardown":
            raise RuntimeError("teardown failed")


class ElementwiseProcedure(Procedure):
    """O(n) vector procedure applying ``fn`` to ``cfg`` elements."""

    def __init__(self, name: str, fn: Callable[[np.ndarray, np.ndarray], None]) -> None:
        self.name = name
        self.fn = fn

    def describe(self) -> str:
        return self.name

    def problem_length(self, cfg: int) -> int:
        return cfg

    def is_valid(self, cfg: int) -> bool:
        return cfg > 0

    def setup(self, cfg: int):
        return np.arange(cfg, dtype=np.float64), np.zeros(cfg)

    def execute(self, cfg: int, state) -> None:
        x, y = state
        self.fn(x, y)


def _double(x: np.ndarray, y: np.ndarray) -> None:
    np.multiply(x, 2.0, out=y)


def _square(x: np.ndarray, y: np.ndarray) -> None:
    np.multiply(x, x, out=y)


@pytest.fixture
def clock() -> SimulatedClock:
    """Return a fresh simulated clock starting at zero."""
    return SimulatedClock()


@pytest.fixture
def double_square() -> list[Procedure]:
    """Return the 'double' and 'square' vector procedures."""
    return [
        ElementwiseProcedure("double", _double),
        ElementwiseProcedure("square", _square),
    ]


@pytest.fixture
def fixed_cost(clock: SimulatedClock) -> Callable[[float], FixedCostProcedure]:
    """Return a factory of fixed-cost procedures sharing the ``clock`` fixture."""

    def _make(cost_s: float) -> FixedCostProcedure:
        return FixedCostProcedure(clock, cost_s)

    return _make


@pytest.fixture
def recording() -> Callable[..., RecordingProcedure]:
    """Return a factory of lifecycle-recording procedures."""
    return RecordingProcedure
