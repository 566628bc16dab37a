"""Procedure interface implemented by every algorithm variant under test."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Procedure(ABC):
    """Base class for a benchmarked procedure.

    The harness calls ``setup()`` once per configuration, ``execute()`` many
    times with the resulting state, and ``teardown()`` once. Only
    ``execute()`` is timed. Configurations are arbitrary caller values; their
    display name is ``str(cfg)``.

    Subclasses must implement:
        describe(): Stable display name.
        problem_length(cfg): Work size used for throughput units.
        execute(cfg, state): One unit of work.
    """

    @abstractmethod
    def describe(self) -> str:
        """Return the display name; must not depend on the configuration."""

    @abstractmethod
    def problem_length(self, cfg: Any) -> int:
        """Return the problem size for ``cfg`` (e.g. number of elements).

        Args:
            cfg: Configuration value.

        Returns:
            Deterministic size, > 0 for valid configurations.
        """

    def is_valid(self, cfg: Any) -> bool:
        """Return whether this procedure can run under ``cfg``.

        Invalid combinations are skipped and recorded as zero runs.
        """
        _ = cfg
        return True

    def setup(self, cfg: Any) -> Any:
        """Allocate the state used by ``execute()``; not timed.

        Returns:
            Opaque state passed to ``execute()`` and ``teardown()``.
        """
        _ = cfg
        return None

    @abstractmethod
    def execute(self, cfg: Any, state: Any) -> None:
        """Perform one unit of work. This is the only timed call.

        Args:
            cfg: Configuration value.
            state: Object returned by ``setup()``.
        """

    def teardown(self, cfg: Any, state: Any) -> None:
        """Release resources created by ``setup()``; not timed."""
        _ = cfg, state

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"
