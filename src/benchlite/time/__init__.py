"""Clock and timestamp utilities."""

from .time import (
    perf_s as perf_s,
)
from .time import (
    time_iso8601 as time_iso8601,
)
from .time import (
    time_s as time_s,
)
