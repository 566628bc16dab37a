from datetime import datetime, timezone
from time import (
    perf_counter,
    time as time_sec,
)


def time_s() -> float:
    """
    Get the current time in seconds since the epoch.

    Returns
    -------
    float
        The current time in seconds.
    """
    return time_sec()


def time_iso8601(timestamp: float | None = None) -> str:
    """
    Format a unix timestamp (default: now) as an ISO 8601 UTC string.

    Returns
    -------
    str
        The timestamp in the format 'YYYY-MM-DDTHH:MM:SS.mmmZ'.
    """
    ts = time_sec() if timestamp is None else timestamp
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def perf_s() -> float:
    """
    Read the monotonic high-resolution benchmark clock.

    Only differences between two readings are meaningful.

    Returns
    -------
    float
        Clock reading in seconds.
    """
    return perf_counter()
