"""
Time-related utilities for the application.

Timestamps reported by Serve are epoch seconds. They are serialized here
using ISO-8601 format in UTC so the page can display them consistently.
"""

from datetime import datetime, timezone


def epoch_seconds_to_iso(seconds: float) -> str:
    """Convert epoch seconds to an ISO-8601 UTC timestamp.

    Example:
        1705315351.5 -> 2024-01-15T10:42:31.500000+00:00
    """
    return datetime.fromtimestamp(seconds, tz=timezone.utc).isoformat()


def seconds_since(seconds: float, now: float | None = None) -> float:
    """Elapsed seconds from an epoch timestamp until ``now`` (default: current time).

    Timestamps in the future yield 0 rather than a negative duration.
    """
    if now is None:
        now = datetime.now(timezone.utc).timestamp()
    return max(0.0, float(now - seconds))


def format_duration(seconds: float) -> str:
    """Format a duration the way the dashboard displays it.

    Example:
        format_duration(93784) -> "1d 2h 3m 4s"
        format_duration(42)    -> "42s"
    """
    remaining = int(seconds)
    parts: list[str] = []

    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        value, remaining = divmod(remaining, size)
        if value or parts:
            parts.append(f"{value}{unit}")

    parts.append(f"{remaining}s")
    return " ".join(parts)
