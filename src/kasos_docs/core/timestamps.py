"""
UTC timestamp helpers (stdlib-only).

The stats files and changelog use the same ISO-8601 shape the site script
expects: millisecond precision with a ``Z`` suffix, e.g.
``2025-07-01T09:30:00.000Z``.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def to_iso8601_z(dt: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and ``Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_date(dt: datetime) -> str:
    """UTC calendar date (``YYYY-MM-DD``) of a datetime."""
    return to_iso8601_z(dt).split("T")[0]


def from_timestamp(seconds: float) -> datetime:
    """Convert a POSIX timestamp (e.g. ``st_mtime``) to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, UTC)


def parse_iso8601(value: str) -> datetime:
    """Parse a timestamp written by :func:`to_iso8601_z`; naive values are UTC.

    Raises:
        ValueError: ``value`` is not an ISO-8601 timestamp.
    """
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
